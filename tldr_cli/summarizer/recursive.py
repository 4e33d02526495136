"""Recursive map-reduce summarization over fixed-size character chunks.

Simple algorithm:
1. Base case: text that fits ``max_chunk_chars`` goes to the service in one call
2. Map: otherwise split into chunks and summarize each concurrently
3. Join: wait for every chunk, then join the summaries in chunk order
4. Reduce: recurse on the joined summaries until they fit

A text needing ``k`` chunks costs ``k + 1`` service calls when the joined
summaries fit in one more call. Collapse depth is bounded by
``max_collapse_depth``; past it the remaining text is summarized directly.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from tldr_cli.errors import (
    ChunkSummarizationError,
    InvalidArgumentError,
    SummarizationTimeoutError,
)
from tldr_cli.services.base import SummaryService
from tldr_cli.summarizer._utils import compression_ratio, split_text
from tldr_cli.summarizer.models import SummarizerConfig, SummaryResult

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

CHUNK_SEPARATOR = " "


@dataclass
class RecursiveResult:
    """Result of recursive summarization.

    Attributes:
        summary: The final summary.
        collapse_depth: How many split/fan-out levels were needed.
        intermediate_summaries: Chunk summaries of each level, in chunk order.

    """

    summary: str
    collapse_depth: int
    intermediate_summaries: list[list[str]] = field(default_factory=list)


class _CountingService(SummaryService):
    """Delegates to another service and counts the calls made."""

    def __init__(self, inner: SummaryService) -> None:
        self.inner = inner
        self.calls = 0

    async def summarize(self, text: str) -> str:
        self.calls += 1
        return await self.inner.summarize(text)


async def recursive_summarize(
    content: str,
    service: SummaryService,
    config: SummarizerConfig,
) -> RecursiveResult:
    """Summarize content, splitting and collapsing until it fits.

    Args:
        content: The text to summarize.
        service: Summary service used for every call.
        config: Summarizer configuration.

    Returns:
        RecursiveResult with the summary and per-level chunk summaries.

    Raises:
        ChunkSummarizationError: If any chunk at any level failed.
        SummaryServiceError: If a base-case or forced reduction call failed.

    """
    semaphore = asyncio.Semaphore(config.max_concurrent_chunks)
    levels: list[list[str]] = []
    text = content
    depth = 0

    while len(text) > config.max_chunk_chars:
        if depth >= config.max_collapse_depth:
            logger.warning(
                "Hit max collapse depth %d with %d chars left, forcing final summary",
                config.max_collapse_depth,
                len(text),
            )
            break

        chunks = split_text(text, config.max_chunk_chars)
        logger.info(
            "Depth %d: summarizing %d chars as %d chunks",
            depth,
            len(text),
            len(chunks),
        )
        summaries = await _map_summarize(chunks, service, semaphore)
        levels.append(summaries)
        text = CHUNK_SEPARATOR.join(summaries)
        depth += 1

    summary = await service.summarize(text)
    return RecursiveResult(summary=summary, collapse_depth=depth, intermediate_summaries=levels)


async def _map_summarize(
    chunks: Sequence[str],
    service: SummaryService,
    semaphore: asyncio.Semaphore,
) -> list[str]:
    """Summarize each chunk concurrently and return the summaries in chunk order.

    Every chunk task is awaited before any failure is reported, so no task is
    left running when this returns or raises.
    """
    total = len(chunks)

    async def summarize_chunk(idx: int, chunk: str) -> str:
        async with semaphore:
            logger.debug("Summarizing chunk %d/%d (%d chars)", idx + 1, total, len(chunk))
            return await service.summarize(chunk)

    tasks = [summarize_chunk(i, chunk) for i, chunk in enumerate(chunks)]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    failures = [(i, r) for i, r in enumerate(results) if isinstance(r, BaseException)]
    if failures:
        for idx, exc in failures:
            logger.error("Chunk %d/%d failed: %s", idx + 1, total, exc)
        raise ChunkSummarizationError(failures, total) from failures[0][1]

    return cast("list[str]", results)


async def summarize(
    content: str,
    service: SummaryService,
    config: SummarizerConfig | None = None,
) -> SummaryResult:
    """Summarize content to fit within the configured chunk budget.

    Args:
        content: The content to summarize.
        service: Summary service used as the leaf primitive.
        config: Summarizer configuration. Defaults to ``SummarizerConfig()``.

    Returns:
        SummaryResult with summary and work metrics.

    Raises:
        InvalidArgumentError: If content is empty or whitespace only.
        SummarizationTimeoutError: If ``config.timeout`` elapsed first.

    Examples:
        # One call for short content
        result = await summarize("A short note.", service)

        # Bound the whole run to two minutes
        result = await summarize(huge_doc, service, SummarizerConfig(timeout=120))

    """
    config = config or SummarizerConfig()
    if not content or not content.strip():
        msg = "Nothing to summarize: content is empty"
        raise InvalidArgumentError(msg)

    input_chars = len(content)
    logger.info(
        "Summarizing %d chars (max %d per call)",
        input_chars,
        config.max_chunk_chars,
    )

    counter = _CountingService(service)
    deadline = asyncio.timeout(config.timeout)
    try:
        async with deadline:
            result = await recursive_summarize(content, counter, config)
    except TimeoutError as e:
        if not deadline.expired():
            raise
        msg = f"Summarization did not finish within {config.timeout}s"
        raise SummarizationTimeoutError(msg) from e

    output_chars = len(result.summary)
    logger.info(
        "Summarized %d chars to %d in %d calls (depth %d)",
        input_chars,
        output_chars,
        counter.calls,
        result.collapse_depth,
    )
    return SummaryResult(
        summary=result.summary,
        input_chars=input_chars,
        output_chars=output_chars,
        compression_ratio=compression_ratio(input_chars, output_chars),
        collapse_depth=result.collapse_depth,
        chunk_count=len(result.intermediate_summaries[0]) if result.intermediate_summaries else 1,
        service_calls=counter.calls,
    )
