"""Summarize-and-title flow: address -> content -> summary -> title."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel

from tldr_cli.constants import DEFAULT_FETCH_TIMEOUT
from tldr_cli.content import fetch_content
from tldr_cli.errors import SummarizationTimeoutError
from tldr_cli.summarizer import SummarizerConfig, SummaryResult, generate_title, summarize

if TYPE_CHECKING:
    import httpx

    from tldr_cli.services import SummaryService

logger = logging.getLogger(__name__)


@dataclass
class TLDRConfig:
    """Settings for one summarize-and-title request."""

    summarizer: SummarizerConfig = field(default_factory=SummarizerConfig)
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT


class TLDRResult(BaseModel):
    """A finished summary of one address, with its generated title."""

    address: str
    url: str
    title: str
    summary: str
    result: SummaryResult


async def tldr(
    address: str,
    service: SummaryService,
    config: TLDRConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    allow_local: bool = True,
) -> TLDRResult:
    """Fetch ``address``, summarize its text, then title the summary.

    ``config.summarizer.timeout`` bounds the summary and the title together.
    Pass ``allow_local=False`` where the address comes from an untrusted caller.

    Any ``TLDRError`` from fetching, summarizing or titling propagates; nothing
    is returned unless both the summary and the title were produced.
    """
    config = config or TLDRConfig()
    content = await fetch_content(
        address,
        timeout=config.fetch_timeout,
        client=client,
        allow_local=allow_local,
    )

    deadline = asyncio.timeout(config.summarizer.timeout)
    try:
        async with deadline:
            result = await summarize(content.text, service, config.summarizer)
            title = await generate_title(result.summary, service)
    except TimeoutError as e:
        if not deadline.expired():
            raise
        msg = f"Summary and title did not finish within {config.summarizer.timeout}s"
        raise SummarizationTimeoutError(msg) from e
    logger.info("Summarized %s as %r", content.url, title)
    return TLDRResult(
        address=address,
        url=content.url,
        title=title,
        summary=result.summary,
        result=result,
    )
