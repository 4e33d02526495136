"""Tests for the fetch, summarize and title flow."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from tests.mocks.services import FailingService
from tldr_cli.errors import (
    ChunkSummarizationError,
    FetchError,
    InvalidArgumentError,
    SummarizationTimeoutError,
)
from tldr_cli.services import StaticSummaryService
from tldr_cli.summarizer import SummarizerConfig
from tldr_cli.summarizer.title import TITLE_PROMPT
from tldr_cli.tldr import TLDRConfig, tldr

if TYPE_CHECKING:
    from pathlib import Path


def _client(status: int = 200, text: str = "") -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(status, text=text)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_tldr_summarizes_then_titles(static_service: StaticSummaryService) -> None:
    """Test that the page text is summarized and the summary is titled."""
    async with _client(text="A plain text article about tides.") as client:
        result = await tldr("example.com/tides", static_service, client=client)

    assert static_service.calls == [
        "A plain text article about tides.",
        TITLE_PROMPT.format(summary="A summary of the article"),
    ]
    assert result.address == "example.com/tides"
    assert result.url == "https://example.com/tides"
    assert result.title == "A summary of the article"
    assert result.summary == "A summary of the article"
    assert result.result.service_calls == 1


@pytest.mark.asyncio
async def test_tldr_uses_chunked_summary() -> None:
    """Test that long pages go through the recursive summarizer."""
    service = StaticSummaryService("ok")
    config = TLDRConfig(summarizer=SummarizerConfig(max_chunk_chars=10))
    async with _client(text="x" * 25) as client:
        result = await tldr("https://example.com/long", service, config, client=client)

    assert result.result.chunk_count == 3
    # 3 chunks, the reduction of their joined summaries, and the title
    assert service.calls[3] == "ok ok ok"
    assert len(service.calls) == 5
    assert service.calls[-1].startswith("Given the summary")


@pytest.mark.asyncio
async def test_tldr_fetch_error_makes_no_calls(static_service: StaticSummaryService) -> None:
    """Test that nothing is summarized when the page cannot be fetched."""
    async with _client(status=500) as client:
        with pytest.raises(FetchError, match="HTTP 500"):
            await tldr("https://example.com/broken", static_service, client=client)

    assert static_service.calls == []


@pytest.mark.asyncio
async def test_tldr_summary_failure_skips_title() -> None:
    """Test that no title is requested when summarization fails."""
    service = FailingService("bad")
    config = TLDRConfig(summarizer=SummarizerConfig(max_chunk_chars=4))
    async with _client(text="goodbad!") as client:
        with pytest.raises(ChunkSummarizationError):
            await tldr("https://example.com/a", service, config, client=client)

    assert not any(call.startswith("Given the summary") for call in service.calls)


class _SlowTitleService(StaticSummaryService):
    """Answers summaries at once but stalls on the title prompt."""

    async def summarize(self, text: str) -> str:
        response = await super().summarize(text)
        if text.startswith("Given the summary"):
            await asyncio.sleep(60)
        return response


@pytest.mark.asyncio
async def test_tldr_timeout_bounds_title() -> None:
    """Test that the summarization deadline also covers the title call."""
    service = _SlowTitleService()
    config = TLDRConfig(summarizer=SummarizerConfig(timeout=0.05))
    async with _client(text="A short article.") as client:
        with pytest.raises(SummarizationTimeoutError, match=r"within 0\.05s"):
            await tldr("https://example.com/a", service, config, client=client)

    assert service.calls[0] == "A short article."
    assert len(service.calls) == 2


@pytest.mark.asyncio
async def test_tldr_refuses_local_files_when_disallowed(
    static_service: StaticSummaryService,
    tmp_path: Path,
) -> None:
    """Test that allow_local=False keeps files on this host out of the flow."""
    path = tmp_path / "notes.txt"
    path.write_text("private notes", encoding="utf-8")

    with pytest.raises(InvalidArgumentError):
        await tldr(str(path), static_service, allow_local=False)

    assert static_service.calls == []
    # The same file is fine for local callers
    result = await tldr(str(path), static_service)
    assert static_service.calls[0] == "private notes"
    assert result.title == "A summary of the article"
