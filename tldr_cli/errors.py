"""Error taxonomy shared by the content source, summarizer and services."""

from __future__ import annotations


class TLDRError(Exception):
    """Base class for every error surfaced to the request boundary."""


class FetchError(TLDRError):
    """The content source could not retrieve or parse the target."""


class InvalidArgumentError(TLDRError, ValueError):
    """An argument is out of range or an address cannot be resolved."""


class SummaryServiceError(TLDRError):
    """The text-generation service failed to produce a response."""


class SummarizationError(TLDRError):
    """Raised when recursive summarization cannot produce a complete summary."""


class ChunkSummarizationError(SummarizationError):
    """One or more chunks failed during the fan-out phase.

    Attributes:
        failures: ``(chunk_index, exception)`` pairs, ordered by chunk index.
        total_chunks: Number of chunks submitted at the failing level.

    """

    def __init__(self, failures: list[tuple[int, BaseException]], total_chunks: int) -> None:
        self.failures = failures
        self.total_chunks = total_chunks
        indices = ", ".join(str(i) for i, _ in failures)
        first = failures[0][1] if failures else None
        msg = f"{len(failures)} of {total_chunks} chunks failed to summarize (chunks: {indices})"
        if first is not None:
            msg += f": {first}"
        super().__init__(msg)


class SummarizationTimeoutError(SummarizationError):
    """Summarization did not finish before its deadline."""
