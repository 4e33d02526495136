"""Data models for recursive summarization."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from tldr_cli.constants import (
    DEFAULT_MAX_CHUNK_CHARS,
    DEFAULT_MAX_COLLAPSE_DEPTH,
    DEFAULT_MAX_CONCURRENT_CHUNKS,
)
from tldr_cli.errors import InvalidArgumentError


@dataclass
class SummarizerConfig:
    """Configuration for summarization operations.

    Example:
        config = SummarizerConfig(max_chunk_chars=8000, timeout=120.0)
        result = await summarize(long_document, service, config)
        print(f"Compression: {result.compression_ratio:.1%}")

    """

    max_chunk_chars: int = DEFAULT_MAX_CHUNK_CHARS
    max_collapse_depth: int = DEFAULT_MAX_COLLAPSE_DEPTH
    max_concurrent_chunks: int = DEFAULT_MAX_CONCURRENT_CHUNKS
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate the limits."""
        if self.max_chunk_chars < 1:
            msg = f"max_chunk_chars must be at least 1, got {self.max_chunk_chars}"
            raise InvalidArgumentError(msg)
        if self.max_collapse_depth < 0:
            msg = f"max_collapse_depth must not be negative, got {self.max_collapse_depth}"
            raise InvalidArgumentError(msg)
        if self.max_concurrent_chunks < 1:
            msg = f"max_concurrent_chunks must be at least 1, got {self.max_concurrent_chunks}"
            raise InvalidArgumentError(msg)
        if self.timeout is not None and self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout}"
            raise InvalidArgumentError(msg)


class SummaryResult(BaseModel):
    """Result of summarization.

    Contains the summary and metadata about the work it took.
    """

    summary: str = Field(..., description="The final summary text")
    input_chars: int = Field(..., ge=0, description="Character count of the input content")
    output_chars: int = Field(..., ge=0, description="Character count of the summary")
    compression_ratio: float = Field(
        ...,
        ge=0.0,
        description="Ratio of output to input characters (lower = more compression)",
    )
    collapse_depth: int = Field(
        default=0,
        ge=0,
        description="Number of split/fan-out levels needed (0 = summarized in one call)",
    )
    chunk_count: int = Field(
        default=1,
        ge=1,
        description="Number of chunks at the first level",
    )
    service_calls: int = Field(default=0, ge=0, description="Summary service calls made")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Timestamp when summary was created",
    )
