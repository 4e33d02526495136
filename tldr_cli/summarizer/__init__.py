"""Recursive chunked summarization of arbitrarily long text.

The algorithm:
1. If content fits ``max_chunk_chars``, summarize it with a single call
2. Otherwise, split into fixed-size chunks and summarize each concurrently
3. Join the chunk summaries in order and recurse until the result fits

Example:
    from tldr_cli.services import StaticSummaryService
    from tldr_cli.summarizer import SummarizerConfig, summarize

    service = StaticSummaryService("A summary of the article")
    result = await summarize(long_document, service, SummarizerConfig())
    print(result.summary, result.collapse_depth)

"""

from tldr_cli.errors import (
    ChunkSummarizationError,
    SummarizationError,
    SummarizationTimeoutError,
)
from tldr_cli.summarizer._utils import split_text
from tldr_cli.summarizer.models import SummarizerConfig, SummaryResult
from tldr_cli.summarizer.recursive import recursive_summarize, summarize
from tldr_cli.summarizer.title import generate_title

__all__ = [
    "ChunkSummarizationError",
    "SummarizationError",
    "SummarizationTimeoutError",
    "SummarizerConfig",
    "SummaryResult",
    "generate_title",
    "recursive_summarize",
    "split_text",
    "summarize",
]
