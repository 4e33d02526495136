"""Summary services: the text-generation backends the summarizer calls."""

from __future__ import annotations

from tldr_cli.services.base import SummaryService
from tldr_cli.services.factory import get_summary_service
from tldr_cli.services.llm import SUMMARY_SYSTEM_PROMPT, LLMSummaryService
from tldr_cli.services.static import StaticSummaryService

__all__ = [
    "SUMMARY_SYSTEM_PROMPT",
    "LLMSummaryService",
    "StaticSummaryService",
    "SummaryService",
    "get_summary_service",
]
