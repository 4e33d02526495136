"""Deterministic summary service returning a canned response."""

from __future__ import annotations

from tldr_cli.constants import STATIC_SUMMARY
from tldr_cli.services.base import SummaryService


class StaticSummaryService(SummaryService):
    """Always answers with the same string and records what it was asked."""

    def __init__(self, response: str = STATIC_SUMMARY) -> None:
        """Initialize the static service."""
        self.response = response
        self.calls: list[str] = []

    async def summarize(self, text: str) -> str:
        """Record ``text`` and return the canned response."""
        self.calls.append(text)
        return self.response
