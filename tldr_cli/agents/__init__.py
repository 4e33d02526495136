"""Command implementations for the tldr-cli."""

from . import serve, summarize

__all__ = ["serve", "summarize"]
