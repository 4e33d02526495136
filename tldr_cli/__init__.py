"""Fetch a web page, summarize it recursively with an LLM, and title it."""

from __future__ import annotations

__version__ = "0.1.0"
