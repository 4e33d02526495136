"""Shared test fixtures and configuration."""

from __future__ import annotations

import contextlib

import pytest

from tldr_cli.services import StaticSummaryService

ARTICLE_HTML = """
<html>
<head><title>Deep Sea Discovery</title></head>
<body>
  <nav><a href="/">Home</a> <a href="/news">News</a> <a href="/about">About</a></nav>
  <article>
    <h1>Deep Sea Discovery</h1>
    <p>Scientists at the Marine Biology Institute have made a groundbreaking discovery
    in the Mariana Trench, finding a new species of fish living below 8,000 meters.</p>
    <p>The research team used unmanned submersibles equipped with high-resolution cameras
    and collection apparatus during an expedition that lasted three months.</p>
    <p>The fish displays translucent skin, specialized proteins that prevent cellular damage
    under pressure, and an unusual metabolism that allows survival with minimal oxygen.</p>
  </article>
  <footer>Copyright 2024</footer>
</body>
</html>
"""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Set default timeout for all tests."""
    for item in items:
        with contextlib.suppress(AttributeError):
            item.add_marker(pytest.mark.timeout(3))


@pytest.fixture
def static_service() -> StaticSummaryService:
    """Provide the canned summary service."""
    return StaticSummaryService("A summary of the article")


@pytest.fixture
def article_html() -> str:
    """Provide a small article page."""
    return ARTICLE_HTML
