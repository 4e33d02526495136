"""Title generation for finished summaries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tldr_cli.services import SummaryService

logger = logging.getLogger(__name__)

TITLE_PROMPT = "Given the summary, generate a title for this article: {summary}?"

_QUOTES = "\"'“”‘’"


async def generate_title(summary: str, service: SummaryService) -> str:
    """Ask the summary service for a short title describing ``summary``.

    Issues exactly one call; failures propagate unchanged.
    """
    title = await service.summarize(TITLE_PROMPT.format(summary=summary))
    title = title.strip().strip(_QUOTES).strip()
    logger.debug("Generated title: %s", title)
    return title
