"""Abstract base class for summary services."""

from abc import ABC, abstractmethod


class SummaryService(ABC):
    """Turns a text into a shorter text.

    Implementations raise ``SummaryServiceError`` on failure and must let
    ``asyncio.CancelledError`` propagate.
    """

    @abstractmethod
    async def summarize(self, text: str) -> str:
        """Return a summary of ``text``."""
        ...
