"""Summary service backed by an OpenAI-compatible chat model via PydanticAI."""

from __future__ import annotations

import logging

from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from tldr_cli.errors import SummaryServiceError
from tldr_cli.services.base import SummaryService

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT = (
    "Please summarise the provided text as best you can. The shorter the better. "
    "If there is a general thesis statement, please provide it."
)


class SummaryOutput(BaseModel):
    """Structured output for summary generation."""

    summary: str


class LLMSummaryService(SummaryService):
    """Summarize through any OpenAI-compatible endpoint (OpenAI, Ollama, Gemini)."""

    def __init__(
        self,
        *,
        openai_base_url: str,
        model: str,
        api_key: str | None = None,
        timeout: float | None = None,
        temperature: float = 0.3,
        system_prompt: str = SUMMARY_SYSTEM_PROMPT,
    ) -> None:
        """Initialize the service and build its agent."""
        self.openai_base_url = openai_base_url.rstrip("/")
        self.model = model
        settings = ModelSettings(temperature=temperature)
        if timeout is not None:
            settings["timeout"] = timeout

        provider = OpenAIProvider(
            api_key=api_key or "not-needed",
            base_url=self.openai_base_url,
        )
        self.agent = Agent(
            model=OpenAIChatModel(model_name=model, provider=provider, settings=settings),
            system_prompt=system_prompt,
            output_type=SummaryOutput,
            retries=2,
        )

    async def summarize(self, text: str) -> str:
        """Call the LLM to generate a summary.

        Raises:
            SummaryServiceError: If the LLM call fails.

        """
        logger.debug("Requesting summary of %d chars from %s", len(text), self.model)
        try:
            result = await self.agent.run(text)
        except Exception as e:
            msg = f"Summary service call to {self.model} failed: {e}"
            raise SummaryServiceError(msg) from e
        return result.output.summary.strip()
