"""Factory functions for creating summary services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tldr_cli.constants import DEFAULT_OPENAI_BASE_URL, GEMINI_OPENAI_BASE_URL
from tldr_cli.errors import InvalidArgumentError
from tldr_cli.services.llm import LLMSummaryService
from tldr_cli.services.static import StaticSummaryService

if TYPE_CHECKING:
    from tldr_cli import config
    from tldr_cli.services.base import SummaryService


def get_llm_config(
    provider_cfg: config.ProviderSelection,
    ollama_cfg: config.Ollama,
    openai_llm_cfg: config.OpenAILLM,
    gemini_llm_cfg: config.GeminiLLM,
) -> tuple[str, str, str | None]:
    """Get openai_base_url, model, and api_key from provider config."""
    if provider_cfg.llm_provider == "ollama":
        # Ollama uses OpenAI-compatible API at /v1
        base_url = ollama_cfg.llm_ollama_host.rstrip("/")
        if not base_url.endswith("/v1"):
            base_url = f"{base_url}/v1"
        return base_url, ollama_cfg.llm_ollama_model, None
    if provider_cfg.llm_provider == "openai":
        if not openai_llm_cfg.openai_api_key and not openai_llm_cfg.openai_base_url:
            msg = "OpenAI API key is not set."
            raise InvalidArgumentError(msg)
        base_url = openai_llm_cfg.openai_base_url or DEFAULT_OPENAI_BASE_URL
        return base_url, openai_llm_cfg.llm_openai_model, openai_llm_cfg.openai_api_key
    if provider_cfg.llm_provider == "gemini":
        if not gemini_llm_cfg.gemini_api_key:
            msg = "Gemini API key is not set."
            raise InvalidArgumentError(msg)
        return (
            GEMINI_OPENAI_BASE_URL,
            gemini_llm_cfg.llm_gemini_model,
            gemini_llm_cfg.gemini_api_key,
        )
    msg = f"Unsupported LLM provider: {provider_cfg.llm_provider}"
    raise InvalidArgumentError(msg)


def get_summary_service(
    provider_cfg: config.ProviderSelection,
    ollama_cfg: config.Ollama,
    openai_llm_cfg: config.OpenAILLM,
    gemini_llm_cfg: config.GeminiLLM,
    *,
    timeout: float | None = None,
) -> SummaryService:
    """Return the summary service for the selected provider."""
    if provider_cfg.llm_provider == "static":
        return StaticSummaryService()
    openai_base_url, model, api_key = get_llm_config(
        provider_cfg,
        ollama_cfg,
        openai_llm_cfg,
        gemini_llm_cfg,
    )
    return LLMSummaryService(
        openai_base_url=openai_base_url,
        model=model,
        api_key=api_key,
        timeout=timeout,
    )
