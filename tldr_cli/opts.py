"""Shared Typer options for the tldr-cli commands."""

from __future__ import annotations

import typer

from tldr_cli import constants


def _config_callback(ctx: typer.Context, value: str | None) -> str | None:
    """Load the config file before the other options are resolved."""
    from tldr_cli.cli import set_config_defaults  # noqa: PLC0415

    set_config_defaults(ctx, value)
    return value


# --- Provider Selection ---
LLM_PROVIDER: str = typer.Option(
    "ollama",
    "--llm-provider",
    help="The LLM provider to use ('ollama', 'openai', 'gemini', or 'static' for a canned reply).",
    rich_help_panel="Provider Selection",
)

# --- LLM Configuration ---
# Ollama (local service)
LLM_OLLAMA_MODEL: str = typer.Option(
    constants.DEFAULT_OLLAMA_MODEL,
    "--llm-ollama-model",
    help="The Ollama model to use.",
    rich_help_panel="LLM Configuration: Ollama (local)",
)
LLM_OLLAMA_HOST: str = typer.Option(
    constants.DEFAULT_OLLAMA_HOST,
    "--llm-ollama-host",
    help="The Ollama server host.",
    rich_help_panel="LLM Configuration: Ollama (local)",
)
# OpenAI
LLM_OPENAI_MODEL: str = typer.Option(
    constants.DEFAULT_OPENAI_MODEL,
    "--llm-openai-model",
    help="The OpenAI model to use.",
    rich_help_panel="LLM Configuration: OpenAI",
)
OPENAI_API_KEY: str | None = typer.Option(
    None,
    "--openai-api-key",
    help="Your OpenAI API key. Can also be set with the OPENAI_API_KEY environment variable.",
    envvar="OPENAI_API_KEY",
    rich_help_panel="LLM Configuration: OpenAI",
)
OPENAI_BASE_URL: str | None = typer.Option(
    None,
    "--openai-base-url",
    help="Custom base URL for an OpenAI-compatible API (e.g. a llama-server).",
    envvar="OPENAI_BASE_URL",
    rich_help_panel="LLM Configuration: OpenAI",
)
# Gemini
LLM_GEMINI_MODEL: str = typer.Option(
    constants.DEFAULT_GEMINI_MODEL,
    "--llm-gemini-model",
    help="The Gemini model to use.",
    rich_help_panel="LLM Configuration: Gemini",
)
GEMINI_API_KEY: str | None = typer.Option(
    None,
    "--gemini-api-key",
    help="Your Gemini API key. Can also be set with the GEMINI_API_KEY environment variable.",
    envvar="GEMINI_API_KEY",
    rich_help_panel="LLM Configuration: Gemini",
)

# --- Summarization Options ---
MAX_CHUNK_CHARS: int = typer.Option(
    constants.DEFAULT_MAX_CHUNK_CHARS,
    "--max-chunk-chars",
    min=1,
    help="Longest text sent in one summary call; longer content is split into chunks.",
    rich_help_panel="Summarization Options",
)
MAX_DEPTH: int = typer.Option(
    constants.DEFAULT_MAX_COLLAPSE_DEPTH,
    "--max-depth",
    min=0,
    help="Maximum number of split/summarize rounds before forcing a final summary.",
    rich_help_panel="Summarization Options",
)
MAX_CONCURRENT: int = typer.Option(
    constants.DEFAULT_MAX_CONCURRENT_CHUNKS,
    "--max-concurrent",
    min=1,
    help="Maximum number of chunks to summarize in parallel.",
    rich_help_panel="Summarization Options",
)
TIMEOUT: float | None = typer.Option(
    None,
    "--timeout",
    help="Deadline in seconds for summarizing and titling the document (default: none).",
    rich_help_panel="Summarization Options",
)
FETCH_TIMEOUT: float = typer.Option(
    constants.DEFAULT_FETCH_TIMEOUT,
    "--fetch-timeout",
    help="Timeout in seconds for fetching the document.",
    rich_help_panel="Summarization Options",
)

# --- General Options ---
LOG_LEVEL: str = typer.Option(
    "WARNING",
    "--log-level",
    help="Set logging level.",
    case_sensitive=False,
    rich_help_panel="General Options",
)
LOG_FILE: str | None = typer.Option(
    None,
    "--log-file",
    help="Path to a file to write logs to.",
    rich_help_panel="General Options",
)
QUIET: bool = typer.Option(
    False,  # noqa: FBT003
    "--quiet",
    "-q",
    help="Suppress console output from rich.",
    rich_help_panel="General Options",
)
CONFIG_FILE: str | None = typer.Option(
    None,
    "--config",
    is_eager=True,
    callback=_config_callback,
    help="Path to a TOML configuration file.",
    rich_help_panel="General Options",
)
PRINT_ARGS: bool = typer.Option(
    False,  # noqa: FBT003
    "--print-args",
    help="Print the command line arguments, including variables taken from the configuration file.",
    rich_help_panel="General Options",
)
