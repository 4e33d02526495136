"""Pydantic models for command configurations and config file loading."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, field_validator

from tldr_cli.core.utils import console

# --- Config File Loading ---

CONFIG_PATH = Path.home() / ".config" / "tldr-cli" / "config.toml"
CONFIG_PATH_2 = Path("tldr-cli-config.toml")


def _replace_dashed_keys(cfg: dict[str, Any]) -> dict[str, Any]:
    """Replace dashed keys with underscores in the config options."""
    return {k.replace("-", "_"): v for k, v in cfg.items()}


def load_config(config_path_str: str | None = None) -> dict[str, Any]:
    """Load the TOML configuration file and process it for nested structures."""
    # Determine which config path to use
    if config_path_str:
        config_path = Path(config_path_str).expanduser()
    elif CONFIG_PATH.exists():
        config_path = CONFIG_PATH
    elif CONFIG_PATH_2.exists():
        config_path = CONFIG_PATH_2
    else:
        return {}

    if config_path.exists():
        try:
            with config_path.open("rb") as f:
                cfg = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            console.print(
                f"[bold red]Error parsing config file {config_path}: {e}[/bold red]",
            )
            return {}
        return {k: _replace_dashed_keys(v) for k, v in cfg.items() if isinstance(v, dict)}

    # Report error only if an explicit path was given
    if config_path_str:
        console.print(
            f"[bold red]Config file not found at {config_path_str}[/bold red]",
        )
    return {}


# --- Pydantic Models for Configuration ---

# --- Panel: Provider Selection ---


class ProviderSelection(BaseModel):
    """Configuration for selecting the summary service provider."""

    llm_provider: Literal["ollama", "openai", "gemini", "static"]


# --- Panel: LLM Configuration ---


class Ollama(BaseModel):
    """Configuration for the local Ollama LLM provider."""

    llm_ollama_model: str
    llm_ollama_host: str


class OpenAILLM(BaseModel):
    """Configuration for the OpenAI LLM provider."""

    llm_openai_model: str
    openai_api_key: str | None = None
    openai_base_url: str | None = None


class GeminiLLM(BaseModel):
    """Configuration for the Gemini LLM provider."""

    llm_gemini_model: str
    gemini_api_key: str | None = None


# --- Panel: Summarization Options ---


class Summarizer(BaseModel):
    """Limits for recursive summarization."""

    max_chunk_chars: int
    max_depth: int
    max_concurrent: int
    timeout: float | None = None
    fetch_timeout: float


# --- Panel: Server Options ---


class Server(BaseModel):
    """Configuration for the web server."""

    host: str
    port: int


# --- Panel: General Options ---


class General(BaseModel):
    """General configuration parameters for logging and I/O."""

    log_level: str
    log_file: str | None = None
    quiet: bool = False

    @field_validator("log_file", mode="before")
    @classmethod
    def _expand_user_path(cls, v: str | None) -> str | None:
        if v:
            return str(Path(v).expanduser())
        return None
