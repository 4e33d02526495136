"""Summarize a web page or local document from the command line."""

from __future__ import annotations

import asyncio
import contextlib
import json
import time
from enum import Enum

import typer
from pydantic import ValidationError
from rich.markup import escape

from tldr_cli import config, opts
from tldr_cli.cli import app
from tldr_cli.core.utils import (
    create_status,
    print_command_line_args,
    print_error_message,
    print_output_panel,
    setup_logging,
)
from tldr_cli.errors import (
    FetchError,
    InvalidArgumentError,
    SummarizationError,
    SummaryServiceError,
)
from tldr_cli.services import get_summary_service
from tldr_cli.summarizer import SummarizerConfig
from tldr_cli.tldr import TLDRConfig, TLDRResult, tldr


class OutputFormat(str, Enum):
    """Output format for the summarization result."""

    text = "text"
    json = "json"


def _display_result(
    result: TLDRResult,
    elapsed: float,
    output_format: OutputFormat,
    *,
    quiet: bool,
) -> None:
    """Display the summary and its title."""
    if output_format == OutputFormat.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return

    if quiet:
        print(result.title)
        print()
        print(result.summary)
        return

    stats = result.result
    print_output_panel(
        result.summary,
        title=escape(result.title),
        subtitle=(
            f"[dim]{escape(result.url)} | {stats.service_calls} calls | "
            f"depth {stats.collapse_depth} | {stats.compression_ratio:.1%} of original | "
            f"{elapsed:.2f}s[/dim]"
        ),
    )


async def _async_summarize(
    address: str,
    *,
    provider_cfg: config.ProviderSelection,
    ollama_cfg: config.Ollama,
    openai_llm_cfg: config.OpenAILLM,
    gemini_llm_cfg: config.GeminiLLM,
    summarizer_cfg: config.Summarizer,
    general_cfg: config.General,
    output_format: OutputFormat,
) -> None:
    """Asynchronous summarization entry point."""
    setup_logging(general_cfg.log_level, general_cfg.log_file, quiet=general_cfg.quiet)

    try:
        service = get_summary_service(
            provider_cfg,
            ollama_cfg,
            openai_llm_cfg,
            gemini_llm_cfg,
            timeout=summarizer_cfg.timeout,
        )
        tldr_config = TLDRConfig(
            summarizer=SummarizerConfig(
                max_chunk_chars=summarizer_cfg.max_chunk_chars,
                max_collapse_depth=summarizer_cfg.max_depth,
                max_concurrent_chunks=summarizer_cfg.max_concurrent,
                timeout=summarizer_cfg.timeout,
            ),
            fetch_timeout=summarizer_cfg.fetch_timeout,
        )
    except InvalidArgumentError as e:
        print_error_message(str(e), "Check your provider options or configuration file.")
        raise typer.Exit(1) from e

    if general_cfg.quiet or output_format == OutputFormat.json:
        status = contextlib.nullcontext()
    else:
        status = create_status(f"Summarizing {escape(address)}...", "bold yellow")

    try:
        with status:
            start_time = time.monotonic()
            result = await tldr(address, service, tldr_config)
            elapsed = time.monotonic() - start_time
    except (FetchError, InvalidArgumentError) as e:
        print_error_message(str(e), "Check that the address is reachable and contains readable text.")
        raise typer.Exit(1) from e
    except (SummaryServiceError, SummarizationError) as e:
        print_error_message(str(e), f"Check that your '{provider_cfg.llm_provider}' LLM provider is reachable.")
        raise typer.Exit(1) from e

    _display_result(result, elapsed, output_format, quiet=general_cfg.quiet)


@app.command("summarize")
def summarize_command(
    *,
    address: str = typer.Argument(
        ...,
        help="URL, bare domain (https:// is assumed) or local file to summarize.",
    ),
    # --- Summarization Options ---
    max_chunk_chars: int = opts.MAX_CHUNK_CHARS,
    max_depth: int = opts.MAX_DEPTH,
    max_concurrent: int = opts.MAX_CONCURRENT,
    timeout: float | None = opts.TIMEOUT,
    fetch_timeout: float = opts.FETCH_TIMEOUT,
    # --- Output Options ---
    output_format: OutputFormat = typer.Option(  # noqa: B008
        OutputFormat.text,
        "--output",
        "-o",
        help="Output format: 'text' (title and summary) or 'json' (full result).",
        rich_help_panel="Output Options",
    ),
    # --- Provider Selection ---
    llm_provider: str = opts.LLM_PROVIDER,
    # --- LLM Configuration ---
    # Ollama (local service)
    llm_ollama_model: str = opts.LLM_OLLAMA_MODEL,
    llm_ollama_host: str = opts.LLM_OLLAMA_HOST,
    # OpenAI
    llm_openai_model: str = opts.LLM_OPENAI_MODEL,
    openai_api_key: str | None = opts.OPENAI_API_KEY,
    openai_base_url: str | None = opts.OPENAI_BASE_URL,
    # Gemini
    llm_gemini_model: str = opts.LLM_GEMINI_MODEL,
    gemini_api_key: str | None = opts.GEMINI_API_KEY,
    # --- General Options ---
    log_level: str = opts.LOG_LEVEL,
    log_file: str | None = opts.LOG_FILE,
    quiet: bool = opts.QUIET,
    config_file: str | None = opts.CONFIG_FILE,
    print_args: bool = opts.PRINT_ARGS,
) -> None:
    """Fetch a page, summarize it recursively, and give it a title.

    Content longer than `--max-chunk-chars` is split into chunks that are
    summarized in parallel; the joined chunk summaries are summarized again
    until they fit.

    Examples:
        # Summarize an article
        tldr-cli summarize https://example.com/article

        # A bare domain works too
        tldr-cli summarize example.com/article

        # Summarize a local file with OpenAI
        tldr-cli summarize notes.html --llm-provider openai

    """
    if print_args:
        print_command_line_args(locals())

    try:
        provider_cfg = config.ProviderSelection(llm_provider=llm_provider)
    except ValidationError as e:
        print_error_message(
            f"Unknown LLM provider: {llm_provider}",
            "Use one of 'ollama', 'openai', 'gemini' or 'static'.",
        )
        raise typer.Exit(1) from e
    ollama_cfg = config.Ollama(
        llm_ollama_model=llm_ollama_model,
        llm_ollama_host=llm_ollama_host,
    )
    openai_llm_cfg = config.OpenAILLM(
        llm_openai_model=llm_openai_model,
        openai_api_key=openai_api_key,
        openai_base_url=openai_base_url,
    )
    gemini_llm_cfg = config.GeminiLLM(
        llm_gemini_model=llm_gemini_model,
        gemini_api_key=gemini_api_key,
    )
    summarizer_cfg = config.Summarizer(
        max_chunk_chars=max_chunk_chars,
        max_depth=max_depth,
        max_concurrent=max_concurrent,
        timeout=timeout,
        fetch_timeout=fetch_timeout,
    )
    general_cfg = config.General(
        log_level=log_level,
        log_file=log_file,
        quiet=quiet,
    )

    asyncio.run(
        _async_summarize(
            address,
            provider_cfg=provider_cfg,
            ollama_cfg=ollama_cfg,
            openai_llm_cfg=openai_llm_cfg,
            gemini_llm_cfg=gemini_llm_cfg,
            summarizer_cfg=summarizer_cfg,
            general_cfg=general_cfg,
            output_format=output_format,
        ),
    )
