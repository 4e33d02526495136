"""Web server command."""

from __future__ import annotations

import typer
from pydantic import ValidationError

from tldr_cli import config, constants, opts
from tldr_cli.cli import app
from tldr_cli.core.utils import (
    console,
    print_command_line_args,
    print_error_message,
    setup_logging,
)
from tldr_cli.errors import InvalidArgumentError
from tldr_cli.services import get_summary_service
from tldr_cli.summarizer import SummarizerConfig
from tldr_cli.tldr import TLDRConfig


@app.command("serve")
def serve_command(
    *,
    host: str = typer.Option(
        constants.DEFAULT_HOST,
        help="Host to bind the server to.",
        rich_help_panel="Server Configuration",
    ),
    port: int = typer.Option(
        constants.DEFAULT_PORT,
        help="Port to bind the server to.",
        rich_help_panel="Server Configuration",
    ),
    # --- Summarization Options ---
    max_chunk_chars: int = opts.MAX_CHUNK_CHARS,
    max_depth: int = opts.MAX_DEPTH,
    max_concurrent: int = opts.MAX_CONCURRENT,
    timeout: float | None = opts.TIMEOUT,
    fetch_timeout: float = opts.FETCH_TIMEOUT,
    # --- Provider Selection ---
    llm_provider: str = opts.LLM_PROVIDER,
    # --- LLM Configuration ---
    llm_ollama_model: str = opts.LLM_OLLAMA_MODEL,
    llm_ollama_host: str = opts.LLM_OLLAMA_HOST,
    llm_openai_model: str = opts.LLM_OPENAI_MODEL,
    openai_api_key: str | None = opts.OPENAI_API_KEY,
    openai_base_url: str | None = opts.OPENAI_BASE_URL,
    llm_gemini_model: str = opts.LLM_GEMINI_MODEL,
    gemini_api_key: str | None = opts.GEMINI_API_KEY,
    # --- General Options ---
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Logging level.",
        case_sensitive=False,
        rich_help_panel="General Options",
    ),
    log_file: str | None = opts.LOG_FILE,
    config_file: str | None = opts.CONFIG_FILE,
    print_args: bool = opts.PRINT_ARGS,
) -> None:
    """Run the web interface.

    `GET /` serves a form; `POST /api/chat/` with a `summaryUrl` form field
    returns an HTML card with the page's title and summary.
    """
    if print_args:
        print_command_line_args(locals())

    general_cfg = config.General(log_level=log_level, log_file=log_file)
    setup_logging(general_cfg.log_level, general_cfg.log_file, quiet=False)

    try:
        service = get_summary_service(
            config.ProviderSelection(llm_provider=llm_provider),
            config.Ollama(llm_ollama_model=llm_ollama_model, llm_ollama_host=llm_ollama_host),
            config.OpenAILLM(
                llm_openai_model=llm_openai_model,
                openai_api_key=openai_api_key,
                openai_base_url=openai_base_url,
            ),
            config.GeminiLLM(llm_gemini_model=llm_gemini_model, gemini_api_key=gemini_api_key),
            timeout=timeout,
        )
        tldr_config = TLDRConfig(
            summarizer=SummarizerConfig(
                max_chunk_chars=max_chunk_chars,
                max_collapse_depth=max_depth,
                max_concurrent_chunks=max_concurrent,
                timeout=timeout,
            ),
            fetch_timeout=fetch_timeout,
        )
    except (InvalidArgumentError, ValidationError) as e:
        print_error_message(str(e), "Check your provider options or configuration file.")
        raise typer.Exit(1) from e

    import uvicorn  # noqa: PLC0415

    from tldr_cli.server import WebSettings, create_app  # noqa: PLC0415

    server_cfg = config.Server(host=host, port=port)
    fastapi_app = create_app(WebSettings.default(tldr_config), service)

    console.print(
        f"[bold green]Starting TL;DR server on {server_cfg.host}:{server_cfg.port}[/bold green]",
    )
    console.print(f"  🤖 Provider: [blue]{llm_provider}[/blue]")
    console.print(f"  ✂️  Max chunk: [blue]{max_chunk_chars}[/blue] chars")

    uvicorn.run(fastapi_app, host=server_cfg.host, port=server_cfg.port, log_config=None)
