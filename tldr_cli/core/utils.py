"""Console, logging and output helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.status import Status
from rich.text import Text

if TYPE_CHECKING:
    from pathlib import Path

console = Console()
err_console = Console(stderr=True)

_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "uvicorn.access")


def setup_logging(log_level: str, log_file: str | Path | None, *, quiet: bool) -> None:
    """Configure the root logger with a rich console handler and an optional file."""
    handlers: list[logging.Handler] = []
    if not quiet:
        handlers.append(RichHandler(console=err_console, rich_tracebacks=True, show_path=False))
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        )
        handlers.append(file_handler)
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
    # Suppress noisy logs from libraries
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def print_command_line_args(args: dict[str, Any]) -> None:
    """Print the command line arguments, hiding secrets."""
    lines = []
    for key, value in sorted(args.items()):
        shown = "***" if value and key.endswith("api_key") else value
        lines.append(f"[bold blue]{key}[/bold blue]: {shown}")
    console.print(Panel("\n".join(lines), title="Command Line Arguments", border_style="blue"))


def print_output_panel(
    output: str,
    title: str = "Output",
    subtitle: str = "",
    style: str = "green",
) -> None:
    """Print data in a rich panel."""
    console.print(
        Panel(Text(output), title=title, subtitle=subtitle, border_style=style),
    )


def print_error_message(message: str, suggestion: str | None = None) -> None:
    """Print an error message in a panel."""
    error_text = Text(message)
    if suggestion:
        error_text.append("\n\n")
        error_text.append(suggestion)
    err_console.print(Panel(error_text, title="Error", border_style="bold red"))


def create_status(message: str, style: str = "bold yellow") -> Status:
    """Create a rich Status spinner on the error console."""
    return Status(f"[{style}]{message}[/{style}]", console=err_console)
