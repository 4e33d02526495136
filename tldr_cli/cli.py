"""Typer application shared by the `summarize` and `serve` commands."""

from __future__ import annotations

from typing import Any

import typer

from . import __version__
from .config import load_config
from .core.utils import console, err_console

app = typer.Typer(
    name="tldr-cli",
    help="Summarize web pages and documents with an LLM, from the terminal or a web form.",
    add_completion=True,
    rich_markup_mode="markdown",
)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        console.print(f"tldr-cli {__version__}")
        raise typer.Exit


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(  # noqa: ARG001, FBT001
        False,  # noqa: FBT003
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Summarize web pages and documents with an LLM."""
    if ctx.invoked_subcommand is None:
        console.print("[bold red]No command specified.[/bold red]")
        console.print("[bold yellow]Running --help for your convenience.[/bold yellow]")
        console.print(ctx.get_help())
        raise typer.Exit
    import dotenv  # noqa: PLC0415

    dotenv.load_dotenv()


def set_config_defaults(ctx: typer.Context, config_file: str | None) -> None:
    """Use the config file's `[defaults]` and per-command tables as option defaults.

    The command's own table wins over `[defaults]`. Keys the command has no
    option for are dropped; in the command's own table they are reported,
    since they are most likely typos.
    """
    tables = load_config(config_file)
    defaults: dict[str, Any] = dict(tables.get("defaults", {}))
    command = ctx.command.name
    if not command:
        ctx.default_map = defaults
        return

    own = tables.get(command, {})
    accepted = {param.name for param in ctx.command.params}
    if accepted:
        unknown = sorted(set(own) - accepted)
        if unknown:
            err_console.print(
                f"Ignoring unknown keys in the [{command}] config table: {', '.join(unknown)}",
                style="yellow",
                markup=False,
                highlight=False,
            )
        defaults = {k: v for k, v in defaults.items() if k in accepted}
        own = {k: v for k, v in own.items() if k in accepted}
    ctx.default_map = {**defaults, **own}


# Import commands from other modules to register them
from .agents import serve, summarize  # noqa: E402, F401
