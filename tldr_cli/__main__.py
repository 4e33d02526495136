"""Allow running ``python -m tldr_cli``."""

from tldr_cli.cli import app

app()
