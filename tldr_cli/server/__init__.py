"""Web interface: an HTML form that returns summary cards as fragments."""

from tldr_cli.server.api import WebSettings, create_app

__all__ = ["WebSettings", "create_app"]
