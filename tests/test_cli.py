"""Tests for the CLI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tldr_cli import __version__
from tldr_cli.cli import app

if TYPE_CHECKING:
    from pathlib import Path
    from unittest.mock import MagicMock

runner = CliRunner(env={"NO_COLOR": "1", "TERM": "dumb"})


@pytest.fixture
def article_file(tmp_path: Path, article_html: str) -> Path:
    """Write the sample article to disk."""
    path = tmp_path / "article.html"
    path.write_text(article_html, encoding="utf-8")
    return path


def test_main_no_args() -> None:
    """Test the main function with no arguments."""
    result = runner.invoke(app)
    assert "No command specified" in result.stdout
    assert "Usage" in result.stdout


@patch("tldr_cli.core.utils.setup_logging")
def test_main_with_args(mock_setup_logging: MagicMock) -> None:
    """Test the main function with arguments."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage" in result.stdout
    assert "summarize" in result.stdout
    assert "serve" in result.stdout
    mock_setup_logging.assert_not_called()


def test_summarize_quiet(article_file: Path) -> None:
    """Test that quiet mode prints just the title and the summary."""
    result = runner.invoke(
        app,
        ["summarize", str(article_file), "--llm-provider", "static", "--quiet"],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == "A summary of the article\n\nA summary of the article\n"


def test_summarize_panel(article_file: Path) -> None:
    """Test that the default output shows the summary in a panel."""
    result = runner.invoke(app, ["summarize", str(article_file), "--llm-provider", "static"])
    assert result.exit_code == 0, result.output
    assert "A summary of the article" in result.stdout


def test_summarize_json(article_file: Path) -> None:
    """Test that JSON output carries the full result."""
    result = runner.invoke(
        app,
        [
            "summarize",
            str(article_file),
            "--llm-provider",
            "static",
            "--output",
            "json",
            "--max-chunk-chars",
            "100",
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["title"] == "A summary of the article"
    assert data["url"] == article_file.resolve().as_uri()
    assert data["result"]["chunk_count"] > 1
    assert data["result"]["collapse_depth"] >= 1


def test_summarize_unknown_provider(article_file: Path) -> None:
    """Test that an unknown provider is rejected."""
    result = runner.invoke(app, ["summarize", str(article_file), "--llm-provider", "bogus"])
    assert result.exit_code == 1


def test_summarize_openai_without_key(article_file: Path) -> None:
    """Test that OpenAI without credentials fails before fetching."""
    result = runner.invoke(
        app,
        ["summarize", str(article_file), "--llm-provider", "openai"],
        env={"OPENAI_API_KEY": "", "OPENAI_BASE_URL": ""},
    )
    assert result.exit_code == 1


def test_summarize_missing_file(tmp_path: Path) -> None:
    """Test that an unreadable address exits with an error."""
    missing = (tmp_path / "missing.html").as_uri()
    result = runner.invoke(app, ["summarize", missing, "--llm-provider", "static", "--quiet"])
    assert result.exit_code == 1
    assert result.stdout == ""


def test_summarize_rejects_zero_chunk_size(article_file: Path) -> None:
    """Test that option ranges are enforced."""
    result = runner.invoke(
        app,
        ["summarize", str(article_file), "--llm-provider", "static", "--max-chunk-chars", "0"],
    )
    assert result.exit_code == 2


@patch("uvicorn.run")
def test_serve_command(mock_uvicorn_run: MagicMock) -> None:
    """Test the serve command starts uvicorn with the built app."""
    result = runner.invoke(
        app,
        ["serve", "--llm-provider", "static", "--host", "127.0.0.1", "--port", "9000"],
    )
    assert result.exit_code == 0, result.output
    assert "Starting TL;DR server on 127.0.0.1:9000" in result.stdout
    mock_uvicorn_run.assert_called_once()
    assert mock_uvicorn_run.call_args[1]["host"] == "127.0.0.1"
    assert mock_uvicorn_run.call_args[1]["port"] == 9000


@patch("uvicorn.run")
def test_serve_bad_provider(mock_uvicorn_run: MagicMock) -> None:
    """Test that the server does not start with an unusable provider."""
    result = runner.invoke(app, ["serve", "--llm-provider", "bogus"])
    assert result.exit_code == 1
    mock_uvicorn_run.assert_not_called()


def test_version() -> None:
    """Test that --version prints the package version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"tldr-cli {__version__}"
