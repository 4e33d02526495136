"""Utility functions for recursive summarization."""

from __future__ import annotations

from tldr_cli.errors import InvalidArgumentError


def split_text(text: str, max_len: int) -> list[str]:
    """Split text into contiguous chunks of at most ``max_len`` characters.

    Cuts fall exactly on ``max_len`` boundaries, so every chunk but the last
    has length ``max_len`` and ``"".join(chunks) == text``. Slicing is by
    code point, never inside a multi-byte character. Empty text yields no
    chunks.

    Raises:
        InvalidArgumentError: If ``max_len`` is less than 1.

    """
    if max_len < 1:
        msg = f"max_len must be at least 1, got {max_len}"
        raise InvalidArgumentError(msg)
    return [text[i : i + max_len] for i in range(0, len(text), max_len)]


def compression_ratio(input_chars: int, output_chars: int) -> float:
    """Return ``output_chars / input_chars``, or 0.0 for empty input."""
    return output_chars / input_chars if input_chars > 0 else 0.0
