"""Unit tests for the chunk splitter."""

from __future__ import annotations

import pytest

from tldr_cli.errors import InvalidArgumentError
from tldr_cli.summarizer import split_text


class TestSplitText:
    """Tests for split_text."""

    def test_exact_character_slices(self) -> None:
        """Test that cuts fall exactly on max_len boundaries."""
        assert split_text("some long text", 4) == ["some", " lon", "g te", "xt"]

    @pytest.mark.parametrize("max_len", [1, 2, 3, 7, 13, 14, 100])
    def test_chunks_reproduce_text(self, max_len: int) -> None:
        """Test that joining the chunks gives back the original text."""
        text = "The quick brown fox jumps over the lazy dog."
        chunks = split_text(text, max_len)
        assert "".join(chunks) == text
        assert all(len(chunk) == max_len for chunk in chunks[:-1])
        assert 0 < len(chunks[-1]) <= max_len

    def test_short_text_is_single_chunk(self) -> None:
        """Test that text within max_len comes back whole."""
        assert split_text("short", 5) == ["short"]
        assert split_text("short", 500) == ["short"]

    def test_empty_text_has_no_chunks(self) -> None:
        """Test that empty text produces no (empty) chunks."""
        assert split_text("", 4) == []

    def test_never_splits_multibyte_characters(self) -> None:
        """Test that slicing is by character, not by byte."""
        text = "héllo wörld ✓✓✓"
        chunks = split_text(text, 4)
        assert chunks == ["héll", "o wö", "rld ", "✓✓✓"]
        for chunk in chunks:
            chunk.encode("utf-8").decode("utf-8")

    @pytest.mark.parametrize("max_len", [0, -1])
    def test_non_positive_max_len_rejected(self, max_len: int) -> None:
        """Test that max_len below 1 raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="at least 1"):
            split_text("text", max_len)

    def test_invalid_argument_is_value_error(self) -> None:
        """Test that callers can catch the error as a ValueError."""
        with pytest.raises(ValueError, match="at least 1"):
            split_text("text", 0)
