"""
Unit tests for sanity string splitting.
"""

import pytest

from sanity.errors import InvalidArgumentError
from sanity.strings import split


class TestSplit:
    """Tests for regex split."""

    def test_split_literal(self):
        """Test splitting on a plain separator."""
        assert split("a,b,c", ",") == ["a", "b", "c"]

    def test_split_regex(self):
        """Test splitting on a pattern."""
        assert split("a, b,   c", r",\s*") == ["a", "b", "c"]

    def test_split_no_match(self):
        """Test text without delimiters comes back whole."""
        assert split("abc", ",") == ["abc"]

    def test_split_keeps_empty_segments(self):
        """Test adjacent and edge delimiters give empty segments."""
        assert split(",a,,b", ",") == ["", "a", "", "b"]

    def test_split_excludes_capture_groups(self):
        """Test groups in the pattern are not returned."""
        assert split("1a2b3", r"([ab])") == ["1", "2", "3"]

    def test_split_invalid_pattern(self):
        """Test a malformed pattern raises."""
        with pytest.raises(InvalidArgumentError):
            split("abc", "(")
