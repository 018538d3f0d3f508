"""
Unit tests for line-ending helpers (polyparse.transforms.line_endings).
"""

import pytest

from polyparse.transforms.line_endings import detect_line_ending, normalize_line_endings


class TestDetectLineEnding:
    """Tests for detect_line_ending()."""

    def test_crlf(self):
        assert detect_line_ending("x\r\ny\r\nz") == "\r\n"

    def test_lf(self):
        assert detect_line_ending("x\ny\nz") == "\n"

    def test_cr(self):
        assert detect_line_ending("x\ry\rz") == "\r"

    def test_majority_wins(self):
        """One CRLF plus one extra LF: LF occurs more often."""
        assert detect_line_ending("a\r\nb\nc") == "\n"

    def test_tie_between_lone_cr_and_lone_lf(self):
        """Equal CR and LF counts resolve to CRLF even when not adjacent."""
        assert detect_line_ending("a\rb\nc") == "\r\n"

    def test_no_line_endings_defaults_to_lf(self):
        assert detect_line_ending("single line") == "\n"
        assert detect_line_ending("") == "\n"


class TestNormalizeLineEndings:
    """Tests for normalize_line_endings()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("a\r\nb", "a\nb"),
            ("a\rb", "a\nb"),
            ("a\nb", "a\nb"),
            ("a\r\nb\rc\nd", "a\nb\nc\nd"),
            ("a\r\r\nb", "a\n\nb"),
            ("no breaks", "no breaks"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_line_endings(raw) == expected
