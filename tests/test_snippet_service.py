"""
Snippetbox: Snippet Service Unit Tests
=======================================

What:  Tests for snippet id parsing and the response text.
How:   Plain function calls; no HTTP involved.
"""

import pytest

from snippetbox.exceptions import NotFoundError
from snippetbox.services.snippet_service import (
    GREETING,
    MAX_SNIPPET_ID,
    SnippetService,
    parse_snippet_id,
)


class TestParseSnippetId:
    """Tests for parse_snippet_id."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0", 0),
            ("1", 1),
            ("42", 42),
            ("007", 7),
            ("0" * 5000 + "7", 7),
            ("+13", 13),
            ("-0", 0),
            (str(MAX_SNIPPET_ID), MAX_SNIPPET_ID),
        ],
    )
    def test_accepts_non_negative_integers(self, raw, expected):
        assert parse_snippet_id(raw) == expected

    def test_absent_id_not_found(self):
        with pytest.raises(NotFoundError, match="snippet"):
            parse_snippet_id(None)

    @pytest.mark.parametrize(
        "raw",
        ["", "+", "-", "abc", "12abc", "1.0", "1e3", " 7", "7 ", "1_000", "0x1F", "٣", "１"],
    )
    def test_rejects_malformed(self, raw):
        """Only an optional sign and ASCII digits are accepted."""
        with pytest.raises(NotFoundError):
            parse_snippet_id(raw)

    @pytest.mark.parametrize("raw", ["-1", "-9999", str(-MAX_SNIPPET_ID - 1)])
    def test_rejects_negative(self, raw):
        with pytest.raises(NotFoundError):
            parse_snippet_id(raw)

    def test_rejects_out_of_range(self):
        """Values beyond a signed 64-bit integer are treated as invalid."""
        with pytest.raises(NotFoundError) as exc_info:
            parse_snippet_id(str(MAX_SNIPPET_ID + 1))

        assert exc_info.value.context["resource_id"] == str(MAX_SNIPPET_ID + 1)

    @pytest.mark.parametrize("raw", ["9" * 5000, "+" + "1" * 4301, "-" + "9" * 5000])
    def test_rejects_overlong(self, raw):
        """Ids too long for int() are out of range, not a crash."""
        with pytest.raises(NotFoundError) as exc_info:
            parse_snippet_id(raw)

        assert exc_info.value.context["raw_id_length"] == len(raw)


class TestSnippetService:
    """Tests for the response text."""

    def setup_method(self):
        self.service = SnippetService()

    def test_describe(self):
        assert self.service.describe(5) == "Display snippet #5"

    def test_create(self):
        assert self.service.create() == "Create a new snippet ..."

    def test_greeting(self):
        assert GREETING == "Hello from Snippetbox"
