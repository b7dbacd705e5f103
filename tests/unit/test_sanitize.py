"""Unit tests for sanitize.py — digit and alphanumeric sanitizers."""
from __future__ import annotations

import pytest

from morocco_ids.sanitize import sanitize_alphanumeric, sanitize_digits, strip_prefix


# ---------------------------------------------------------------------------
# sanitize_digits
# ---------------------------------------------------------------------------


class TestSanitizeDigits:
    def test_separators_removed(self) -> None:
        assert sanitize_digits("123 456-789/0001.31") == "123456789000131"

    def test_underscores_and_label_removed(self) -> None:
        assert sanitize_digits("ICE123_456_789_000_131") == "123456789000131"

    def test_full_width_digits_folded(self) -> None:
        assert sanitize_digits("１２３４５６") == "123456"

    def test_empty_string(self) -> None:
        assert sanitize_digits("") == ""

    def test_whitespace_only(self) -> None:
        assert sanitize_digits("   \t\n") == ""

    @pytest.mark.parametrize("value", [None, 123456789000060, 1.5, {}, [], object()])
    def test_non_string_returns_empty(self, value: object) -> None:
        assert sanitize_digits(value) == ""

    def test_idempotent(self) -> None:
        once = sanitize_digits("ICE 123-456/789")
        assert sanitize_digits(once) == once


# ---------------------------------------------------------------------------
# sanitize_alphanumeric
# ---------------------------------------------------------------------------


class TestSanitizeAlphanumeric:
    def test_uppercases_and_strips(self) -> None:
        assert sanitize_alphanumeric("ma64 0071-0800") == "MA6400710800"

    def test_punctuation_removed(self) -> None:
        assert sanitize_alphanumeric("MA.64/00_71") == "MA640071"

    def test_non_string_returns_empty(self) -> None:
        assert sanitize_alphanumeric(None) == ""

    @pytest.mark.parametrize("value, expected", [("ß", ""), ("maß64", "MA64"), ("ﬁ12", "FI12")])
    def test_letters_outside_ascii_not_expanded(self, value: str, expected: str) -> None:
        assert sanitize_alphanumeric(value) == expected

    def test_idempotent(self) -> None:
        once = sanitize_alphanumeric("ma64 0071 0800")
        assert sanitize_alphanumeric(once) == once


# ---------------------------------------------------------------------------
# strip_prefix
# ---------------------------------------------------------------------------


class TestStripPrefix:
    def test_prefix_and_separator_removed(self) -> None:
        assert strip_prefix("ICE 123", "ICE") == "123"

    def test_case_insensitive(self) -> None:
        assert strip_prefix("ice-123", "ICE") == "123"

    def test_prefix_only_at_start(self) -> None:
        assert strip_prefix("123ICE", "ICE") == "123ICE"

    def test_no_prefix_unchanged(self) -> None:
        assert strip_prefix("123 456", "ICE") == "123 456"

    def test_non_string_returns_empty(self) -> None:
        assert strip_prefix(42, "ICE") == ""
