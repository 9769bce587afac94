"""Unit tests for IBAN normalization helpers."""

import pytest

from ibanscope.domain.iban.normalization import format_iban, mask_iban, normalize_iban


class TestNormalizeIban:
    """Tests for normalize_iban."""

    def test_removes_spaces_and_uppercases(self):
        assert normalize_iban("de89 3704 0044 0532 0130 00") == "DE89370400440532013000"

    def test_keeps_other_whitespace(self):
        """Only U+0020 is removed; tabs and newlines make the IBAN invalid later."""
        assert normalize_iban("DE89\t3704\n") == "DE89\t3704\n"

    def test_only_ascii_letters_are_uppercased(self):
        assert normalize_iban("de ß é") == "DEßé"

    @pytest.mark.parametrize(
        "value",
        ["", " ", "de89 3704 0044 0532 0130 00", "gb82 west 1234 5698 7654 32"],
    )
    def test_idempotent(self, value):
        once = normalize_iban(value)
        assert normalize_iban(once) == once

    def test_case_insensitive(self):
        assert normalize_iban("nl91abna0417164300") == normalize_iban(
            "NL91ABNA0417164300",
        )


class TestMaskIban:
    """Tests for mask_iban."""

    def test_masks_middle(self):
        assert mask_iban("DE89370400440532013000") == "DE89**************3000"

    def test_short_values_are_unchanged(self):
        assert mask_iban("DE89") == "DE89"


class TestFormatIban:
    """Tests for format_iban."""

    def test_groups_of_four(self):
        assert format_iban("DE89370400440532013000") == "DE89 3704 0044 0532 0130 00"

    def test_exact_multiple_of_four(self):
        assert format_iban("NO9386011117947") == "NO93 8601 1117 947"
        assert format_iban("BE68539007547034") == "BE68 5390 0754 7034"
