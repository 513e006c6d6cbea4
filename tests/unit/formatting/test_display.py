"""Tests for the thousands and rupiah display formatters."""

from __future__ import annotations

import pytest

from rupiahfmt.core.config import FormatConfig
from rupiahfmt.formatting.display import (
    AmountFormatter,
    format_amount_input,
    format_rupiah_no_decimal,
    format_thousands_id,
    group_thousands,
)


class TestGroupThousands:
    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("1", "1"),
            ("999", "999"),
            ("1000", "1.000"),
            ("123456", "123.456"),
            ("2700000", "2.700.000"),
        ],
    )
    def test_groups_from_the_right(self, digits, expected):
        assert group_thousands(digits) == expected

    def test_custom_separator(self):
        assert group_thousands("1234567", ",") == "1,234,567"

    def test_backslash_separator_is_literal(self):
        assert group_thousands("1000", "\\") == "1\\000"


class TestFormatThousandsId:
    def test_groups_canonical_string(self):
        assert format_thousands_id("2700000") == "2.700.000"

    def test_zero_and_absent(self):
        assert format_thousands_id(0) == "0"
        assert format_thousands_id(None) == "0"
        assert format_thousands_id("") == "0"
        assert format_thousands_id("abc") == "0"

    def test_normalizes_first(self):
        assert format_thousands_id("Rp. 1.234.567,89") == "1.234.567"

    def test_regrouping_is_stable(self):
        once = format_thousands_id("2700000")
        assert format_thousands_id(once) == once


class TestFormatRupiahNoDecimal:
    def test_prefix_and_grouping(self):
        assert format_rupiah_no_decimal("2700000") == "Rp. 2.700.000"

    def test_fraction_never_shown(self):
        assert format_rupiah_no_decimal(2700000.75) == "Rp. 2.700.000"

    def test_absent_value(self):
        assert format_rupiah_no_decimal(None) == "Rp. 0"

    def test_ignores_environment(self, monkeypatch):
        monkeypatch.setenv("RUPIAHFMT_FORMAT_GROUPING_SEPARATOR", ",")
        monkeypatch.setenv("RUPIAHFMT_FORMAT_CURRENCY_PREFIX", "IDR")
        assert format_rupiah_no_decimal("1000") == "Rp. 1.000"


class TestFormatAmountInput:
    def test_regroups_typed_digits(self):
        assert format_amount_input("2.7000") == "27.000"

    def test_empty_stays_empty(self):
        assert format_amount_input("") == ""
        assert format_amount_input(None) == ""
        assert format_amount_input("Rp. ") == ""

    def test_single_zero(self):
        assert format_amount_input("0") == "0"


class TestAmountFormatter:
    def test_default_config_matches_module_functions(self):
        formatter = AmountFormatter(FormatConfig(currency_prefix="Rp.", grouping_separator="."))
        assert formatter.thousands("2700000") == format_thousands_id("2700000")
        assert formatter.currency("2700000") == format_rupiah_no_decimal("2700000")

    def test_custom_config(self):
        formatter = AmountFormatter(FormatConfig(currency_prefix="IDR", grouping_separator=","))
        assert formatter.thousands("2.700.000") == "2,700,000"
        assert formatter.currency("2.700.000") == "IDR 2,700,000"

    def test_zero(self):
        formatter = AmountFormatter(FormatConfig(currency_prefix="IDR", grouping_separator=","))
        assert formatter.currency(None) == "IDR 0"

    def test_reads_environment_when_no_config_given(self, monkeypatch):
        monkeypatch.setenv("RUPIAHFMT_FORMAT_GROUPING_SEPARATOR", "_")
        assert AmountFormatter().thousands(1500000) == "1_500_000"
