"""Tests for rupiah formatting and rate clamping."""

import pytest
from shared.money import clamp_percentage, format_currency, format_price_delta, round_rupiah


class TestFormatCurrency:
    def test_groups_thousands_with_dots(self):
        assert format_currency(55000) == "Rp 55.000"

    def test_large_amount(self):
        assert format_currency(1250000) == "Rp 1.250.000"

    def test_zero(self):
        assert format_currency(0) == "Rp 0"

    def test_negative_amount(self):
        assert format_currency(-3000) == "-Rp 3.000"

    def test_fractions_are_rounded_half_up(self):
        assert format_currency(2887.5) == "Rp 2.888"

    def test_round_rupiah(self):
        assert round_rupiah(1234.49) == 1234
        assert round_rupiah("1234.5") == 1235


class TestFormatPriceDelta:
    def test_positive_delta_gets_plus_sign(self):
        assert format_price_delta(8000) == "+Rp 8.000"

    def test_negative_delta_keeps_minus_sign(self):
        assert format_price_delta(-3000) == "-Rp 3.000"


class TestClampPercentage:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5, 5.0), (-1, 0.0), (150, 100.0), ("12.5", 12.5)],
    )
    def test_clamps_into_range(self, value, expected):
        assert clamp_percentage(value, 10) == expected

    @pytest.mark.parametrize("value", [None, True, "abc", float("nan"), float("inf")])
    def test_invalid_values_use_fallback(self, value):
        assert clamp_percentage(value, 10) == 10
