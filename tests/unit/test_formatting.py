"""Unit tests for vi-VN display formatting."""

from vntax.sdk import format_currency, format_number, format_percent


class TestFormatCurrency:

    def test_vnd(self):
        assert format_currency(1_234_567) == "1.234.567\u00a0₫"

    def test_rounds_to_whole_dong(self):
        assert format_currency(199_999.5) == "200.000\u00a0₫"

    def test_zero(self):
        assert format_currency(0) == "0\u00a0₫"

    def test_negative(self):
        assert format_currency(-5_000_000) == "-5.000.000\u00a0₫"

    def test_other_currency_uses_code(self):
        assert format_currency(1500, "USD") == "1.500\u00a0USD"

    def test_half_rounds_up(self):
        assert format_currency(2.5) == "3\u00a0₫"

    def test_just_below_half_rounds_down(self):
        assert format_currency(0.49999999999999994) == "0\u00a0₫"

    def test_not_a_number(self):
        assert format_currency(float("nan")) == "NaN\u00a0₫"

    def test_infinity(self):
        assert format_currency(float("inf")) == "∞\u00a0₫"


class TestFormatNumber:

    def test_integer(self):
        assert format_number(15_000_000) == "15.000.000"

    def test_decimal_comma(self):
        assert format_number(1234.5) == "1.234,5"

    def test_small(self):
        assert format_number(0) == "0"

    def test_negative_infinity(self):
        assert format_number(float("-inf")) == "-∞"


class TestFormatPercent:

    def test_one_decimal(self):
        assert format_percent(0.05) == "5,0%"

    def test_fraction(self):
        assert format_percent(0.15607) == "15,6%"

    def test_zero(self):
        assert format_percent(0) == "0,0%"
