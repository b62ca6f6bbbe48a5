"""Tests for currency and count formatting."""

from __future__ import annotations

from servest.formatting import currency_symbol, format_count, format_currency


class TestFormatCurrency:
    def test_default_shows_code(self) -> None:
        assert format_currency(105_336.7) == "105,337 AED"

    def test_decimals(self) -> None:
        assert format_currency(1234.5, "USD", decimals=2) == "1,234.50 USD"

    def test_symbol(self) -> None:
        assert format_currency(1234, "USD", show_symbol=True) == "$ 1,234"

    def test_plain(self) -> None:
        assert format_currency(1234, "GBP", show_code=False) == "1,234"

    def test_euro_separators(self) -> None:
        assert format_currency(1234567.891, "EUR", decimals=2) == "1.234.567,89 EUR"

    def test_unknown_currency_symbol_falls_back_to_code(self) -> None:
        assert currency_symbol("JPY") == "JPY"
        assert format_currency(10, "JPY", show_symbol=True) == "JPY 10"

    def test_negative(self) -> None:
        assert format_currency(-2500) == "-2,500 AED"


class TestFormatCount:
    def test_two_decimals_by_default(self) -> None:
        assert format_count(4.6261) == "4.63"

    def test_thousands(self) -> None:
        assert format_count(12_345, decimals=0) == "12,345"
