"""Formatting helpers for estimate output.

Amounts are shown the way estimators quote them in the region: grouped
digits with the ISO code after the number (e.g. '105,337 AED'), or with the
local symbol in front when asked.
"""

from __future__ import annotations

DEFAULT_CURRENCY = "AED"

CURRENCY_SYMBOLS: dict[str, str] = {
    "AED": "د.إ",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "SAR": "ر.س",
    "QAR": "ر.ق",
    "OMR": "ر.ع.",
    "KWD": "د.ك",
}

# (thousands separator, decimal separator)
_SEPARATORS: dict[str, tuple[str, str]] = {
    "EUR": (".", ","),
}


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, currency)


def _group(value: float, decimals: int, currency: str | None = None) -> str:
    text = f"{value:,.{decimals}f}"
    thousands, decimal = _SEPARATORS.get(currency or "", (",", "."))
    if (thousands, decimal) == (",", "."):
        return text
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def format_currency(
    value: float,
    currency: str = DEFAULT_CURRENCY,
    decimals: int = 0,
    show_symbol: bool = False,
    show_code: bool = True,
) -> str:
    """Format a money amount.

    - ``show_symbol``: '$ 1,234' (unknown codes fall back to the code itself)
    - ``show_code`` (default): '1,234 USD'
    - neither: '1,234'
    """
    formatted = _group(value, decimals, currency)
    if show_symbol:
        return f"{currency_symbol(currency)} {formatted}"
    if show_code:
        return f"{formatted} {currency}"
    return formatted


def format_count(value: float, decimals: int = 2) -> str:
    """Format a headcount or quantity, e.g. '4.63'."""
    return _group(value, decimals)
