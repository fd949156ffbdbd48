"""vi-VN display formatting for computed amounts.

Kept apart from the calculators so results stay plain numbers; only the
renderers call these.
"""

import math
from decimal import ROUND_HALF_UP, Decimal


NBSP = "\u00a0"
CURRENCY_SYMBOLS = {"VND": "₫"}


def _swap_separators(text: str) -> str:
    # en-style "1,234.5" -> vi-style "1.234,5"
    return text.replace(",", "\0").replace(".", ",").replace("\0", ".")


def _round_half_up(amount: float) -> int:
    """Round to a whole unit (0.5 rounds away from zero).

    Decimal(amount) is the exact binary value, so 0.49999999999999994
    stays below the half and rounds down.
    """
    return int(Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "-∞" if value < 0 else "∞"


def format_number(num: float) -> str:
    """Format with dot thousands separators and up to 3 decimals.

    Example: 1234567.5 -> "1.234.567,5"
    """
    if not math.isfinite(num):
        return _non_finite(num)
    text = f"{num:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return _swap_separators(text)


def format_currency(amount: float, currency: str = "VND") -> str:
    """Format a currency amount with no decimals.

    Example: 1234567 -> "1.234.567 ₫" (non-breaking space before the symbol)
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    if not math.isfinite(amount):
        return f"{_non_finite(amount)}{NBSP}{symbol}"
    return f"{_swap_separators(f'{_round_half_up(amount):,d}')}{NBSP}{symbol}"


def format_percent(rate: float) -> str:
    """Format a decimal rate with one decimal place.

    Example: 0.05 -> "5,0%"
    """
    return _swap_separators(f"{rate * 100:,.1f}") + "%"
