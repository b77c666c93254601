"""
Money helpers: fixed-point conversion and display formatting.

Usage:
    from savings_tracker.utils.money import format_currency, to_money

    to_money(0.1 + 0.2)            -> Decimal("0.30")
    format_currency(1500000)       -> "Rp 1.500.000"
    format_currency(1200.5, "USD") -> "$1,200.50"
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from savings_tracker.core.config import settings

CENT = Decimal("0.01")

# code -> (symbol, thousands separator, decimal separator, decimals, space after symbol)
_CURRENCY_FORMATS = {
    "IDR": ("Rp", ".", ",", 0, True),
    "USD": ("$", ",", ".", 2, False),
    "EUR": ("€", ".", ",", 2, False),
}

Number = Union[int, float, Decimal, str]


def to_money(value: Number) -> Decimal:
    """Convert to a Decimal rounded to whole cents."""
    if not isinstance(value, Decimal):
        # str() first so 0.1 stays 0.1 instead of its binary expansion
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Number, currency: Optional[str] = None, exact: bool = False) -> str:
    """
    Render an amount for display in the configured currency.

    With ``exact`` set, amounts that are not whole units keep their cents even
    in zero-decimal currencies ("Rp 0,40"). Unknown currency codes fall back
    to "<CODE> 1,234.56".
    """
    code = (currency or settings.CURRENCY_CODE).upper()
    symbol, thousands, decimal_sep, decimals, spaced = _CURRENCY_FORMATS.get(
        code, (code, ",", ".", 2, True)
    )
    value = to_money(amount)
    if exact and value != value.to_integral_value():
        decimals = max(decimals, 2)
    sign = "-" if value < 0 else ""
    formatted = f"{abs(value):,.{decimals}f}"
    # Swap separators via a placeholder so "," and "." do not collide
    formatted = formatted.replace(",", "\0").replace(".", decimal_sep).replace("\0", thousands)
    gap = " " if spaced else ""
    return f"{sign}{symbol}{gap}{formatted}"
