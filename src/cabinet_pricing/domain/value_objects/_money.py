"""Currency rounding helpers.

Amounts flow through the engine as unrounded floats. Rounding happens only
at the display/persistence boundary, always half-up (0.5 rounds away from
zero), never with Python's banker's rounding.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_currency(amount: float, places: int = 0) -> float:
    """Round a currency amount half-up to the given number of decimal places.

    Args:
        amount: Unrounded amount.
        places: Fraction digits to keep (0 for whole currency units).

    Returns:
        The rounded amount as a float.

    Examples:
        >>> round_currency(2.5)
        3.0
        >>> round_currency(694.0000000000001, places=2)
        694.0
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_cents(amount: float) -> float:
    """Round an amount half-up to whole cents."""
    return round_currency(amount, places=2)


def format_money(amount: float, places: int = 2) -> str:
    """Format an amount for display, e.g. ``$1,188.00``."""
    rounded = round_currency(amount, places=places)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{places}f}"
