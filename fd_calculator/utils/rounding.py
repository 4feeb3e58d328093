"""
Rounding helpers.

Intermediate values keep full Decimal precision; these are applied only
when a result is constructed.
"""

from decimal import ROUND_HALF_UP, Decimal

from fd_calculator.constants import MONEY_QUANTUM, YEARS_QUANTUM


def round_money(value: Decimal) -> Decimal:
    """
    Round a monetary value to 2 decimal places, half up.

    Example:
        >>> round_money(Decimal("8243.2160"))
        Decimal('8243.22')
        >>> round_money(Decimal("0.125"))
        Decimal('0.13')
    """
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def round_years(value: Decimal) -> Decimal:
    """Round a tenure expressed in years to 4 decimal places."""
    return value.quantize(YEARS_QUANTUM, rounding=ROUND_HALF_UP)
