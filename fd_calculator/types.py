"""
Type definitions for calculator output.

TypedDict shapes of plain-data summaries produced by the formatters.
"""

from typing import TypedDict


class BreakdownRowDict(TypedDict):
    """
    One month of a breakdown as plain strings.

    Attributes:
        month: Month index (1-based)
        period_end: ISO date of the last day covered
        opening_balance: Balance at the start of the month
        interest_earned: Interest accrued in the month
        closing_balance: Balance at the end of the month
    """
    month: int
    period_end: str
    opening_balance: str
    interest_earned: str
    closing_balance: str


class CalculationSummaryDict(TypedDict):
    """
    Summary of a calculation result.

    Decimal values are rendered as strings so the summary is JSON-safe
    without losing precision.
    """
    principal: str
    effective_rate: str
    tenure: str
    interest_earned: str
    tds_amount: str
    net_interest: str
    maturity_amount: str
    maturity_date: str
    breakdown: list[BreakdownRowDict]
