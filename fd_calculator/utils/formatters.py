"""
Formatting utilities for amounts, rates and results.

Functions for rendering calculation results in a readable form.
"""

from decimal import Decimal
from typing import Union

from fd_calculator.core.enums import TenureUnit
from fd_calculator.core.models import CalculationResult, ComparisonResult, MonthlyBreakdown
from fd_calculator.types import BreakdownRowDict, CalculationSummaryDict


_PREFIX_SYMBOLS = ("₹", "$", "€", "£")


def format_currency(
    amount: Union[int, Decimal],
    currency: str = "₹",
    decimals: int = 2,
) -> str:
    """
    Format an amount with thousands separators and a currency marker.

    Args:
        amount: Amount to format
        currency: Symbol (prefixed) or code (suffixed)
        decimals: Number of decimal places

    Returns:
        Formatted amount

    Example:
        >>> format_currency(Decimal("108243.22"))
        '₹108,243.22'
        >>> format_currency(Decimal("1000"), currency="INR", decimals=0)
        '1,000 INR'
    """
    formatted = f"{Decimal(amount):,.{decimals}f}"
    if currency.startswith(_PREFIX_SYMBOLS):
        return f"{currency}{formatted}"
    return f"{formatted} {currency}"


def format_percentage(
    value: Union[int, Decimal],
    decimals: int = 2,
    show_sign: bool = False,
) -> str:
    """
    Format a value that is already expressed in percent.

    Example:
        >>> format_percentage(Decimal("7.5"))
        '7.50%'
        >>> format_percentage(Decimal("0.25"), show_sign=True)
        '+0.25%'
    """
    sign = "+" if show_sign and value > 0 else ""
    return f"{sign}{Decimal(value):.{decimals}f}%"


def format_tenure(tenure: int, unit: TenureUnit) -> str:
    """
    Format a tenure like "12 months" or "1 year".

    Example:
        >>> format_tenure(400, TenureUnit.DAYS)
        '400 days (~13 months)'
    """
    singular = unit.value.lower().rstrip("s")
    text = f"{tenure} {singular}" if tenure == 1 else f"{tenure} {singular}s"
    if unit is TenureUnit.DAYS:
        months = unit.to_months(tenure)
        if months >= 1:
            text = f"{text} (~{months} month{'s' if months != 1 else ''})"
    return text


def format_calculation_result(result: CalculationResult, currency: str = "₹") -> str:
    """
    Format a calculation result to a text report.

    Returns:
        Multi-line formatted report
    """
    rate_line = format_percentage(result.effective_rate)
    if result.additional_rate:
        rate_line = (
            f"{rate_line} ({format_percentage(result.base_rate)} base "
            f"{format_percentage(result.additional_rate, show_sign=True)})"
        )

    method = result.calculation_type.value.title()
    if result.compounding_frequency is not None:
        method = f"{method}, {result.compounding_frequency.value.lower().replace('_', '-')}"

    lines = []
    if result.product_name:
        lines.append(f"Product: {result.product_name} ({result.product_code})")
    lines.extend([
        f"Principal:       {format_currency(result.principal, currency)}",
        f"Rate:            {rate_line}",
        f"Tenure:          {format_tenure(result.tenure, result.tenure_unit)}",
        f"Method:          {method}",
        "",
        f"Interest earned: {format_currency(result.interest_earned, currency)}",
        f"TDS ({format_percentage(result.tds_rate)}): {format_currency(result.tds_amount, currency)}",
        f"Net interest:    {format_currency(result.net_interest, currency)}",
        f"Maturity amount: {format_currency(result.maturity_amount, currency)}",
        f"Maturity date:   {result.maturity_date.isoformat()}",
    ])
    return "\n".join(lines)


def format_breakdown_table(breakdown: list[MonthlyBreakdown], currency: str = "₹") -> str:
    """
    Format a monthly breakdown as a fixed-width table.

    Returns:
        Table text, or an empty string when there is no breakdown
    """
    if not breakdown:
        return ""

    header = f"{'Month':>5}  {'Period end':<10}  {'Opening':>16}  {'Interest':>14}  {'Closing':>16}"
    rows = [header, "-" * len(header)]
    for entry in breakdown:
        rows.append(
            f"{entry.month:>5}  {entry.period_end.isoformat():<10}  "
            f"{format_currency(entry.opening_balance, currency):>16}  "
            f"{format_currency(entry.interest_earned, currency):>14}  "
            f"{format_currency(entry.closing_balance, currency):>16}"
        )
    return "\n".join(rows)


def format_comparison(comparison: ComparisonResult, currency: str = "₹") -> str:
    """Format a scenario comparison, marking the best scenario."""
    lines = []
    for index, result in enumerate(comparison.scenarios):
        marker = "*" if index == comparison.best_scenario_index else " "
        lines.append(
            f"{marker} #{index + 1}: {format_percentage(result.effective_rate)} "
            f"{result.calculation_type.value.lower()}, "
            f"{format_tenure(result.tenure, result.tenure_unit)} -> "
            f"{format_currency(result.maturity_amount, currency)}"
        )
    return "\n".join(lines)


def summarize_result(result: CalculationResult) -> CalculationSummaryDict:
    """Convert a result into a JSON-safe summary dict."""
    return CalculationSummaryDict(
        principal=str(result.principal),
        effective_rate=str(result.effective_rate),
        tenure=format_tenure(result.tenure, result.tenure_unit),
        interest_earned=str(result.interest_earned),
        tds_amount=str(result.tds_amount),
        net_interest=str(result.net_interest),
        maturity_amount=str(result.maturity_amount),
        maturity_date=result.maturity_date.isoformat(),
        breakdown=[
            BreakdownRowDict(
                month=entry.month,
                period_end=entry.period_end.isoformat(),
                opening_balance=str(entry.opening_balance),
                interest_earned=str(entry.interest_earned),
                closing_balance=str(entry.closing_balance),
            )
            for entry in result.monthly_breakdown
        ],
    )
