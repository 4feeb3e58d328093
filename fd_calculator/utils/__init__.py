"""
Utility functions for the FD calculator.

Rounding and formatting helpers.
"""

from fd_calculator.utils.formatters import (
    format_breakdown_table,
    format_calculation_result,
    format_comparison,
    format_currency,
    format_percentage,
    format_tenure,
    summarize_result,
)
from fd_calculator.utils.rounding import round_money, round_years

__all__ = [
    "round_money",
    "round_years",
    "format_currency",
    "format_percentage",
    "format_tenure",
    "format_calculation_result",
    "format_breakdown_table",
    "format_comparison",
    "summarize_result",
]
