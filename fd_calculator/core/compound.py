"""
Compound interest calculator.

maturity = principal * (1 + r / (100 * n)) ** (n * t)
"""

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from fd_calculator.constants import BREAKDOWN_MAX_MONTHS, MONTHS_PER_YEAR
from fd_calculator.core.enums import CompoundingFrequency, TenureUnit
from fd_calculator.core.models import MonthlyBreakdown
from fd_calculator.utils.rounding import round_money


class CompoundInterestCalculator:
    """Compound interest with a configurable compounding frequency."""

    def __init__(self, breakdown_max_months: int = BREAKDOWN_MAX_MONTHS) -> None:
        self.breakdown_max_months = breakdown_max_months

    def balance_after(
        self,
        principal: Decimal,
        rate_percent: Decimal,
        years: Decimal,
        frequency: CompoundingFrequency,
    ) -> Decimal:
        """
        Calculate the compounded balance after a number of years.

        Fractional periods are allowed; the exponent n * t need not be whole.
        """
        periods = frequency.periods_per_year
        growth = 1 + rate_percent / (100 * periods)
        return principal * growth ** (periods * years)

    def calculate_interest(
        self,
        principal: Decimal,
        rate_percent: Decimal,
        tenure: int,
        tenure_unit: TenureUnit,
        frequency: CompoundingFrequency,
    ) -> Decimal:
        """
        Calculate compound interest for a tenure.

        Args:
            principal: Principal amount
            rate_percent: Annual nominal rate as percentage
            tenure: Tenure in tenure_unit
            tenure_unit: Unit used to convert tenure to years
            frequency: Compounding frequency

        Returns:
            Unrounded interest (maturity - principal)

        Example:
            >>> calc = CompoundInterestCalculator()
            >>> interest = calc.calculate_interest(
            ...     Decimal("100000"), Decimal("8"), 12,
            ...     TenureUnit.MONTHS, CompoundingFrequency.QUARTERLY,
            ... )
            >>> round_money(interest)
            Decimal('8243.22')
        """
        years = tenure_unit.to_years(tenure)
        maturity = self.balance_after(principal, rate_percent, years, frequency)
        return maturity - principal

    def generate_monthly_breakdown(
        self,
        principal: Decimal,
        rate_percent: Decimal,
        tenure_in_months: int,
        frequency: CompoundingFrequency,
        start_date: date,
    ) -> list[MonthlyBreakdown]:
        """
        Build a month-by-month view of the compounded balance.

        Each month's interest is the growth of the running balance over that
        month, so per-month interest increases over the tenure.

        Returns:
            One entry per month, or an empty list beyond the maximum tenure
        """
        if tenure_in_months <= 0 or tenure_in_months > self.breakdown_max_months:
            return []

        breakdown: list[MonthlyBreakdown] = []
        opening = round_money(principal)
        for month in range(1, tenure_in_months + 1):
            years = Decimal(month) / MONTHS_PER_YEAR
            closing = round_money(self.balance_after(principal, rate_percent, years, frequency))
            breakdown.append(
                MonthlyBreakdown(
                    month=month,
                    period_end=start_date + relativedelta(months=month),
                    opening_balance=opening,
                    interest_earned=closing - opening,
                    closing_balance=closing,
                )
            )
            opening = closing
        return breakdown
