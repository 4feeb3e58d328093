"""
Simple interest calculator.

Interest accrues on the original principal only.
"""

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from fd_calculator.constants import BREAKDOWN_MAX_MONTHS, MONTHS_PER_YEAR
from fd_calculator.core.enums import TenureUnit
from fd_calculator.core.models import MonthlyBreakdown
from fd_calculator.utils.rounding import round_money


class SimpleInterestCalculator:
    """
    Simple interest: principal * rate / 100 * years.

    Negative or zero inputs are the caller's responsibility; nothing is
    raised here.
    """

    def __init__(self, breakdown_max_months: int = BREAKDOWN_MAX_MONTHS) -> None:
        self.breakdown_max_months = breakdown_max_months

    def calculate_interest(
        self,
        principal: Decimal,
        rate_percent: Decimal,
        tenure: int,
        tenure_unit: TenureUnit,
    ) -> Decimal:
        """
        Calculate simple interest for a tenure.

        Args:
            principal: Principal amount
            rate_percent: Annual rate as percentage (e.g., 7 = 7%)
            tenure: Tenure in tenure_unit
            tenure_unit: Unit used to convert tenure to years

        Returns:
            Unrounded interest amount

        Example:
            >>> calc = SimpleInterestCalculator()
            >>> calc.calculate_interest(Decimal("100000"), Decimal("7"), 12, TenureUnit.MONTHS)
            Decimal('7000')
        """
        years = tenure_unit.to_years(tenure)
        return principal * rate_percent / 100 * years

    def generate_monthly_breakdown(
        self,
        principal: Decimal,
        rate_percent: Decimal,
        tenure_in_months: int,
        start_date: date,
    ) -> list[MonthlyBreakdown]:
        """
        Split total interest evenly across the elapsed months.

        Balances accumulate interest without compounding. The last month
        absorbs the rounding remainder so the final closing balance equals
        principal plus the rounded total interest. No breakdown is produced
        for tenures beyond the configured maximum.

        Returns:
            One entry per month, or an empty list
        """
        if tenure_in_months <= 0 or tenure_in_months > self.breakdown_max_months:
            return []

        total = principal * rate_percent / 100 * Decimal(tenure_in_months) / MONTHS_PER_YEAR
        monthly_interest = round_money(total / tenure_in_months)
        final_interest = max(
            round_money(total) - monthly_interest * (tenure_in_months - 1), Decimal("0")
        )

        breakdown: list[MonthlyBreakdown] = []
        balance = round_money(principal)
        for month in range(1, tenure_in_months + 1):
            interest = final_interest if month == tenure_in_months else monthly_interest
            closing = balance + interest
            breakdown.append(
                MonthlyBreakdown(
                    month=month,
                    period_end=start_date + relativedelta(months=month),
                    opening_balance=balance,
                    interest_earned=interest,
                    closing_balance=closing,
                )
            )
            balance = closing
        return breakdown
