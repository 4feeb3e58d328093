"""
Unit tests for compound interest calculations.

Tests cover:
- Known maturity values per compounding frequency
- Fractional compounding periods
- Non-linear monthly breakdown
"""

from datetime import date
from decimal import Decimal

import pytest

from fd_calculator import (
    CompoundInterestCalculator,
    CompoundingFrequency,
    SimpleInterestCalculator,
    TenureUnit,
)
from fd_calculator.utils import round_money


class TestCompoundInterest:
    """Tests for CompoundInterestCalculator.calculate_interest."""

    def test_quarterly_one_year(self, compound_calc: CompoundInterestCalculator) -> None:
        """100000 at 8% quarterly for 12 months: 100000 * 1.02^4."""
        interest = compound_calc.calculate_interest(
            Decimal("100000"), Decimal("8"), 12,
            TenureUnit.MONTHS, CompoundingFrequency.QUARTERLY,
        )
        assert interest == Decimal("8243.21600")
        assert round_money(interest) == Decimal("8243.22")

    def test_annual_equals_simple_for_one_year(
        self, compound_calc: CompoundInterestCalculator
    ) -> None:
        interest = compound_calc.calculate_interest(
            Decimal("100000"), Decimal("7"), 1,
            TenureUnit.YEARS, CompoundingFrequency.ANNUALLY,
        )
        assert round_money(interest) == Decimal("7000.00")

    def test_semi_annual_two_years(self, compound_calc: CompoundInterestCalculator) -> None:
        """10000 at 10% semi-annually for 2 years: 10000 * 1.05^4."""
        interest = compound_calc.calculate_interest(
            Decimal("10000"), Decimal("10"), 2,
            TenureUnit.YEARS, CompoundingFrequency.SEMI_ANNUALLY,
        )
        assert round_money(interest) == Decimal("2155.06")

    def test_fractional_periods(self, compound_calc: CompoundInterestCalculator) -> None:
        """Seven months quarterly compounds 2.333 periods."""
        interest = compound_calc.calculate_interest(
            Decimal("100000"), Decimal("8"), 7,
            TenureUnit.MONTHS, CompoundingFrequency.QUARTERLY,
        )
        two_quarters = Decimal("100000") * Decimal("1.02") ** 2 - Decimal("100000")
        three_quarters = Decimal("100000") * Decimal("1.02") ** 3 - Decimal("100000")
        assert two_quarters < interest < three_quarters

    @pytest.mark.parametrize("frequency", list(CompoundingFrequency))
    def test_compound_not_below_simple(
        self,
        compound_calc: CompoundInterestCalculator,
        simple_calc: SimpleInterestCalculator,
        frequency: CompoundingFrequency,
    ) -> None:
        """Compound interest is at least simple interest past one period."""
        compound = compound_calc.calculate_interest(
            Decimal("250000"), Decimal("7.25"), 24, TenureUnit.MONTHS, frequency
        )
        simple = simple_calc.calculate_interest(
            Decimal("250000"), Decimal("7.25"), 24, TenureUnit.MONTHS
        )
        assert compound >= simple

    def test_more_frequent_compounding_earns_more(
        self, compound_calc: CompoundInterestCalculator
    ) -> None:
        amounts = [
            compound_calc.calculate_interest(
                Decimal("100000"), Decimal("8"), 3, TenureUnit.YEARS, frequency
            )
            for frequency in (
                CompoundingFrequency.ANNUALLY,
                CompoundingFrequency.SEMI_ANNUALLY,
                CompoundingFrequency.QUARTERLY,
                CompoundingFrequency.MONTHLY,
                CompoundingFrequency.DAILY,
            )
        ]
        assert amounts == sorted(amounts)


class TestCompoundBreakdown:
    """Tests for CompoundInterestCalculator.generate_monthly_breakdown."""

    def test_breakdown_reaches_maturity(self, compound_calc: CompoundInterestCalculator) -> None:
        breakdown = compound_calc.generate_monthly_breakdown(
            Decimal("100000"), Decimal("8"), 12,
            CompoundingFrequency.QUARTERLY, date(2024, 1, 15),
        )

        assert len(breakdown) == 12
        assert breakdown[0].opening_balance == Decimal("100000.00")
        assert breakdown[-1].closing_balance == Decimal("108243.22")
        assert sum(entry.interest_earned for entry in breakdown) == Decimal("8243.22")

    def test_interest_is_closing_minus_opening(
        self, compound_calc: CompoundInterestCalculator
    ) -> None:
        breakdown = compound_calc.generate_monthly_breakdown(
            Decimal("50000"), Decimal("9"), 6,
            CompoundingFrequency.MONTHLY, date(2024, 1, 1),
        )
        for previous, entry in zip(breakdown, breakdown[1:]):
            assert entry.opening_balance == previous.closing_balance
        for entry in breakdown:
            assert entry.interest_earned == entry.closing_balance - entry.opening_balance

    def test_interest_grows_month_over_month(
        self, compound_calc: CompoundInterestCalculator
    ) -> None:
        breakdown = compound_calc.generate_monthly_breakdown(
            Decimal("1000000"), Decimal("9"), 24,
            CompoundingFrequency.MONTHLY, date(2024, 1, 1),
        )
        assert breakdown[-1].interest_earned > breakdown[0].interest_earned

    def test_no_breakdown_beyond_cap(self, compound_calc: CompoundInterestCalculator) -> None:
        breakdown = compound_calc.generate_monthly_breakdown(
            Decimal("100000"), Decimal("8"), 130,
            CompoundingFrequency.QUARTERLY, date(2024, 1, 1),
        )
        assert breakdown == []
