"""
Unit tests for simple interest calculations.

Tests cover:
- Interest for each tenure unit
- Monthly breakdown shape and totals
- Breakdown cap at 120 months
"""

from datetime import date
from decimal import Decimal

from fd_calculator import SimpleInterestCalculator, TenureUnit


class TestSimpleInterest:
    """Tests for SimpleInterestCalculator.calculate_interest."""

    def test_one_year_in_months(self, simple_calc: SimpleInterestCalculator) -> None:
        """100000 at 7% for 12 months earns 7000."""
        interest = simple_calc.calculate_interest(
            Decimal("100000"), Decimal("7"), 12, TenureUnit.MONTHS
        )
        assert interest == Decimal("7000")

    def test_years_unit(self, simple_calc: SimpleInterestCalculator) -> None:
        interest = simple_calc.calculate_interest(
            Decimal("50000"), Decimal("6"), 3, TenureUnit.YEARS
        )
        assert interest == Decimal("9000")

    def test_days_unit_uses_365_day_year(self, simple_calc: SimpleInterestCalculator) -> None:
        interest = simple_calc.calculate_interest(
            Decimal("36500"), Decimal("10"), 73, TenureUnit.DAYS
        )
        assert interest == Decimal("730")

    def test_zero_rate(self, simple_calc: SimpleInterestCalculator) -> None:
        interest = simple_calc.calculate_interest(
            Decimal("100000"), Decimal("0"), 12, TenureUnit.MONTHS
        )
        assert interest == Decimal("0")


class TestSimpleBreakdown:
    """Tests for SimpleInterestCalculator.generate_monthly_breakdown."""

    def test_six_month_breakdown(self, simple_calc: SimpleInterestCalculator) -> None:
        """Equal shares with the rounding remainder in the last month."""
        breakdown = simple_calc.generate_monthly_breakdown(
            Decimal("100000"), Decimal("7"), 6, date(2024, 1, 15)
        )

        assert len(breakdown) == 6
        assert {entry.interest_earned for entry in breakdown[:-1]} == {Decimal("583.33")}
        assert breakdown[-1].interest_earned == Decimal("583.35")
        assert sum(entry.interest_earned for entry in breakdown) == Decimal("3500.00")

    def test_final_closing_matches_maturity(self, calc, make_request) -> None:
        """The breakdown ends exactly at the maturity amount."""
        result = calc.calculate(make_request(tenure=7))

        assert result.maturity_amount == Decimal("104083.33")
        assert result.monthly_breakdown[-1].closing_balance == result.maturity_amount
        assert result.monthly_breakdown[-1].interest_earned == Decimal("583.35")

    def test_balances_accumulate_without_compounding(
        self, simple_calc: SimpleInterestCalculator
    ) -> None:
        breakdown = simple_calc.generate_monthly_breakdown(
            Decimal("120000"), Decimal("10"), 3, date(2024, 1, 1)
        )

        assert [entry.month for entry in breakdown] == [1, 2, 3]
        assert breakdown[0].opening_balance == Decimal("120000.00")
        assert breakdown[0].closing_balance == Decimal("121000.00")
        assert breakdown[1].opening_balance == breakdown[0].closing_balance
        assert breakdown[2].closing_balance == Decimal("123000.00")

    def test_period_end_dates(self, simple_calc: SimpleInterestCalculator) -> None:
        breakdown = simple_calc.generate_monthly_breakdown(
            Decimal("1000"), Decimal("5"), 2, date(2024, 1, 31)
        )
        assert breakdown[0].period_end == date(2024, 2, 29)
        assert breakdown[1].period_end == date(2024, 3, 31)

    def test_breakdown_at_cap(self, simple_calc: SimpleInterestCalculator) -> None:
        breakdown = simple_calc.generate_monthly_breakdown(
            Decimal("1000"), Decimal("5"), 120, date(2024, 1, 1)
        )
        assert len(breakdown) == 120

    def test_no_breakdown_beyond_cap(self, simple_calc: SimpleInterestCalculator) -> None:
        breakdown = simple_calc.generate_monthly_breakdown(
            Decimal("1000"), Decimal("5"), 130, date(2024, 1, 1)
        )
        assert breakdown == []

    def test_no_breakdown_for_zero_months(self, simple_calc: SimpleInterestCalculator) -> None:
        breakdown = simple_calc.generate_monthly_breakdown(
            Decimal("1000"), Decimal("5"), 0, date(2024, 1, 1)
        )
        assert breakdown == []

    def test_custom_cap(self) -> None:
        calc = SimpleInterestCalculator(breakdown_max_months=12)
        breakdown = calc.generate_monthly_breakdown(
            Decimal("1000"), Decimal("5"), 24, date(2024, 1, 1)
        )
        assert breakdown == []
