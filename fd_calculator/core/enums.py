"""
Enumerations for tenure units, calculation types and compounding frequencies.

Free-text values coming from product data are normalized here with an
explicit default instead of failing.
"""

from decimal import Decimal
from enum import Enum

from fd_calculator.constants import DAYS_PER_MONTH, DAYS_PER_YEAR, MONTHS_PER_YEAR


class _CaseInsensitiveEnum(str, Enum):
    """String enum that accepts values in any letter case."""

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class TenureUnit(_CaseInsensitiveEnum):
    """Unit in which a deposit tenure is expressed."""

    DAYS = "DAYS"
    MONTHS = "MONTHS"
    YEARS = "YEARS"

    def to_months(self, tenure: int) -> int:
        """
        Convert tenure to whole months.

        Examples:
            >>> TenureUnit.DAYS.to_months(95)
            3
            >>> TenureUnit.YEARS.to_months(2)
            24
        """
        if self is TenureUnit.DAYS:
            return tenure // DAYS_PER_MONTH
        if self is TenureUnit.MONTHS:
            return tenure
        return tenure * MONTHS_PER_YEAR

    def to_years(self, tenure: int) -> Decimal:
        """
        Convert tenure to years using the unit's canonical conversion.

        Days are counted as 1/365 of a year, months as 1/12.
        """
        if self is TenureUnit.DAYS:
            return Decimal(tenure) / DAYS_PER_YEAR
        if self is TenureUnit.MONTHS:
            return Decimal(tenure) / MONTHS_PER_YEAR
        return Decimal(tenure)


class CalculationType(_CaseInsensitiveEnum):
    """Interest calculation method."""

    SIMPLE = "SIMPLE"
    COMPOUND = "COMPOUND"

    @classmethod
    def from_method(cls, method: str | None) -> "CalculationType":
        """
        Normalize a product's interest calculation method string.

        Anything mentioning "simple" is SIMPLE, everything else COMPOUND.
        """
        if method is None:
            return cls.COMPOUND
        return cls.SIMPLE if "SIMPLE" in method.upper() else cls.COMPOUND


class CompoundingFrequency(_CaseInsensitiveEnum):
    """How often interest is compounded into principal."""

    DAILY = "DAILY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMI_ANNUALLY = "SEMI_ANNUALLY"
    ANNUALLY = "ANNUALLY"

    @property
    def periods_per_year(self) -> int:
        """Number of compounding periods in one year."""
        return _PERIODS_PER_YEAR[self]

    @classmethod
    def from_label(cls, label: str | None) -> "CompoundingFrequency":
        """
        Normalize a product's payout frequency string.

        Unknown or missing labels fall back to QUARTERLY.

        Examples:
            >>> CompoundingFrequency.from_label("half_yearly")
            <CompoundingFrequency.SEMI_ANNUALLY: 'SEMI_ANNUALLY'>
            >>> CompoundingFrequency.from_label("on maturity")
            <CompoundingFrequency.QUARTERLY: 'QUARTERLY'>
        """
        if label is None:
            return cls.QUARTERLY
        return _FREQUENCY_LABELS.get(label.strip().upper(), cls.QUARTERLY)


_PERIODS_PER_YEAR: dict[CompoundingFrequency, int] = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.SEMI_ANNUALLY: 2,
    CompoundingFrequency.ANNUALLY: 1,
}

_FREQUENCY_LABELS: dict[str, CompoundingFrequency] = {
    "DAILY": CompoundingFrequency.DAILY,
    "MONTHLY": CompoundingFrequency.MONTHLY,
    "QUARTERLY": CompoundingFrequency.QUARTERLY,
    "SEMI_ANNUALLY": CompoundingFrequency.SEMI_ANNUALLY,
    "HALF_YEARLY": CompoundingFrequency.SEMI_ANNUALLY,
    "ANNUALLY": CompoundingFrequency.ANNUALLY,
    "YEARLY": CompoundingFrequency.ANNUALLY,
}
