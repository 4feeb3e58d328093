"""
Core calculator functionality.

Interest calculators, rate resolution, constraint validation and models.
"""

from fd_calculator.core.calculator import FdCalculator, calculate_maturity_date
from fd_calculator.core.compound import CompoundInterestCalculator
from fd_calculator.core.enums import CalculationType, CompoundingFrequency, TenureUnit
from fd_calculator.core.models import (
    CalculationRequest,
    CalculationResult,
    ComparisonResult,
    MonthlyBreakdown,
    ProductCalculationRequest,
    ProductConstraints,
    ProductTerms,
)
from fd_calculator.core.rates import RateResolver, ResolvedRate
from fd_calculator.core.simple import SimpleInterestCalculator
from fd_calculator.core.validation import ConstraintValidator

__all__ = [
    "FdCalculator",
    "calculate_maturity_date",
    "SimpleInterestCalculator",
    "CompoundInterestCalculator",
    "RateResolver",
    "ResolvedRate",
    "ConstraintValidator",
    "TenureUnit",
    "CalculationType",
    "CompoundingFrequency",
    "CalculationRequest",
    "CalculationResult",
    "ComparisonResult",
    "MonthlyBreakdown",
    "ProductCalculationRequest",
    "ProductConstraints",
    "ProductTerms",
]
