"""
FD Calculator.

Standalone package for fixed deposit interest calculations.

Example:
    >>> from decimal import Decimal
    >>> from fd_calculator import FdCalculator
    >>>
    >>> calc = FdCalculator()
    >>> result = calc.calculate({
    ...     "principal": Decimal("100000"),
    ...     "interest_rate": Decimal("8"),
    ...     "tenure": 12,
    ...     "tenure_unit": "MONTHS",
    ...     "calculation_type": "COMPOUND",
    ...     "compounding_frequency": "QUARTERLY",
    ... })
    >>> print(result.maturity_amount)
    108243.22
"""

from fd_calculator.cache import LookupCache
from fd_calculator.core import (
    CalculationRequest,
    CalculationResult,
    CalculationType,
    ComparisonResult,
    CompoundInterestCalculator,
    CompoundingFrequency,
    ConstraintValidator,
    FdCalculator,
    MonthlyBreakdown,
    ProductCalculationRequest,
    ProductConstraints,
    ProductTerms,
    RateResolver,
    SimpleInterestCalculator,
    TenureUnit,
)
from fd_calculator.exceptions import (
    CalculatorError,
    EmptyScenarioSetError,
    OutOfRangeError,
    UpstreamLookupFailure,
    ValidationError,
)
from fd_calculator.service import CustomerLookup, FdCalculatorService, ProductLookup
from fd_calculator.utils import (
    format_breakdown_table,
    format_calculation_result,
    format_comparison,
    format_currency,
    format_percentage,
    format_tenure,
    summarize_result,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "FdCalculator",
    "SimpleInterestCalculator",
    "CompoundInterestCalculator",
    "RateResolver",
    "ConstraintValidator",
    # Service
    "FdCalculatorService",
    "ProductLookup",
    "CustomerLookup",
    "LookupCache",
    # Models
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
    # Errors
    "CalculatorError",
    "ValidationError",
    "OutOfRangeError",
    "EmptyScenarioSetError",
    "UpstreamLookupFailure",
    # Formatters
    "format_currency",
    "format_percentage",
    "format_tenure",
    "format_calculation_result",
    "format_breakdown_table",
    "format_comparison",
    "summarize_result",
]
