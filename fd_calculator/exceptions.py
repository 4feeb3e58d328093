"""
Exception types raised by the FD calculator.

All errors are synchronous and local; nothing is retried inside the engine.
"""

from decimal import Decimal
from typing import Any


class CalculatorError(Exception):
    """Base class for FD calculator errors."""
    pass


class ValidationError(CalculatorError, ValueError):
    """Raised when a request is malformed or a field is out of range."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        """Dotted names of the offending fields."""
        return [
            ".".join(str(part) for part in error.get("loc", ()))
            for error in self.errors
        ]


class OutOfRangeError(ValidationError):
    """
    Raised when principal or tenure violates product bounds.

    Attributes:
        field: Violating field ("principal" or "tenure_months")
        value: Offending value
        bound: "minimum" or "maximum"
        limit: Product limit that was violated
        product: Product identifier (code or id), if known
    """

    def __init__(
        self,
        field: str,
        value: Decimal | int,
        bound: str,
        limit: Decimal | int,
        product: str | None = None,
    ) -> None:
        relation = "below" if bound == "minimum" else "exceeds"
        target = f" for product {product}" if product else ""
        super().__init__(
            f"{field} {value} is {relation} {bound} {limit}{target}",
            errors=[{"loc": (field,), "msg": f"{relation} {bound} {limit}"}],
        )
        self.field = field
        self.value = value
        self.bound = bound
        self.limit = limit
        self.product = product


class EmptyScenarioSetError(CalculatorError):
    """Raised when a comparison is requested with no scenarios."""

    def __init__(self) -> None:
        super().__init__("At least one scenario is required for comparison")


class UpstreamLookupFailure(CalculatorError):
    """
    Raised when a product or customer lookup cannot be completed.

    Attributes:
        lookup: Name of the failed lookup (e.g. "product")
        key: Lookup key
    """

    def __init__(self, lookup: str, key: Any, reason: str | None = None) -> None:
        message = f"{lookup} lookup failed for {key!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.lookup = lookup
        self.key = key
