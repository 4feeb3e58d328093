"""Product constraint validation."""

from decimal import Decimal

from fd_calculator.core.models import ProductConstraints
from fd_calculator.exceptions import OutOfRangeError


class ConstraintValidator:
    """Checks principal and tenure against product bounds."""

    def validate_principal(self, principal: Decimal, constraints: ProductConstraints) -> None:
        """
        Raises:
            OutOfRangeError: If principal is outside [min_amount, max_amount]
        """
        product = constraints.identifier
        if constraints.min_amount is not None and principal < constraints.min_amount:
            raise OutOfRangeError("principal", principal, "minimum", constraints.min_amount, product)
        if constraints.max_amount is not None and principal > constraints.max_amount:
            raise OutOfRangeError("principal", principal, "maximum", constraints.max_amount, product)

    def validate_tenure(self, tenure_in_months: int, constraints: ProductConstraints) -> None:
        """
        Raises:
            OutOfRangeError: If tenure is outside [min_term_months, max_term_months]
        """
        product = constraints.identifier
        if constraints.min_term_months is not None and tenure_in_months < constraints.min_term_months:
            raise OutOfRangeError(
                "tenure_months", tenure_in_months, "minimum", constraints.min_term_months, product
            )
        if constraints.max_term_months is not None and tenure_in_months > constraints.max_term_months:
            raise OutOfRangeError(
                "tenure_months", tenure_in_months, "maximum", constraints.max_term_months, product
            )

    def validate(
        self,
        principal: Decimal,
        tenure_in_months: int,
        constraints: ProductConstraints | None,
    ) -> None:
        """Validate a request against product bounds; no bounds means no check."""
        if constraints is None:
            return
        self.validate_principal(principal, constraints)
        self.validate_tenure(tenure_in_months, constraints)
