"""
FD calculator service.

Orchestrates product and customer lookups around the pure calculation
engine. Lookups are injected collaborators; transport is not handled here.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any, Protocol

from loguru import logger

from fd_calculator.cache import CLASSIFICATIONS, PRODUCTS, LookupCache
from fd_calculator.config import settings
from fd_calculator.core.calculator import FdCalculator
from fd_calculator.core.models import (
    CalculationRequest,
    CalculationResult,
    ComparisonResult,
    ProductCalculationRequest,
    ProductTerms,
    parse_model,
)
from fd_calculator.exceptions import UpstreamLookupFailure


class ProductLookup(Protocol):
    """Product pricing collaborator."""

    def get_product(self, product_id: int) -> ProductTerms | Mapping[str, Any] | None:
        ...

    def get_applicable_rate(
        self,
        product_id: int,
        principal: Decimal,
        tenure_months: int,
        classification: str | None,
    ) -> Decimal | None:
        ...


class CustomerLookup(Protocol):
    """Customer profile collaborator."""

    def get_customer_classification(self, customer_id: int) -> str | None:
        ...


class FdCalculatorService:
    """
    Service exposing standalone, product-based and comparison calculations.

    Product lookups are fatal on failure since bounds and base rate are
    required. Classification and applicable-rate lookups degrade gracefully.
    """

    def __init__(
        self,
        products: ProductLookup,
        customers: CustomerLookup | None = None,
        calculator: FdCalculator | None = None,
        cache: LookupCache | None = None,
    ) -> None:
        """
        Initialize FD calculator service.

        Args:
            products: Product pricing lookup
            customers: Customer profile lookup (optional)
            calculator: Calculation engine (built from settings if omitted)
            cache: Optional lookup cache
        """
        self.products = products
        self.customers = customers
        self.calculator = calculator or FdCalculator.from_settings(settings)
        self.cache = cache

    def calculate_standalone(
        self, request: CalculationRequest | Mapping[str, Any]
    ) -> CalculationResult:
        """Calculate an FD from caller-supplied inputs only."""
        return self.calculator.calculate(request)

    def calculate_with_product(
        self, request: ProductCalculationRequest | Mapping[str, Any]
    ) -> CalculationResult:
        """
        Calculate an FD using product defaults.

        Raises:
            UpstreamLookupFailure: If the product cannot be resolved
            OutOfRangeError: If principal or tenure violates product bounds
        """
        request = parse_model(ProductCalculationRequest, request)
        product = self.get_product(request.product_id)

        # Bounds are checked before the rate lookup is called
        tenure_months = request.tenure_in_months
        self.calculator.validator.validate(request.principal, tenure_months, product.constraints())

        classifications = self.resolve_classifications(request)
        applicable_rate = self.get_applicable_rate(
            product.id,
            request.principal,
            tenure_months,
            classifications[0] if classifications else None,
        )

        return self.calculator.calculate_for_product(
            request,
            product,
            classifications=classifications,
            applicable_rate=applicable_rate,
            check_bounds=False,
        )

    def compare_scenarios(
        self,
        scenarios: Sequence[CalculationRequest | Mapping[str, Any]],
        common_principal: Decimal | None = None,
    ) -> ComparisonResult:
        """Compare standalone scenarios, see FdCalculator.compare."""
        return self.calculator.compare(scenarios, common_principal=common_principal)

    def get_product(self, product_id: int) -> ProductTerms:
        """
        Resolve product terms, using the cache when available.

        Raises:
            UpstreamLookupFailure: If the lookup fails or finds nothing
        """
        if self.cache is not None:
            cached = self.cache.get_model(PRODUCTS, product_id, ProductTerms)
            if cached is not None:
                return cached

        try:
            product = self.products.get_product(product_id)
        except Exception as e:
            logger.error(f"Failed to fetch product {product_id}: {e}")
            raise UpstreamLookupFailure("product", product_id, str(e)) from e

        if product is None:
            raise UpstreamLookupFailure("product", product_id, "product not found")

        product = parse_model(ProductTerms, product)
        if self.cache is not None:
            self.cache.set(PRODUCTS, product_id, product)
        return product

    def get_applicable_rate(
        self,
        product_id: int,
        principal: Decimal,
        tenure_months: int,
        classification: str | None,
    ) -> Decimal | None:
        """Resolve the pricing rate; None falls back to the product base rate."""
        try:
            rate = self.products.get_applicable_rate(
                product_id, principal, tenure_months, classification
            )
        except Exception as e:
            logger.warning(f"Failed to fetch applicable rate for product {product_id}: {e}")
            return None
        return Decimal(str(rate)) if rate is not None else None

    def get_customer_classification(self, customer_id: int) -> str | None:
        """
        Resolve a customer's classification.

        Lookup failures degrade to no classification.
        """
        if self.customers is None:
            return None

        if self.cache is not None:
            cached = self.cache.get(CLASSIFICATIONS, customer_id)
            if cached is not None:
                return cached

        try:
            classification = self.customers.get_customer_classification(customer_id)
        except Exception as e:
            logger.warning(f"Failed to fetch customer classification: {e}")
            return None

        if classification and self.cache is not None:
            self.cache.set(CLASSIFICATIONS, customer_id, classification)
        return classification

    def resolve_classifications(self, request: ProductCalculationRequest) -> list[str]:
        """
        Merge the looked-up classification with the caller's list.

        The looked-up classification comes first; the result is
        de-duplicated and truncated by the rate resolver.
        """
        classifications: list[str] = []
        if request.customer_id is not None:
            classification = self.get_customer_classification(request.customer_id)
            if classification:
                classifications.append(classification)
        classifications.extend(request.customer_classifications)
        return self.calculator.rate_resolver.normalize_classifications(classifications)

    def invalidate_product(self, product_id: int) -> None:
        """Drop a cached product after it changes upstream."""
        if self.cache is not None:
            self.cache.invalidate(PRODUCTS, product_id)

    def invalidate_customer(self, customer_id: int) -> None:
        """Drop a cached customer classification after it changes upstream."""
        if self.cache is not None:
            self.cache.invalidate(CLASSIFICATIONS, customer_id)
