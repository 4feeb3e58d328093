"""
Pure business logic calculator for fixed deposits.

This module contains standalone calculation logic without any
dependencies on lookups, caches or transport code. Every call is
independent; calculators hold only immutable policy values.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from dateutil.relativedelta import relativedelta
from loguru import logger

from fd_calculator.constants import DEFAULT_TDS_RATE
from fd_calculator.core.compound import CompoundInterestCalculator
from fd_calculator.core.enums import CalculationType, CompoundingFrequency, TenureUnit
from fd_calculator.core.models import (
    CalculationRequest,
    CalculationResult,
    ComparisonResult,
    ProductCalculationRequest,
    ProductTerms,
    parse_model,
)
from fd_calculator.core.rates import RateResolver, ResolvedRate
from fd_calculator.core.simple import SimpleInterestCalculator
from fd_calculator.core.validation import ConstraintValidator
from fd_calculator.exceptions import EmptyScenarioSetError
from fd_calculator.utils.rounding import round_money, round_years


if TYPE_CHECKING:
    from fd_calculator.config import Settings


def calculate_maturity_date(start_date: date, tenure: int, tenure_unit: TenureUnit) -> date:
    """
    Add a tenure to a start date using calendar arithmetic.

    Example:
        >>> calculate_maturity_date(date(2024, 1, 31), 1, TenureUnit.MONTHS)
        datetime.date(2024, 2, 29)
    """
    if tenure_unit is TenureUnit.DAYS:
        return start_date + relativedelta(days=tenure)
    if tenure_unit is TenureUnit.MONTHS:
        return start_date + relativedelta(months=tenure)
    return start_date + relativedelta(years=tenure)


class FdCalculator:
    """
    Fixed deposit calculation engine.

    Supports standalone calculations, product-based calculations with
    pre-resolved product terms, and best-of-N scenario comparison.
    """

    def __init__(
        self,
        simple_calculator: SimpleInterestCalculator | None = None,
        compound_calculator: CompoundInterestCalculator | None = None,
        rate_resolver: RateResolver | None = None,
        validator: ConstraintValidator | None = None,
        default_frequency: CompoundingFrequency = CompoundingFrequency.QUARTERLY,
    ) -> None:
        self.simple_calculator = simple_calculator or SimpleInterestCalculator()
        self.compound_calculator = compound_calculator or CompoundInterestCalculator()
        self.rate_resolver = rate_resolver or RateResolver()
        self.validator = validator or ConstraintValidator()
        self.default_frequency = default_frequency

    @classmethod
    def from_settings(cls, settings: "Settings") -> "FdCalculator":
        """
        Build a calculator from application settings.

        Args:
            settings: Settings instance carrying the policy values

        Returns:
            Configured FdCalculator
        """
        return cls(
            simple_calculator=SimpleInterestCalculator(settings.breakdown_max_months),
            compound_calculator=CompoundInterestCalculator(settings.breakdown_max_months),
            rate_resolver=RateResolver(
                bonus_step=settings.classification_bonus_step,
                max_additional_rate=settings.max_additional_rate,
                max_classifications=settings.max_classifications,
            ),
            default_frequency=settings.default_compounding_frequency,
        )

    def calculate(
        self, request: CalculationRequest | Mapping[str, Any]
    ) -> CalculationResult:
        """
        Calculate an FD from fully resolved inputs.

        Args:
            request: Calculation request or equivalent mapping

        Returns:
            CalculationResult

        Raises:
            ValidationError: If the request is malformed
            OutOfRangeError: If the request violates its product constraints
        """
        request = parse_model(CalculationRequest, request)
        logger.info(f"Processing standalone calculation for principal: {request.principal}")

        self.validator.validate(request.principal, request.tenure_in_months, request.constraints)

        classifications = self.rate_resolver.normalize_classifications(
            request.customer_classifications
        )
        rates = self.rate_resolver.resolve(
            base_rate=request.interest_rate,
            classifications=classifications,
            custom_rate=request.custom_interest_rate,
        )
        tds_rate = request.tds_rate if request.tds_rate is not None else DEFAULT_TDS_RATE

        result = self._build_result(
            principal=request.principal,
            rates=rates,
            tenure=request.tenure,
            tenure_unit=request.tenure_unit,
            calculation_type=request.calculation_type,
            frequency=request.compounding_frequency or self.default_frequency,
            tds_rate=tds_rate,
            start_date=request.start_date or date.today(),
            classifications=classifications,
        )
        if request.constraints is not None:
            result.product_id = request.constraints.product_id
            result.product_code = request.constraints.product_code
        return result

    def calculate_for_product(
        self,
        request: ProductCalculationRequest | Mapping[str, Any],
        product: ProductTerms,
        classifications: Sequence[str] | None = None,
        applicable_rate: Decimal | None = None,
        check_bounds: bool = True,
    ) -> CalculationResult:
        """
        Calculate an FD using a product's defaults.

        Args:
            request: Product-based calculation request
            product: Product terms resolved by the pricing lookup
            classifications: Customer classifications resolved by the caller;
                defaults to the request's own classifications
            applicable_rate: Rate resolved by the pricing lookup, takes
                precedence over the product's base rate
            check_bounds: Validate principal and tenure against the product
                bounds; callers that already did so pass False

        Returns:
            CalculationResult with product metadata

        Raises:
            ValidationError: If the request is malformed
            OutOfRangeError: If principal or tenure violates product bounds
        """
        request = parse_model(ProductCalculationRequest, request)
        logger.info(f"Processing product-based calculation for product ID: {product.id}")

        if check_bounds:
            self.validator.validate(
                request.principal, request.tenure_in_months, product.constraints()
            )

        if classifications is None:
            classifications = request.customer_classifications
        classifications = self.rate_resolver.normalize_classifications(classifications)

        rates = self.rate_resolver.resolve(
            base_rate=product.base_interest_rate,
            classifications=classifications,
            custom_rate=request.custom_interest_rate,
            applicable_rate=applicable_rate,
        )

        calculation_type = request.calculation_type or CalculationType.from_method(
            product.interest_calculation_method
        )
        frequency = request.compounding_frequency or CompoundingFrequency.from_label(
            product.interest_payout_frequency
        )

        apply_tds = request.apply_tds if request.apply_tds is not None else product.tds_applicable
        tds_rate = product.tds_rate if apply_tds and product.tds_rate is not None else DEFAULT_TDS_RATE

        result = self._build_result(
            principal=request.principal,
            rates=rates,
            tenure=request.tenure,
            tenure_unit=request.tenure_unit,
            calculation_type=calculation_type,
            frequency=frequency,
            tds_rate=tds_rate,
            start_date=request.start_date or date.today(),
            classifications=classifications,
        )
        result.product_id = product.id
        result.product_name = product.product_name
        result.product_code = product.product_code
        return result

    def compare(
        self,
        scenarios: Sequence[CalculationRequest | Mapping[str, Any]],
        common_principal: Decimal | None = None,
    ) -> ComparisonResult:
        """
        Compare independent scenarios and pick the highest maturity amount.

        Ties keep the first scenario. The caller's requests are never
        modified; a common principal is applied to copies.

        Args:
            scenarios: Ordered calculation requests
            common_principal: Optional principal shared by all scenarios

        Returns:
            ComparisonResult

        Raises:
            EmptyScenarioSetError: If there are no scenarios
            ValidationError: If a scenario is malformed
        """
        if not scenarios:
            raise EmptyScenarioSetError()

        logger.info(f"Comparing {len(scenarios)} FD scenarios")

        results: list[CalculationResult] = []
        best_index = 0
        for index, scenario in enumerate(scenarios):
            if common_principal is not None:
                scenario = self._with_principal(scenario, common_principal)
            result = self.calculate(scenario)
            results.append(result)
            if result.maturity_amount > results[best_index].maturity_amount:
                best_index = index

        return ComparisonResult(
            scenarios=results,
            best_scenario_index=best_index,
            best_maturity_amount=results[best_index].maturity_amount,
        )

    def _with_principal(
        self,
        scenario: CalculationRequest | Mapping[str, Any],
        principal: Decimal,
    ) -> CalculationRequest:
        if isinstance(scenario, CalculationRequest):
            data = scenario.model_dump()
        else:
            data = dict(scenario)
        data["principal"] = principal
        return parse_model(CalculationRequest, data)

    def _build_result(
        self,
        principal: Decimal,
        rates: ResolvedRate,
        tenure: int,
        tenure_unit: TenureUnit,
        calculation_type: CalculationType,
        frequency: CompoundingFrequency,
        tds_rate: Decimal,
        start_date: date,
        classifications: list[str],
    ) -> CalculationResult:
        tenure_in_months = tenure_unit.to_months(tenure)
        rate = rates.effective_rate

        if calculation_type is CalculationType.SIMPLE:
            raw_interest = self.simple_calculator.calculate_interest(
                principal, rate, tenure, tenure_unit
            )
            breakdown = self.simple_calculator.generate_monthly_breakdown(
                principal, rate, tenure_in_months, start_date
            )
            reported_frequency = None
        else:
            raw_interest = self.compound_calculator.calculate_interest(
                principal, rate, tenure, tenure_unit, frequency
            )
            breakdown = self.compound_calculator.generate_monthly_breakdown(
                principal, rate, tenure_in_months, frequency, start_date
            )
            reported_frequency = frequency

        # TDS is taken from the rounded interest so reported figures reconcile
        interest = round_money(max(raw_interest, Decimal("0")))
        tds_amount = round_money(interest * tds_rate / 100)
        net_interest = interest - tds_amount
        principal = round_money(principal)
        maturity_amount = principal + net_interest

        return CalculationResult(
            principal=principal,
            base_rate=rates.base_rate,
            additional_rate=rates.additional_rate,
            effective_rate=rates.effective_rate,
            tenure=tenure,
            tenure_unit=tenure_unit,
            tenure_in_years=round_years(tenure_unit.to_years(tenure)),
            calculation_type=calculation_type,
            compounding_frequency=reported_frequency,
            interest_earned=interest,
            tds_rate=tds_rate,
            tds_amount=tds_amount,
            net_interest=net_interest,
            maturity_amount=maturity_amount,
            start_date=start_date,
            maturity_date=calculate_maturity_date(start_date, tenure, tenure_unit),
            customer_classifications=list(classifications),
            monthly_breakdown=breakdown,
        )
