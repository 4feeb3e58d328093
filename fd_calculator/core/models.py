"""Pydantic models for the FD calculator."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from fd_calculator.core.enums import CalculationType, CompoundingFrequency, TenureUnit
from fd_calculator.exceptions import ValidationError


ModelT = TypeVar("ModelT", bound=BaseModel)


def _upper_case(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().upper()
    return value


class ProductConstraints(BaseModel):
    """Product-defined bounds a request must fall within.

    A missing bound means there is no limit on that side.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int | None = Field(default=None, description="Product identifier")
    product_code: str | None = Field(default=None, description="Product code")
    min_amount: Decimal | None = Field(default=None, ge=0, description="Minimum principal")
    max_amount: Decimal | None = Field(default=None, ge=0, description="Maximum principal")
    min_term_months: int | None = Field(default=None, ge=0, description="Minimum tenure in months")
    max_term_months: int | None = Field(default=None, ge=0, description="Maximum tenure in months")

    @property
    def identifier(self) -> str | None:
        """Human readable product identifier used in error messages."""
        if self.product_code:
            return self.product_code
        if self.product_id is not None:
            return str(self.product_id)
        return None


class CalculationRequest(BaseModel):
    """Standalone FD calculation request with fully resolved inputs."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
    )

    principal: Decimal = Field(..., gt=0, decimal_places=2, description="Principal amount")
    interest_rate: Decimal = Field(..., ge=0, le=100, description="Nominal annual rate, percent")
    tenure: int = Field(..., gt=0, description="Tenure in tenure_unit")
    tenure_unit: TenureUnit = Field(..., description="Unit of tenure")
    calculation_type: CalculationType = Field(..., description="SIMPLE or COMPOUND")
    compounding_frequency: CompoundingFrequency | None = Field(
        default=None, description="Compounding frequency (compound only)"
    )
    tds_rate: Decimal | None = Field(default=None, ge=0, le=100, description="TDS rate, percent")
    customer_classifications: list[str] = Field(
        default_factory=list, description="Customer classification codes"
    )
    custom_interest_rate: Decimal | None = Field(
        default=None, ge=0, le=100, description="Caller override rate, percent"
    )
    constraints: ProductConstraints | None = Field(
        default=None, description="Optional product bounds to validate against"
    )
    start_date: date | None = Field(default=None, description="Deposit start date (today if unset)")

    @field_validator("tenure_unit", "calculation_type", "compounding_frequency", mode="before")
    @classmethod
    def normalize_enums(cls, v: Any) -> Any:
        """Accept enum values in any letter case."""
        return _upper_case(v)

    @property
    def tenure_in_months(self) -> int:
        return self.tenure_unit.to_months(self.tenure)


class ProductTerms(BaseModel):
    """Product details resolved by the pricing lookup."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product display name")
    product_code: str = Field(..., description="Product code")
    min_amount: Decimal | None = Field(default=None, ge=0)
    max_amount: Decimal | None = Field(default=None, ge=0)
    min_term_months: int | None = Field(default=None, ge=0)
    max_term_months: int | None = Field(default=None, ge=0)
    base_interest_rate: Decimal = Field(..., ge=0, le=100)
    interest_calculation_method: str | None = Field(default=None)
    interest_payout_frequency: str | None = Field(default=None)
    tds_applicable: bool = Field(default=False)
    tds_rate: Decimal | None = Field(default=None, ge=0, le=100)

    def constraints(self) -> ProductConstraints:
        """Project the product onto its principal and tenure bounds."""
        return ProductConstraints(
            product_id=self.id,
            product_code=self.product_code,
            min_amount=self.min_amount,
            max_amount=self.max_amount,
            min_term_months=self.min_term_months,
            max_term_months=self.max_term_months,
        )


class ProductCalculationRequest(BaseModel):
    """FD calculation request based on a product's defaults."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
    )

    product_id: int = Field(..., description="Product to calculate against")
    principal: Decimal = Field(..., gt=0, decimal_places=2)
    tenure: int = Field(..., gt=0)
    tenure_unit: TenureUnit = Field(...)
    calculation_type: CalculationType | None = Field(
        default=None, description="Overrides the product's calculation method"
    )
    compounding_frequency: CompoundingFrequency | None = Field(
        default=None, description="Overrides the product's payout frequency"
    )
    customer_id: int | None = Field(default=None, description="Customer to look up")
    customer_classifications: list[str] = Field(default_factory=list)
    custom_interest_rate: Decimal | None = Field(default=None, ge=0, le=100)
    apply_tds: bool | None = Field(default=None, description="Overrides product TDS applicability")
    start_date: date | None = Field(default=None)

    @field_validator("tenure_unit", "calculation_type", "compounding_frequency", mode="before")
    @classmethod
    def normalize_enums(cls, v: Any) -> Any:
        """Accept enum values in any letter case."""
        return _upper_case(v)

    @property
    def tenure_in_months(self) -> int:
        return self.tenure_unit.to_months(self.tenure)


class MonthlyBreakdown(BaseModel):
    """Interest accrued in one elapsed month."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, description="Month index, starting at 1")
    period_end: date = Field(..., description="Last day covered by this entry")
    opening_balance: Decimal = Field(..., ge=0)
    interest_earned: Decimal = Field(..., ge=0)
    closing_balance: Decimal = Field(..., ge=0)


class CalculationResult(BaseModel):
    """Result of an FD calculation. Money values are rounded to 2 places."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
    )

    principal: Decimal = Field(..., gt=0)
    base_rate: Decimal = Field(..., ge=0, description="Rate before bonus or override")
    additional_rate: Decimal = Field(..., description="Classification bonus or override delta")
    effective_rate: Decimal = Field(..., ge=0, description="base_rate + additional_rate")
    tenure: int = Field(..., gt=0)
    tenure_unit: TenureUnit
    tenure_in_years: Decimal = Field(..., ge=0)
    calculation_type: CalculationType
    compounding_frequency: CompoundingFrequency | None = None
    interest_earned: Decimal = Field(..., ge=0)
    tds_rate: Decimal = Field(..., ge=0)
    tds_amount: Decimal = Field(..., ge=0)
    net_interest: Decimal = Field(..., ge=0)
    maturity_amount: Decimal = Field(..., gt=0)
    start_date: date
    maturity_date: date
    customer_classifications: list[str] = Field(default_factory=list)
    monthly_breakdown: list[MonthlyBreakdown] = Field(default_factory=list)
    product_id: int | None = None
    product_name: str | None = None
    product_code: str | None = None


class ComparisonResult(BaseModel):
    """Outcome of comparing several FD scenarios."""

    scenarios: list[CalculationResult] = Field(..., min_length=1)
    best_scenario_index: int = Field(..., ge=0)
    best_maturity_amount: Decimal

    @property
    def best_scenario(self) -> CalculationResult:
        return self.scenarios[self.best_scenario_index]


def parse_model(model: type[ModelT], data: ModelT | Mapping[str, Any]) -> ModelT:
    """
    Validate input into a model instance.

    Args:
        model: Target model class
        data: Model instance or plain mapping

    Returns:
        Validated model instance

    Raises:
        ValidationError: If the data does not satisfy the model
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {model.__name__}: {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e
