"""
Calculator settings.

Loads configuration from environment variables using pydantic-settings.
"""

from decimal import Decimal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fd_calculator.constants import (
    BREAKDOWN_MAX_MONTHS,
    CLASSIFICATION_BONUS_STEP,
    MAX_ADDITIONAL_RATE,
    MAX_CLASSIFICATIONS,
)
from fd_calculator.core.enums import CompoundingFrequency


class Settings(BaseSettings):
    """FD calculator settings loaded from FD_CALC_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FD_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rate policy
    classification_bonus_step: Decimal = Field(
        default=CLASSIFICATION_BONUS_STEP, ge=0,
        description="Additional rate granted per distinct classification, percent points"
    )
    max_additional_rate: Decimal = Field(
        default=MAX_ADDITIONAL_RATE, ge=0,
        description="Ceiling for bonus and override delta, percent points"
    )
    max_classifications: int = Field(
        default=MAX_CLASSIFICATIONS, ge=0,
        description="Number of distinct classifications counted towards the bonus"
    )

    # Calculation
    breakdown_max_months: int = Field(
        default=BREAKDOWN_MAX_MONTHS, ge=0,
        description="Longest tenure for which a monthly breakdown is produced"
    )
    default_compounding_frequency: CompoundingFrequency = CompoundingFrequency.QUARTERLY

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Lookup cache
    redis_url: str | None = None
    cache_ttl_seconds: int = Field(default=3600, gt=0)
    cache_prefix: str = "fd_calc"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        allowed = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return level

    @model_validator(mode="after")
    def validate_bonus_policy(self) -> "Settings":
        """The per-classification step must fit under the ceiling."""
        if self.classification_bonus_step > self.max_additional_rate:
            raise ValueError(
                "classification_bonus_step cannot exceed max_additional_rate"
            )
        return self


settings = Settings()
