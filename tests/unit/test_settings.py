"""
Unit tests for calculator settings and logging setup.

Tests cover:
- Defaults and environment overrides
- Settings validation
- Building a calculator from settings
- Log sinks
"""

from datetime import date
from decimal import Decimal

import pytest
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from fd_calculator import CompoundingFrequency, FdCalculator
from fd_calculator.config import Settings
from fd_calculator.logging_config import setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.classification_bonus_step == Decimal("0.25")
        assert settings.max_additional_rate == Decimal("2.0")
        assert settings.max_classifications == 2
        assert settings.breakdown_max_months == 120
        assert settings.default_compounding_frequency is CompoundingFrequency.QUARTERLY
        assert settings.redis_url is None

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("FD_CALC_MAX_CLASSIFICATIONS", "3")
        monkeypatch.setenv("FD_CALC_DEFAULT_COMPOUNDING_FREQUENCY", "MONTHLY")
        monkeypatch.setenv("FD_CALC_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.max_classifications == 3
        assert settings.default_compounding_frequency is CompoundingFrequency.MONTHLY
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_bonus_step_above_ceiling(self) -> None:
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, classification_bonus_step=Decimal("3"))


class TestCalculatorFromSettings:
    """Tests for FdCalculator.from_settings."""

    def test_policy_values_applied(self) -> None:
        settings = Settings(
            _env_file=None,
            classification_bonus_step=Decimal("0.5"),
            max_classifications=3,
            breakdown_max_months=6,
            default_compounding_frequency=CompoundingFrequency.ANNUALLY,
        )
        calc = FdCalculator.from_settings(settings)

        result = calc.calculate({
            "principal": "100000",
            "interest_rate": "6",
            "tenure": 12,
            "tenure_unit": "MONTHS",
            "calculation_type": "COMPOUND",
            "customer_classifications": ["A", "B", "C", "D"],
            "start_date": date(2024, 1, 1),
        })

        assert result.additional_rate == Decimal("1.5")
        assert result.compounding_frequency is CompoundingFrequency.ANNUALLY
        assert result.interest_earned == Decimal("7500.00")
        assert result.monthly_breakdown == []


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_sink(self, tmp_path) -> None:
        log_file = tmp_path / "fd_calculator.log"

        try:
            setup_logging(Settings(_env_file=None, log_file=str(log_file)))
            logger.info("calculation finished")
        finally:
            logger.remove()

        assert "calculation finished" in log_file.read_text(encoding="utf-8")

    def test_level_filters_messages(self, tmp_path) -> None:
        log_file = tmp_path / "fd_calculator.log"

        try:
            setup_logging(Settings(_env_file=None, log_level="WARNING", log_file=str(log_file)))
            logger.info("hidden")
            logger.warning("shown")
        finally:
            logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "shown" in content
        assert "hidden" not in content
