"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Interest calculators
- Rate resolver
- Request payload factory
"""

from decimal import Decimal

import pytest

from fd_calculator import (
    CompoundInterestCalculator,
    RateResolver,
    SimpleInterestCalculator,
)


@pytest.fixture
def simple_calc() -> SimpleInterestCalculator:
    return SimpleInterestCalculator()


@pytest.fixture
def compound_calc() -> CompoundInterestCalculator:
    return CompoundInterestCalculator()


@pytest.fixture
def resolver() -> RateResolver:
    return RateResolver()


@pytest.fixture
def make_request(start_date):
    """
    Build a standalone request payload.

    Defaults: 100000 principal, 7% simple interest for 12 months.

    Returns:
        Callable accepting field overrides
    """
    def _make(**overrides):
        payload = {
            "principal": Decimal("100000"),
            "interest_rate": Decimal("7"),
            "tenure": 12,
            "tenure_unit": "MONTHS",
            "calculation_type": "SIMPLE",
            "start_date": start_date,
        }
        payload.update(overrides)
        return payload

    return _make
