"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Keep tests independent of a developer's environment
for _name in list(os.environ):
    if _name.startswith("FD_CALC_"):
        del os.environ[_name]

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fd_calculator import FdCalculator, ProductTerms


@pytest.fixture
def calc() -> FdCalculator:
    """Calculator with default policy."""
    return FdCalculator()


@pytest.fixture
def start_date() -> date:
    """Fixed deposit start date so results are deterministic."""
    return date(2024, 1, 15)


@pytest.fixture
def regular_product() -> ProductTerms:
    """Compounding product with bounds and TDS."""
    return ProductTerms(
        id=1,
        product_name="Regular Fixed Deposit",
        product_code="FD-REG",
        min_amount=Decimal("10000"),
        max_amount=Decimal("10000000"),
        min_term_months=6,
        max_term_months=120,
        base_interest_rate=Decimal("6.5"),
        interest_calculation_method="COMPOUND",
        interest_payout_frequency="quarterly",
        tds_applicable=True,
        tds_rate=Decimal("10"),
    )


@pytest.fixture
def mock_redis_client():
    """Mock Redis client for caching tests."""
    client = MagicMock()
    client.get = MagicMock(return_value=None)
    client.set = MagicMock(return_value=True)
    client.delete = MagicMock(return_value=1)
    client.scan_iter = MagicMock(return_value=iter([]))
    return client
