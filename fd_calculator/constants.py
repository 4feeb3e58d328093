"""
Default constants for the FD calculator.

Business policy values used when no settings override them.
"""

from decimal import Decimal

# Money is reported with two decimal places (ROUND_HALF_UP)
MONEY_QUANTUM = Decimal("0.01")
# Tenure in years is reported with four decimal places
YEARS_QUANTUM = Decimal("0.0001")

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

# Classification bonus policy: 0.25 points per distinct classification,
# at most 2 classifications counted, never more than 2.0 points in total.
CLASSIFICATION_BONUS_STEP = Decimal("0.25")
MAX_CLASSIFICATIONS = 2
MAX_ADDITIONAL_RATE = Decimal("2.0")

# Monthly breakdown is only produced for tenures up to 10 years
BREAKDOWN_MAX_MONTHS = 120

DEFAULT_TDS_RATE = Decimal("0")
