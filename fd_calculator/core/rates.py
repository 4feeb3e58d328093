"""
Rate and classification resolution.

Layers a classification bonus or a caller override on top of a base rate.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import NamedTuple

from loguru import logger

from fd_calculator.constants import (
    CLASSIFICATION_BONUS_STEP,
    MAX_ADDITIONAL_RATE,
    MAX_CLASSIFICATIONS,
)


class ResolvedRate(NamedTuple):
    """Rates applied to a calculation."""

    base_rate: Decimal  # Rate before any bonus
    additional_rate: Decimal  # Bonus or override delta
    effective_rate: Decimal  # base_rate + additional_rate


class RateResolver:
    """
    Resolves the effective rate for a deposit.

    The bonus policy is a flat business rule: every distinct classification
    (up to max_classifications) adds bonus_step points, never more than
    max_additional_rate in total.
    """

    def __init__(
        self,
        bonus_step: Decimal = CLASSIFICATION_BONUS_STEP,
        max_additional_rate: Decimal = MAX_ADDITIONAL_RATE,
        max_classifications: int = MAX_CLASSIFICATIONS,
    ) -> None:
        self.bonus_step = bonus_step
        self.max_additional_rate = max_additional_rate
        self.max_classifications = max_classifications

    def normalize_classifications(self, classifications: Iterable[str] | None) -> list[str]:
        """
        De-duplicate classifications and keep at most max_classifications.

        Blank codes are dropped; first occurrence order is kept.

        Example:
            >>> RateResolver().normalize_classifications(["SENIOR", "STAFF", "SENIOR", "VIP"])
            ['SENIOR', 'STAFF']
        """
        if not classifications:
            return []
        unique: list[str] = []
        for code in classifications:
            if code is None:
                continue
            code = code.strip()
            if code and code not in unique:
                unique.append(code)
        return unique[: self.max_classifications]

    def classification_bonus(self, classifications: Iterable[str] | None) -> Decimal:
        """
        Calculate the additional rate granted for customer classifications.

        Returns:
            Bonus in percentage points (0 when there are none)
        """
        counted = self.normalize_classifications(classifications)
        bonus = self.bonus_step * len(counted)
        return min(bonus, self.max_additional_rate)

    def resolve(
        self,
        base_rate: Decimal,
        classifications: Iterable[str] | None = None,
        custom_rate: Decimal | None = None,
        applicable_rate: Decimal | None = None,
    ) -> ResolvedRate:
        """
        Resolve base, additional and effective rates.

        A product-resolved applicable rate replaces base_rate. A custom
        override replaces the classification bonus and is silently capped
        at base + max_additional_rate.

        Args:
            base_rate: Caller or product base rate
            classifications: Customer classification codes
            custom_rate: Caller override rate
            applicable_rate: Rate resolved by the pricing lookup

        Returns:
            ResolvedRate
        """
        if applicable_rate is not None:
            base_rate = applicable_rate

        if custom_rate is not None:
            ceiling = base_rate + self.max_additional_rate
            if custom_rate <= ceiling:
                return ResolvedRate(base_rate, custom_rate - base_rate, custom_rate)
            logger.warning(
                f"Custom rate {custom_rate} exceeds maximum allowed rate {ceiling}, using capped rate"
            )
            return ResolvedRate(base_rate, self.max_additional_rate, ceiling)

        bonus = self.classification_bonus(classifications)
        return ResolvedRate(base_rate, bonus, base_rate + bonus)
