"""Domain entities describing promotions and the prices they produce."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class DiscountType(str, Enum):
    """How ``discount_value`` is applied to a base price."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


class PromotionScope(str, Enum):
    """Which cars a promotion targets."""

    ALL = "all"
    CAR = "car"


def coerce_discount_value(value: Any) -> float:
    """Return ``value`` as a finite float, or ``0.0`` when it is not numeric.

    Form submissions send ``""`` for an empty number input; storing anything
    other than a real number would poison every price computed from it.
    """

    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


@dataclass
class Promotion:
    """Discount rule applied to every car or to a list of cars."""

    id: int | None
    title: str
    description: str | None
    discount_type: DiscountType
    discount_value: float
    applicable_to: PromotionScope
    start_date: datetime
    end_date: datetime
    is_active: bool
    item_ids: list[int] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_effective(self, at: datetime) -> bool:
        """Return ``True`` when the promotion is switched on and ``at`` is in its window."""

        return self.is_active and self.start_date <= at <= self.end_date

    def applies_to(self, car_id: int | None) -> bool:
        """Return ``True`` when the promotion scope includes ``car_id``."""

        if self.applicable_to is PromotionScope.ALL:
            return True
        return car_id is not None and car_id in self.item_ids

    def discounted_price(self, price: float) -> float:
        """Return ``price`` after this promotion's discount. Not floored at zero."""

        if self.discount_type is DiscountType.PERCENTAGE:
            return price - price * (self.discount_value / 100)
        return price - self.discount_value


@dataclass(frozen=True)
class EffectivePrice:
    """Price of a car once the best applicable promotion is taken into account."""

    original_price: float
    resolved_price: float
    applied_promotion_id: int | None = None


__all__ = [
    "DiscountType",
    "EffectivePrice",
    "Promotion",
    "PromotionScope",
    "coerce_discount_value",
]
