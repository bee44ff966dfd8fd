"""Domain entity representing a rental car."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Car:
    """A car offered for rent. ``price_per_day`` is the base price."""

    id: int | None
    brand: str
    model: str
    year: int | None
    location: str
    price_per_day: float
    is_available: bool
    archived: bool
    description: str | None
    owner_id: int | None
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["Car"]
