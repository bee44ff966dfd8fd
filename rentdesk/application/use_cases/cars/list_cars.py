"""Use cases returning cars annotated with their promotional price."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.promotions import active_promotions, resolve_price
from rentdesk.domain.entities import Car, EffectivePrice
from rentdesk.infrastructure.repositories import CarRepository


@dataclass(frozen=True)
class PricedCar:
    """A car together with the price customers pay today."""

    car: Car
    price: EffectivePrice


@dataclass(frozen=True)
class CarPage:
    """One page of priced cars plus pagination metadata."""

    items: list[PricedCar]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def list_cars(
    session: Session,
    *,
    page: int = 1,
    limit: int = 12,
    archived: bool = False,
    brand: str | None = None,
    location: str | None = None,
    is_available: bool | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    now: datetime | None = None,
) -> CarPage:
    """Return a page of cars, newest first, each priced against current promotions.

    Price filters apply to the base price, before promotions.
    """

    if page < 1:
        raise ValueError("Page must be greater than or equal to 1")
    if limit < 1:
        raise ValueError("Limit must be greater than or equal to 1")

    cars, total = CarRepository(session).list(
        archived=archived,
        brand=brand,
        location=location,
        is_available=is_available,
        min_price=min_price,
        max_price=max_price,
        offset=(page - 1) * limit,
        limit=limit,
    )
    promotions = active_promotions(session, now=now)
    items = [PricedCar(car=car, price=resolve_price(car, promotions)) for car in cars]
    return CarPage(items=items, total=total, page=page, limit=limit)


def get_car(session: Session, car_id: int, *, now: datetime | None = None) -> PricedCar:
    """Return the car identified by ``car_id`` with its current price."""

    car = CarRepository(session).get(car_id)
    if car is None:
        raise EntityNotFoundError("Car not found")
    promotions = active_promotions(session, now=now)
    return PricedCar(car=car, price=resolve_price(car, promotions))


__all__ = ["CarPage", "PricedCar", "get_car", "list_cars"]
