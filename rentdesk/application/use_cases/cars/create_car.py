"""Use case for listing a new car in the fleet."""

from __future__ import annotations

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import ActivityAction, Car, User
from rentdesk.infrastructure.repositories import CarRepository

from .validators import ensure_valid_car


def create_car(
    session: Session,
    notifier: OperationalNotifier,
    *,
    actor: User,
    brand: str,
    model: str,
    price_per_day: float,
    location: str = "",
    year: int | None = None,
    is_available: bool = True,
    description: str | None = None,
) -> Car:
    """Persist a car owned by ``actor`` and run the creation side effects."""

    entity = Car(
        id=None,
        brand=brand.strip(),
        model=model.strip(),
        year=year,
        location=location.strip(),
        price_per_day=price_per_day,
        is_available=is_available,
        archived=False,
        description=description,
        owner_id=actor.id,
        created_at=None,
        updated_at=None,
    )
    ensure_valid_car(entity)
    saved = CarRepository(session).create(entity)

    notifier.announce_new_car(saved)
    notifier.car_changed(actor=actor, car=saved, action=ActivityAction.CREATE_CAR)
    return saved


__all__ = ["create_car"]
