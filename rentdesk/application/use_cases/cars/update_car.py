"""Use case for editing a car."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import ActivityAction, Car, User
from rentdesk.infrastructure.repositories import CarRepository

from .validators import ensure_valid_car

_EDITABLE_FIELDS = (
    "brand",
    "model",
    "year",
    "location",
    "price_per_day",
    "is_available",
    "description",
)


def update_car(
    session: Session,
    notifier: OperationalNotifier,
    car_id: int,
    *,
    actor: User,
    changes: dict[str, Any],
) -> Car:
    """Apply ``changes`` to the car and notify when an employee made them."""

    repository = CarRepository(session)
    current = repository.get(car_id)
    if current is None:
        raise EntityNotFoundError("Car not found")

    unknown = sorted(set(changes) - set(_EDITABLE_FIELDS))
    if unknown:
        raise ValueError(f"Unknown car fields: {', '.join(unknown)}")

    updated = replace(current, **changes)
    ensure_valid_car(updated)
    saved = repository.update(updated)
    if saved is None:
        raise EntityNotFoundError("Car not found")

    notifier.car_changed(actor=actor, car=saved, action=ActivityAction.UPDATE_CAR)
    return saved


__all__ = ["update_car"]
