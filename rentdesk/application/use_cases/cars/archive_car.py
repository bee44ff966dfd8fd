"""Use cases for archiving and restoring cars."""

from __future__ import annotations

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import ActivityAction, Car, User
from rentdesk.infrastructure.repositories import CarRepository


def archive_car(
    session: Session, notifier: OperationalNotifier, car_id: int, *, actor: User
) -> Car:
    """Archive the car and mark it unavailable."""

    car = CarRepository(session).set_archived(car_id, archived=True)
    if car is None:
        raise EntityNotFoundError("Car not found")
    notifier.car_changed(actor=actor, car=car, action=ActivityAction.ARCHIVE_CAR)
    return car


def unarchive_car(
    session: Session, notifier: OperationalNotifier, car_id: int, *, actor: User
) -> Car:
    """Restore an archived car and make it available again."""

    car = CarRepository(session).set_archived(car_id, archived=False)
    if car is None:
        raise EntityNotFoundError("Car not found")
    notifier.car_changed(actor=actor, car=car, action=ActivityAction.UNARCHIVE_CAR)
    return car


__all__ = ["archive_car", "unarchive_car"]
