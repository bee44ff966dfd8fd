"""Routes for browsing and managing the rental fleet."""

from __future__ import annotations

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from rentdesk.application.use_cases.cars import (
    PricedCar,
    archive_car as archive_car_uc,
    create_car as create_car_uc,
    get_car as get_car_uc,
    list_cars as list_cars_uc,
    unarchive_car as unarchive_car_uc,
    update_car as update_car_uc,
)
from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import Car, User
from rentdesk.infrastructure.database import get_db
from rentdesk.interfaces.api.dependencies import get_notifier, require_capability
from rentdesk.interfaces.api.schemas import (
    CarCreate,
    CarPageRead,
    CarRead,
    CarUpdate,
    Pagination,
    PricedCarRead,
)

router = APIRouter(prefix="/cars", tags=["cars"])


def _car_to_read_model(car: Car) -> CarRead:
    return CarRead.model_validate(car)


def _priced_car_to_read_model(priced: PricedCar) -> PricedCarRead:
    payload = CarRead.model_validate(priced.car).model_dump()
    payload["price_per_day"] = priced.price.resolved_price
    payload["original_price"] = priced.price.original_price
    payload["applied_promotion_id"] = priced.price.applied_promotion_id
    return PricedCarRead(**payload)


def _raise_for_error(exc: ValueError) -> NoReturn:
    if isinstance(exc, EntityNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/", response_model=CarPageRead)
def list_cars(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    archived: bool = False,
    brand: str | None = None,
    location: str | None = None,
    is_available: bool | None = None,
    min_price: float | None = Query(None, ge=0),
    max_price: float | None = Query(None, ge=0),
    db: Session = Depends(get_db),
) -> CarPageRead:
    """Return a page of cars priced against the promotions in effect right now."""

    try:
        result = list_cars_uc(
            db,
            page=page,
            limit=limit,
            archived=archived,
            brand=brand,
            location=location,
            is_available=is_available,
            min_price=min_price,
            max_price=max_price,
        )
    except ValueError as exc:
        _raise_for_error(exc)

    return CarPageRead(
        data=[_priced_car_to_read_model(item) for item in result.items],
        pagination=Pagination(
            total=result.total,
            page=result.page,
            limit=result.limit,
            total_pages=result.total_pages,
        ),
    )


@router.get("/{car_id}", response_model=PricedCarRead)
def read_car(car_id: int, db: Session = Depends(get_db)) -> PricedCarRead:
    """Return a single car with its current price."""

    try:
        priced = get_car_uc(db, car_id)
    except ValueError as exc:
        _raise_for_error(exc)
    return _priced_car_to_read_model(priced)


@router.post("/", response_model=CarRead, status_code=status.HTTP_201_CREATED)
def create_car(
    car_in: CarCreate,
    db: Session = Depends(get_db),
    notifier: OperationalNotifier = Depends(get_notifier),
    current_user: User = Depends(require_capability("cars:write")),
) -> CarRead:
    """List a new car. Customers are told about it in realtime."""

    try:
        car = create_car_uc(db, notifier, actor=current_user, **car_in.model_dump())
    except ValueError as exc:
        _raise_for_error(exc)
    return _car_to_read_model(car)


@router.put("/{car_id}", response_model=CarRead)
def update_car(
    car_id: int,
    car_in: CarUpdate,
    db: Session = Depends(get_db),
    notifier: OperationalNotifier = Depends(get_notifier),
    current_user: User = Depends(require_capability("cars:write")),
) -> CarRead:
    """Update the editable fields of a car."""

    try:
        car = update_car_uc(
            db,
            notifier,
            car_id,
            actor=current_user,
            changes=car_in.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        _raise_for_error(exc)
    return _car_to_read_model(car)


@router.patch("/{car_id}/archive", response_model=CarRead)
def archive_car(
    car_id: int,
    db: Session = Depends(get_db),
    notifier: OperationalNotifier = Depends(get_notifier),
    current_user: User = Depends(require_capability("cars:write")),
) -> CarRead:
    """Archive a car and take it out of rotation."""

    try:
        car = archive_car_uc(db, notifier, car_id, actor=current_user)
    except ValueError as exc:
        _raise_for_error(exc)
    return _car_to_read_model(car)


@router.patch("/{car_id}/unarchive", response_model=CarRead)
def unarchive_car(
    car_id: int,
    db: Session = Depends(get_db),
    notifier: OperationalNotifier = Depends(get_notifier),
    current_user: User = Depends(require_capability("cars:write")),
) -> CarRead:
    """Restore an archived car."""

    try:
        car = unarchive_car_uc(db, notifier, car_id, actor=current_user)
    except ValueError as exc:
        _raise_for_error(exc)
    return _car_to_read_model(car)


__all__ = ["router"]
