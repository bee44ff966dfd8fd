"""Persistence layer for rental cars."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Query, Session

from rentdesk.domain.entities import Car
from rentdesk.infrastructure.models import CarModel
from rentdesk.utils import ensure_app_timezone


class CarRepository:
    """Provide CRUD operations for :class:`Car` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        archived: bool = False,
        brand: str | None = None,
        location: str | None = None,
        is_available: bool | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> tuple[Sequence[Car], int]:
        """Return a page of cars matching the filters and the total match count."""

        query = self._filtered_query(
            archived=archived,
            brand=brand,
            location=location,
            is_available=is_available,
            min_price=min_price,
            max_price=max_price,
        )
        total = query.count()
        query = query.order_by(CarModel.created_at.desc(), CarModel.id.desc())
        query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def get(self, car_id: int) -> Car | None:
        model = self.session.get(CarModel, car_id)
        return self._to_entity(model) if model else None

    def create(self, car: Car) -> Car:
        model = CarModel()
        self._apply_entity_to_model(model, car)
        model.archived = car.archived
        model.owner_id = car.owner_id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, car: Car) -> Car | None:
        """Persist editable fields of ``car``; ``None`` when it no longer exists."""

        if car.id is None:
            raise ValueError("Car id is required for updates")
        model = self.session.get(CarModel, car.id)
        if model is None:
            return None
        self._apply_entity_to_model(model, car)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_archived(self, car_id: int, *, archived: bool) -> Car | None:
        """Archive or restore a car, toggling its availability accordingly."""

        model = self.session.get(CarModel, car_id)
        if model is None:
            return None
        model.archived = archived
        model.is_available = not archived
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _filtered_query(
        self,
        *,
        archived: bool,
        brand: str | None,
        location: str | None,
        is_available: bool | None,
        min_price: float | None,
        max_price: float | None,
    ) -> Query:
        query = self.session.query(CarModel).filter(CarModel.archived.is_(archived))
        if brand:
            query = query.filter(CarModel.brand.ilike(f"%{brand}%"))
        if location:
            query = query.filter(CarModel.location.ilike(f"%{location}%"))
        if is_available is not None:
            query = query.filter(CarModel.is_available.is_(is_available))
        if min_price is not None:
            query = query.filter(CarModel.price_per_day >= min_price)
        if max_price is not None:
            query = query.filter(CarModel.price_per_day <= max_price)
        return query

    @staticmethod
    def _apply_entity_to_model(model: CarModel, car: Car) -> None:
        model.brand = car.brand
        model.model = car.model
        model.year = car.year
        model.location = car.location
        model.price_per_day = car.price_per_day
        model.is_available = car.is_available
        model.description = car.description

    @staticmethod
    def _to_entity(model: CarModel) -> Car:
        return Car(
            id=model.id,
            brand=model.brand,
            model=model.model,
            year=model.year,
            location=model.location,
            price_per_day=model.price_per_day,
            is_available=model.is_available,
            archived=model.archived,
            description=model.description,
            owner_id=model.owner_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["CarRepository"]
