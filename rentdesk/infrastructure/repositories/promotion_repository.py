"""Persistence layer for promotions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from rentdesk.domain.entities import DiscountType, Promotion, PromotionScope
from rentdesk.infrastructure.models import PromotionModel
from rentdesk.utils import ensure_app_naive_datetime, ensure_app_timezone


class PromotionRepository:
    """Provide CRUD operations and effectiveness lookups for promotions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_effective(self, at: datetime) -> Sequence[Promotion]:
        """Return promotions switched on whose date window contains ``at``."""

        moment = ensure_app_naive_datetime(at)
        query = (
            self.session.query(PromotionModel)
            .filter(PromotionModel.is_active.is_(True))
            .filter(PromotionModel.start_date <= moment)
            .filter(PromotionModel.end_date >= moment)
            .order_by(PromotionModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_all(self) -> Sequence[Promotion]:
        query = self.session.query(PromotionModel).order_by(
            PromotionModel.created_at.desc(), PromotionModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, promotion_id: int) -> Promotion | None:
        model = self.session.get(PromotionModel, promotion_id)
        return self._to_entity(model) if model else None

    def create(self, promotion: Promotion) -> Promotion:
        model = PromotionModel()
        self._apply_entity_to_model(model, promotion)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, promotion: Promotion) -> Promotion | None:
        if promotion.id is None:
            raise ValueError("Promotion id is required for updates")
        model = self.session.get(PromotionModel, promotion.id)
        if model is None:
            return None
        self._apply_entity_to_model(model, promotion)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, promotion_id: int) -> bool:
        """Delete a promotion, returning ``False`` when it did not exist."""

        model = self.session.get(PromotionModel, promotion_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: PromotionModel, promotion: Promotion) -> None:
        model.title = promotion.title
        model.description = promotion.description
        model.discount_type = promotion.discount_type.value
        model.discount_value = promotion.discount_value
        model.applicable_to = promotion.applicable_to.value
        model.item_ids = [int(item_id) for item_id in promotion.item_ids]
        model.start_date = ensure_app_naive_datetime(promotion.start_date)
        model.end_date = ensure_app_naive_datetime(promotion.end_date)
        model.is_active = promotion.is_active

    @staticmethod
    def _to_entity(model: PromotionModel) -> Promotion:
        return Promotion(
            id=model.id,
            title=model.title,
            description=model.description,
            discount_type=DiscountType(model.discount_type),
            discount_value=model.discount_value,
            applicable_to=PromotionScope(model.applicable_to),
            item_ids=[int(item_id) for item_id in model.item_ids or []],
            start_date=ensure_app_timezone(model.start_date),
            end_date=ensure_app_timezone(model.end_date),
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["PromotionRepository"]
