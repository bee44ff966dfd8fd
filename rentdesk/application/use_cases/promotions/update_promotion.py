"""Use case for updating promotions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.domain.entities import (
    DiscountType,
    Promotion,
    PromotionScope,
    coerce_discount_value,
)
from rentdesk.infrastructure.repositories import PromotionRepository
from rentdesk.utils import ensure_app_timezone

from .validators import ensure_valid_window

_MISSING = object()


def update_promotion(
    session: Session,
    promotion_id: int,
    *,
    title: str | None = None,
    description: str | None = None,
    discount_type: DiscountType | str | None = None,
    discount_value: Any = _MISSING,
    applicable_to: PromotionScope | str | None = None,
    item_ids: Iterable[int] | None = None,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    is_active: bool | None = None,
) -> Promotion:
    """Apply the provided fields to a promotion.

    Updates are plain persistence: unlike creation, nobody is notified.
    """

    repository = PromotionRepository(session)
    current = repository.get(promotion_id)
    if current is None:
        raise EntityNotFoundError("Promotion not found")

    changes: dict[str, Any] = {}
    if title is not None:
        if not title.strip():
            raise ValueError("Promotion title is required")
        changes["title"] = title.strip()
    if description is not None:
        changes["description"] = description
    if discount_type is not None:
        changes["discount_type"] = DiscountType(discount_type)
    if discount_value is not _MISSING:
        changes["discount_value"] = coerce_discount_value(discount_value)
    if applicable_to is not None:
        changes["applicable_to"] = PromotionScope(applicable_to)
    if item_ids is not None:
        changes["item_ids"] = list(dict.fromkeys(int(item_id) for item_id in item_ids))
    if start_date is not None:
        changes["start_date"] = ensure_app_timezone(start_date)
    if end_date is not None:
        changes["end_date"] = ensure_app_timezone(end_date)
    if is_active is not None:
        changes["is_active"] = is_active

    updated = replace(current, **changes)
    ensure_valid_window(updated.start_date, updated.end_date)

    saved = repository.update(updated)
    if saved is None:
        raise EntityNotFoundError("Promotion not found")
    return saved


__all__ = ["update_promotion"]
