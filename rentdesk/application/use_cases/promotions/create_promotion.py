"""Use case for creating promotions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import (
    DiscountType,
    Promotion,
    PromotionScope,
    coerce_discount_value,
)
from rentdesk.infrastructure.repositories import PromotionRepository
from rentdesk.utils import ensure_app_timezone

from .validators import ensure_valid_window


def create_promotion(
    session: Session,
    notifier: OperationalNotifier,
    *,
    title: str,
    discount_type: DiscountType | str,
    discount_value: Any,
    start_date: datetime,
    end_date: datetime,
    description: str | None = None,
    applicable_to: PromotionScope | str = PromotionScope.ALL,
    item_ids: Iterable[int] = (),
    is_active: bool = True,
) -> Promotion:
    """Persist a new promotion and announce it to admins and employees."""

    title = title.strip()
    if not title:
        raise ValueError("Promotion title is required")
    start = ensure_app_timezone(start_date)
    end = ensure_app_timezone(end_date)
    ensure_valid_window(start, end)

    entity = Promotion(
        id=None,
        title=title,
        description=description,
        discount_type=DiscountType(discount_type),
        discount_value=coerce_discount_value(discount_value),
        applicable_to=PromotionScope(applicable_to),
        item_ids=list(dict.fromkeys(int(item_id) for item_id in item_ids)),
        start_date=start,
        end_date=end,
        is_active=is_active,
    )
    saved = PromotionRepository(session).create(entity)
    notifier.promotion_created(saved)
    return saved


__all__ = ["create_promotion"]
