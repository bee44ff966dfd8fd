"""Promotion Catalog lookups."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from rentdesk.domain.entities import Promotion
from rentdesk.infrastructure.repositories import PromotionRepository
from rentdesk.utils import now_in_app_timezone


def active_promotions(
    session: Session, *, now: datetime | None = None
) -> Sequence[Promotion]:
    """Return promotions effective at ``now`` (defaults to the current time).

    Always read from the store; promotions may change between requests.
    """

    moment = now or now_in_app_timezone()
    return PromotionRepository(session).list_effective(moment)


def list_all_promotions(session: Session) -> Sequence[Promotion]:
    """Return every promotion, newest first, whether effective or not."""

    return PromotionRepository(session).list_all()


__all__ = ["active_promotions", "list_all_promotions"]
