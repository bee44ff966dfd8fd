"""Persistence layer for activity log records."""

from __future__ import annotations

from typing import Iterable

from sqlalchemy.orm import Session

from rentdesk.domain.entities import ActivityAction, ActivityLogEntry
from rentdesk.infrastructure.models import ActivityLogModel
from rentdesk.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class ActivityLogRepository:
    """Append and read :class:`ActivityLogEntry` records.

    Entries are never updated or deleted.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        model = ActivityLogModel(
            actor_id=entry.actor_id,
            action_type=entry.action_type.value,
            description=entry.description,
            link=entry.link,
            created_at=(
                ensure_app_naive_datetime(entry.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(
        self, *, limit: int | None = 50, actor_id: int | None = None
    ) -> list[ActivityLogEntry]:
        """Return the most recent entries first."""

        query = self.session.query(ActivityLogModel)
        if actor_id is not None:
            query = query.filter(ActivityLogModel.actor_id == actor_id)
        query = query.order_by(
            ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)

        models: Iterable[ActivityLogModel] = query.all()
        return [self._to_entity(model) for model in models]

    def count(self) -> int:
        return self.session.query(ActivityLogModel).count()

    @staticmethod
    def _to_entity(model: ActivityLogModel) -> ActivityLogEntry:
        return ActivityLogEntry(
            id=model.id,
            actor_id=model.actor_id,
            action_type=ActivityAction(model.action_type),
            description=model.description,
            link=model.link,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ActivityLogRepository"]
