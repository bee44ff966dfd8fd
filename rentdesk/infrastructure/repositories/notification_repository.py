"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from rentdesk.domain.entities import Notification, Role
from rentdesk.infrastructure.models import NotificationModel
from rentdesk.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide persistence operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_role(
        self,
        role: Role,
        *,
        module: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.recipient_role == role.value
        )
        if module is not None:
            query = query.filter(NotificationModel.module == module)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_unread_for_role(
        self,
        role: Role,
        *,
        module: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_role == role.value)
            .filter(NotificationModel.read_at.is_(None))
        )
        if module is not None:
            query = query.filter(NotificationModel.module == module)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create_many(self, notifications: Sequence[Notification]) -> list[Notification]:
        """Persist ``notifications`` in a single commit and return the stored copies."""

        models = []
        for notification in notifications:
            model = NotificationModel()
            self._apply_entity_to_model(model, notification)
            models.append(model)
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def count(self) -> int:
        return self.session.query(NotificationModel).count()

    def mark_as_read(self, notification_ids: Iterable[int], *, role: Role) -> None:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return
        self.session.query(NotificationModel).filter(
            NotificationModel.id.in_(ids),
            NotificationModel.recipient_role == role.value,
        ).update(
            {
                NotificationModel.read_at: ensure_app_naive_datetime(
                    now_in_app_timezone()
                )
            },
            synchronize_session=False,
        )
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.recipient_role = notification.recipient_role.value
        model.audience_roles = [role.value for role in notification.audience_roles]
        model.module = notification.module
        model.message = notification.message
        model.link = notification.link
        model.links = dict(notification.links)
        model.read_at = ensure_app_naive_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_role=Role(model.recipient_role),
            audience_roles=[Role(role) for role in model.audience_roles or []],
            module=model.module,
            message=model.message,
            link=model.link,
            links=dict(model.links or {}),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
