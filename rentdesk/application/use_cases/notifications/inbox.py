"""Use cases for reading notifications addressed to a role."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from rentdesk.domain.entities import Notification, Role
from rentdesk.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    role: Role,
    module: str | None = None,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Notification]:
    """Return the newest notifications for ``role``, optionally by module."""

    repository = NotificationRepository(session)
    if unread_only:
        return repository.list_unread_for_role(role, module=module, limit=limit)
    return repository.list_for_role(role, module=module, limit=limit)


def mark_notifications_read(
    session: Session, notification_ids: Iterable[int], *, role: Role
) -> None:
    """Mark the given notifications read; ids addressed to other roles are ignored."""

    NotificationRepository(session).mark_as_read(notification_ids, role=role)


__all__ = ["list_notifications", "mark_notifications_read"]
