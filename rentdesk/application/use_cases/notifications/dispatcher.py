"""Notification Dispatcher: one persisted notification per audience role."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.orm import Session

from rentdesk.domain.entities import Audience, Notification, Role
from rentdesk.infrastructure.repositories import NotificationRepository
from rentdesk.utils import now_in_app_timezone


class NotificationDispatcher:
    """Materialize notifications for an audience.

    ``dispatch`` is not idempotent: identical calls create distinct records,
    so callers dispatch once per logical event.
    """

    def __init__(self, session: Session) -> None:
        self._repository = NotificationRepository(session)

    def dispatch(
        self,
        audience: Audience,
        message: str,
        links_by_role: Mapping[Role | str, str],
    ) -> list[Notification]:
        """Create one notification per role in ``audience`` and return them all.

        Every role in the audience needs an entry in ``links_by_role``; a
        missing link raises ``ValueError`` before anything is written.
        """

        roles = _unique_roles(audience.roles)
        links = {Role(role).value: link for role, link in links_by_role.items()}
        missing = [role.value for role in roles if role.value not in links]
        if missing:
            raise ValueError(f"Missing notification link for roles: {', '.join(missing)}")

        created_at = now_in_app_timezone()
        notifications = [
            Notification(
                id=None,
                recipient_role=role,
                message=message,
                link=links[role.value],
                audience_roles=list(roles),
                module=audience.module,
                links={role.value: links[role.value] for role in roles},
                created_at=created_at,
            )
            for role in roles
        ]
        if not notifications:
            return []
        return self._repository.create_many(notifications)


def _unique_roles(roles: tuple[Role | str, ...]) -> list[Role]:
    ordered: list[Role] = []
    for role in roles:
        candidate = Role(role)
        if candidate not in ordered:
            ordered.append(candidate)
    return ordered


__all__ = ["NotificationDispatcher"]
