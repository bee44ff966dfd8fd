"""Side effects that follow every mutating back-office action.

Each helper runs after the primary write has committed. Activity and
notification persistence failures are logged and rolled back; they never
turn a successful mutation into an error. Realtime delivery is best-effort.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from sqlalchemy.orm import Session

from rentdesk.domain.entities import (
    ActivityAction,
    ActivityLogEntry,
    Audience,
    Car,
    Notification,
    Promotion,
    Role,
    User,
)
from rentdesk.infrastructure.notifications import (
    ACTIVITY_LOG_EVENT,
    NEW_CAR_EVENT,
    NOTIFICATION_EVENT,
    Broadcaster,
    new_car_announcement,
    serialize_activity_log,
    serialize_notification,
)

from .activity import ActivityRecorder
from .dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)

CARS_ADMIN_LINK = "/owner/manage-cars"
CARS_EMPLOYEE_LINK = "/employee/manage-cars"
CONTENT_ADMIN_LINK = "/owner/content-management"
PROMOTIONS_LINK = "/owner/manage-promotions"

_CAR_ACTION_VERBS: dict[ActivityAction, str] = {
    ActivityAction.CREATE_CAR: "added a new car",
    ActivityAction.UPDATE_CAR: "updated the car",
    ActivityAction.ARCHIVE_CAR: "archived the car",
    ActivityAction.UNARCHIVE_CAR: "restored the car",
}


class OperationalNotifier:
    """Coordinate the activity log, persisted notifications and realtime fan-out."""

    def __init__(
        self,
        session: Session,
        broadcaster: Broadcaster,
        *,
        recorder: ActivityRecorder | None = None,
        dispatcher: NotificationDispatcher | None = None,
    ) -> None:
        self._session = session
        self._broadcaster = broadcaster
        self._recorder = recorder or ActivityRecorder(session)
        self._dispatcher = dispatcher or NotificationDispatcher(session)

    def announce_new_car(self, car: Car) -> None:
        """Tell connected customers a car was listed, whoever listed it."""

        self._broadcaster.broadcast(
            [Role.CUSTOMER], event=NEW_CAR_EVENT, payload=new_car_announcement(car)
        )

    def car_changed(self, *, actor: User, car: Car, action: ActivityAction) -> None:
        """Audit and notify an employee's car mutation. Admin actions are skipped."""

        if not actor.is_employee():
            return

        verb = _CAR_ACTION_VERBS[action]
        entry = self._record(
            actor, action, f"Car: {car.brand} {car.model}", CARS_ADMIN_LINK
        )
        if entry is not None:
            self._broadcast_activity(entry)

        notifications = self._dispatch(
            Audience(roles=(Role.ADMIN, Role.EMPLOYEE), module="cars"),
            f"Employee {actor.first_name} {verb}: {car.brand} {car.model}",
            {Role.ADMIN: CARS_ADMIN_LINK, Role.EMPLOYEE: CARS_EMPLOYEE_LINK},
        )
        self._broadcast_notifications(notifications)

    def content_updated(self, *, actor: User, content_type: str) -> None:
        """Audit an employee's content edit and notify administrators only."""

        if not actor.is_employee():
            return

        entry = self._record(
            actor,
            ActivityAction.UPDATE_CONTENT,
            f"Content: {content_type}",
            CONTENT_ADMIN_LINK,
        )
        if entry is not None:
            self._broadcast_activity(entry)

        notifications = self._dispatch(
            Audience(roles=(Role.ADMIN,), module="content"),
            f"Employee {actor.first_name} updated the '{content_type}' content.",
            {Role.ADMIN: CONTENT_ADMIN_LINK},
        )
        self._broadcast_notifications(notifications)

    def promotion_created(self, promotion: Promotion) -> None:
        """Notify admins and employees of a new promotion, regardless of actor."""

        message = f"A new promotion has been created: {promotion.title}"
        targets = (Role.ADMIN, Role.EMPLOYEE)
        self._dispatch(
            Audience(roles=targets),
            message,
            {role: PROMOTIONS_LINK for role in targets},
        )
        # One combined event for both rooms instead of one per stored record.
        self._broadcaster.broadcast(
            targets,
            event=NOTIFICATION_EVENT,
            payload={"message": message, "link": PROMOTIONS_LINK},
        )

    def _record(
        self, actor: User, action: ActivityAction, description: str, link: str
    ) -> ActivityLogEntry | None:
        try:
            return self._recorder.record(actor.id, action, description, link)
        except Exception:
            self._session.rollback()
            logger.warning(
                "Could not record %s activity for user %s", action.value, actor.id,
                exc_info=True,
            )
            return None

    def _dispatch(
        self,
        audience: Audience,
        message: str,
        links_by_role: Mapping[Role, str],
    ) -> Sequence[Notification]:
        try:
            return self._dispatcher.dispatch(audience, message, links_by_role)
        except Exception:
            self._session.rollback()
            logger.warning(
                "Could not create notifications for roles %s",
                ", ".join(Role(role).value for role in audience.roles),
                exc_info=True,
            )
            return []

    def _broadcast_activity(self, entry: ActivityLogEntry) -> None:
        self._broadcaster.broadcast(
            [Role.ADMIN], event=ACTIVITY_LOG_EVENT, payload=serialize_activity_log(entry)
        )

    def _broadcast_notifications(self, notifications: Sequence[Notification]) -> None:
        for notification in notifications:
            self._broadcaster.broadcast(
                [notification.recipient_role],
                event=NOTIFICATION_EVENT,
                payload=serialize_notification(notification),
            )


__all__ = [
    "CARS_ADMIN_LINK",
    "CARS_EMPLOYEE_LINK",
    "CONTENT_ADMIN_LINK",
    "OperationalNotifier",
    "PROMOTIONS_LINK",
]
