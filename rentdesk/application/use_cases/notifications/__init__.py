"""Public helpers for recording activity and emitting notifications."""

from .activity import ActivityRecorder
from .dispatcher import NotificationDispatcher
from .events import (
    CARS_ADMIN_LINK,
    CARS_EMPLOYEE_LINK,
    CONTENT_ADMIN_LINK,
    PROMOTIONS_LINK,
    OperationalNotifier,
)
from .inbox import list_notifications, mark_notifications_read

__all__ = [
    "ActivityRecorder",
    "CARS_ADMIN_LINK",
    "CARS_EMPLOYEE_LINK",
    "CONTENT_ADMIN_LINK",
    "NotificationDispatcher",
    "OperationalNotifier",
    "PROMOTIONS_LINK",
    "list_notifications",
    "mark_notifications_read",
]
