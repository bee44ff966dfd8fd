"""Realtime notification helpers for the infrastructure layer."""

from .manager import RoomConnectionManager
from .realtime import (
    ACTIVITY_LOG_EVENT,
    NEW_CAR_EVENT,
    NOTIFICATION_EVENT,
    Broadcaster,
    RealtimeBroadcaster,
)
from .serializers import (
    new_car_announcement,
    serialize_activity_log,
    serialize_notification,
)

__all__ = [
    "ACTIVITY_LOG_EVENT",
    "Broadcaster",
    "NEW_CAR_EVENT",
    "NOTIFICATION_EVENT",
    "RealtimeBroadcaster",
    "RoomConnectionManager",
    "new_car_announcement",
    "serialize_activity_log",
    "serialize_notification",
]
