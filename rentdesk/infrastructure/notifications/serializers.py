"""JSON payloads pushed through the realtime channel."""

from __future__ import annotations

from typing import Any

from rentdesk.domain.entities import ActivityLogEntry, Car, Notification


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "recipient_role": notification.recipient_role.value,
        "audience_roles": [role.value for role in notification.audience_roles],
        "module": notification.module,
        "message": notification.message,
        "link": notification.link,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
        "read_at": notification.read_at.isoformat() if notification.read_at else None,
    }


def serialize_activity_log(entry: ActivityLogEntry) -> dict[str, Any]:
    """Return the websocket payload representation for ``entry``."""

    return {
        "id": entry.id,
        "actor_id": entry.actor_id,
        "action_type": entry.action_type.value,
        "description": entry.description,
        "link": entry.link,
        "created_at": entry.created_at.isoformat() if entry.created_at else None,
    }


def new_car_announcement(car: Car) -> dict[str, Any]:
    """Return the customer-facing announcement for a freshly listed car."""

    return {
        "message": f"New car available: {car.brand} {car.model}",
        "link": f"/cars/{car.id}",
    }


__all__ = ["new_car_announcement", "serialize_activity_log", "serialize_notification"]
