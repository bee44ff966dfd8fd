"""Domain entity representing an audit trail entry for employee actions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ActivityAction(str, Enum):
    """Kinds of employee actions captured in the activity log."""

    CREATE_CAR = "CREATE_CAR"
    UPDATE_CAR = "UPDATE_CAR"
    ARCHIVE_CAR = "ARCHIVE_CAR"
    UNARCHIVE_CAR = "UNARCHIVE_CAR"
    UPDATE_CONTENT = "UPDATE_CONTENT"


@dataclass
class ActivityLogEntry:
    """Append-only record of an action performed by an employee."""

    id: int | None
    actor_id: int
    action_type: ActivityAction
    description: str
    link: str
    created_at: datetime | None


__all__ = ["ActivityAction", "ActivityLogEntry"]
