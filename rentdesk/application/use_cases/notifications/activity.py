"""Activity Recorder: append-only audit trail for employee actions."""

from __future__ import annotations

from sqlalchemy.orm import Session

from rentdesk.domain.entities import ActivityAction, ActivityLogEntry
from rentdesk.infrastructure.repositories import ActivityLogRepository
from rentdesk.utils import now_in_app_timezone


class ActivityRecorder:
    """Append activity entries and hand back the stored record for broadcasting."""

    def __init__(self, session: Session) -> None:
        self._repository = ActivityLogRepository(session)

    def record(
        self,
        actor_id: int,
        action_type: ActivityAction,
        description: str,
        link: str,
    ) -> ActivityLogEntry:
        """Persist a new entry. Store failures are raised to the caller."""

        entry = ActivityLogEntry(
            id=None,
            actor_id=actor_id,
            action_type=ActivityAction(action_type),
            description=description,
            link=link,
            created_at=now_in_app_timezone(),
        )
        return self._repository.create(entry)


__all__ = ["ActivityRecorder"]
