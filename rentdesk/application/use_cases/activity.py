"""Use cases for reading the employee activity log."""

from sqlalchemy.orm import Session

from rentdesk.domain.entities import ActivityLogEntry
from rentdesk.infrastructure.repositories import ActivityLogRepository


def list_activity_logs(
    session: Session, *, limit: int = 50, actor_id: int | None = None
) -> list[ActivityLogEntry]:
    """Return the most recent activity entries, optionally for one employee."""

    repository = ActivityLogRepository(session)
    return repository.list(limit=limit, actor_id=actor_id)


__all__ = ["list_activity_logs"]
