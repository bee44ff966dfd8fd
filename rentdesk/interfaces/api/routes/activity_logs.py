"""Routes for inspecting the employee activity log."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from rentdesk.application.use_cases.activity import list_activity_logs as list_activity_logs_uc
from rentdesk.domain.entities import User
from rentdesk.infrastructure.database import get_db
from rentdesk.interfaces.api.dependencies import require_capability
from rentdesk.interfaces.api.schemas import ActivityLogRead

router = APIRouter(prefix="/activity-logs", tags=["activity_logs"])


@router.get("/", response_model=list[ActivityLogRead])
def list_activity_logs(
    limit: int = Query(50, ge=1, le=200, description="Maximum number of entries"),
    actor_id: int | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_capability("activity:read")),
) -> list[ActivityLogRead]:
    """Return the latest activity entries, newest first."""

    entries = list_activity_logs_uc(db, limit=limit, actor_id=actor_id)
    return [ActivityLogRead.model_validate(entry) for entry in entries]


__all__ = ["router"]
