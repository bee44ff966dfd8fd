"""Schemas for activity log endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from rentdesk.domain.entities import ActivityAction


class ActivityLogRead(BaseModel):
    """Representation of an activity log entry returned by the API."""

    id: int
    actor_id: int
    action_type: ActivityAction
    description: str
    link: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityLogRead"]
