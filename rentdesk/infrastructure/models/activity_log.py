"""SQLAlchemy model for the employee activity log."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from rentdesk.infrastructure.database import Base
from rentdesk.utils import now_in_app_naive_datetime


class ActivityLogModel(Base):
    """Database representation of an activity log entry."""

    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, index=True)
    actor_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    action_type = Column(String(50), nullable=False)
    description = Column(Text, nullable=False)
    link = Column(String(255), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ActivityLogModel"]
