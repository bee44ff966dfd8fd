"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from rentdesk.infrastructure.database import Base
from rentdesk.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for role-scoped notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    recipient_role = Column(String(20), nullable=False, index=True)
    audience_roles = Column(JSON, nullable=False, default=list)
    module = Column(String(50), nullable=True, index=True)
    message = Column(Text, nullable=False)
    link = Column(String(255), nullable=False)
    links = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
