"""SQLAlchemy model for static content blocks."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from rentdesk.infrastructure.database import Base
from rentdesk.utils import now_in_app_naive_datetime


class ContentModel(Base):
    """Database representation of an editable content block."""

    __tablename__ = "content"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(30), nullable=False, unique=True, index=True)
    title = Column(String(160), nullable=False)
    content = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["ContentModel"]
