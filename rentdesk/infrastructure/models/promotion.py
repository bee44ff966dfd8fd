"""SQLAlchemy model for promotions."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text

from rentdesk.infrastructure.database import Base
from rentdesk.utils import now_in_app_naive_datetime


class PromotionModel(Base):
    """Database representation of a discount rule."""

    __tablename__ = "promotion"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(160), nullable=False)
    description = Column(Text, nullable=True)
    discount_type = Column(String(20), nullable=False)
    discount_value = Column(Float, nullable=False, default=0)
    applicable_to = Column(String(20), nullable=False, default="all")
    item_ids = Column(JSON, nullable=False, default=list)
    start_date = Column(DateTime(), nullable=False)
    end_date = Column(DateTime(), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["PromotionModel"]
