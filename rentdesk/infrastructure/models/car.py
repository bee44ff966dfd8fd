"""SQLAlchemy model for rental cars."""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from rentdesk.infrastructure.database import Base
from rentdesk.utils import now_in_app_naive_datetime


class CarModel(Base):
    """Database representation of a car in the rental fleet."""

    __tablename__ = "car"

    id = Column(Integer, primary_key=True, index=True)
    brand = Column(String(60), nullable=False, index=True)
    model = Column(String(60), nullable=False)
    year = Column(Integer, nullable=True)
    location = Column(String(120), nullable=False, default="")
    price_per_day = Column(Float, nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    archived = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    description = Column(Text, nullable=True)
    owner_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["CarModel"]
