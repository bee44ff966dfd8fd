"""Domain entities exposed by the application."""

from .activity_log import ActivityAction, ActivityLogEntry
from .car import Car
from .content import CONTENT_TYPES, Content
from .notification import Audience, Notification
from .promotion import (
    DiscountType,
    EffectivePrice,
    Promotion,
    PromotionScope,
    coerce_discount_value,
)
from .role import Role
from .user import User

__all__ = [
    "ActivityAction",
    "ActivityLogEntry",
    "Audience",
    "CONTENT_TYPES",
    "Car",
    "Content",
    "DiscountType",
    "EffectivePrice",
    "Notification",
    "Promotion",
    "PromotionScope",
    "Role",
    "User",
    "coerce_discount_value",
]
