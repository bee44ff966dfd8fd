"""Repository implementations for infrastructure layer."""

from .activity_log_repository import ActivityLogRepository
from .car_repository import CarRepository
from .content_repository import ContentRepository
from .notification_repository import NotificationRepository
from .promotion_repository import PromotionRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityLogRepository",
    "CarRepository",
    "ContentRepository",
    "NotificationRepository",
    "PromotionRepository",
    "UserRepository",
]
