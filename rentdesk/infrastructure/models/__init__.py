"""ORM models used by the application infrastructure."""

from .activity_log import ActivityLogModel
from .car import CarModel
from .content import ContentModel
from .notification import NotificationModel
from .promotion import PromotionModel
from .user import UserModel

__all__ = [
    "ActivityLogModel",
    "CarModel",
    "ContentModel",
    "NotificationModel",
    "PromotionModel",
    "UserModel",
]
