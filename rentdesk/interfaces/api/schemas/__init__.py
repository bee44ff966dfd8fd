from .activity_log import ActivityLogRead
from .auth import Token
from .car import (
    CarCreate,
    CarPageRead,
    CarRead,
    CarUpdate,
    Pagination,
    PricedCarRead,
)
from .content import ContentRead, ContentUpdate
from .notification import NotificationMarkReadRequest, NotificationRead
from .promotion import PromotionCreate, PromotionRead, PromotionUpdate

__all__ = [
    "ActivityLogRead",
    "CarCreate",
    "CarPageRead",
    "CarRead",
    "CarUpdate",
    "ContentRead",
    "ContentUpdate",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "Pagination",
    "PricedCarRead",
    "PromotionCreate",
    "PromotionRead",
    "PromotionUpdate",
    "Token",
]
