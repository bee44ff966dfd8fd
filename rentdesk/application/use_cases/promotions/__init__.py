"""Use cases for the promotion catalog and price resolution."""

from .create_promotion import create_promotion
from .delete_promotion import delete_promotion
from .list_promotions import active_promotions, list_all_promotions
from .pricing import resolve_price
from .update_promotion import update_promotion

__all__ = [
    "active_promotions",
    "create_promotion",
    "delete_promotion",
    "list_all_promotions",
    "resolve_price",
    "update_promotion",
]
