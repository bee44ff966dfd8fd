"""Domain entity for editable static content blocks."""

from dataclasses import dataclass
from datetime import datetime

CONTENT_TYPES: tuple[str, ...] = (
    "mission",
    "vision",
    "about",
    "terms",
    "privacy",
    "contact",
    "bookingTerms",
    "paymentQR",
)


@dataclass
class Content:
    """A titled text block identified by its ``type``."""

    id: int | None
    type: str
    title: str
    content: str
    created_at: datetime | None
    updated_at: datetime | None


__all__ = ["CONTENT_TYPES", "Content"]
