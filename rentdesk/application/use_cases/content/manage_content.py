"""Use cases for the editable static content blocks."""

from __future__ import annotations

import re

from sqlalchemy.orm import Session

from rentdesk.application.use_cases.errors import EntityNotFoundError
from rentdesk.application.use_cases.notifications import OperationalNotifier
from rentdesk.domain.entities import CONTENT_TYPES, Content, User
from rentdesk.infrastructure.repositories import ContentRepository

_CAPITAL = re.compile(r"([A-Z])")


def default_title(content_type: str) -> str:
    """Derive a display title from a content type, e.g. ``bookingTerms`` -> ``Booking Terms``."""

    if not content_type:
        return ""
    return content_type[0].upper() + _CAPITAL.sub(r" \1", content_type[1:])


def _ensure_known_type(content_type: str) -> None:
    if content_type not in CONTENT_TYPES:
        raise EntityNotFoundError(f"Unknown content type '{content_type}'")


def list_content_types(session: Session) -> list[str]:
    """Return the content types that already have a stored block."""

    return ContentRepository(session).list_types()


def get_content(session: Session, content_type: str) -> Content:
    """Return the block for ``content_type``, creating an empty default on first read."""

    _ensure_known_type(content_type)
    return ContentRepository(session).get_or_create_default(
        content_type, default_title=default_title(content_type)
    )


def update_content(
    session: Session,
    notifier: OperationalNotifier,
    content_type: str,
    *,
    actor: User,
    title: str,
    content: str = "",
) -> Content:
    """Create or replace the block for ``content_type``."""

    _ensure_known_type(content_type)
    if not title or not title.strip():
        raise ValueError("Content title is required")

    saved = ContentRepository(session).upsert(
        content_type, title=title.strip(), content=content
    )
    notifier.content_updated(actor=actor, content_type=content_type)
    return saved


__all__ = ["default_title", "get_content", "list_content_types", "update_content"]
