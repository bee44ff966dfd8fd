"""Domain entities for role-scoped notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .role import Role


@dataclass(frozen=True)
class Audience:
    """Roles a notification is created for, plus an optional module tag.

    The module does not change how many records are created; recipients use
    it to filter (for example content editors only seeing ``content``).
    """

    roles: tuple[Role, ...]
    module: str | None = None


@dataclass
class Notification:
    """Message delivered to every user holding ``recipient_role``."""

    id: int | None
    recipient_role: Role
    message: str
    link: str
    audience_roles: list[Role] = field(default_factory=list)
    module: str | None = None
    links: dict[str, str] = field(default_factory=dict)
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


__all__ = ["Audience", "Notification"]
