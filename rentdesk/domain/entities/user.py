"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    first_name: str
    last_name: str
    email: str
    password: str
    is_active: bool
    created_at: datetime | None

    def has_role(self, role: Role | str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role == Role(role)

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(Role.ADMIN)

    def is_employee(self) -> bool:
        """Return ``True`` for the audited operational tier."""

        return self.has_role(Role.EMPLOYEE)


__all__ = ["User"]
