"""Closed set of roles known to the back office."""

from enum import Enum


class Role(str, Enum):
    """Recipient and actor roles.

    The value doubles as the name of the realtime room for that role.
    """

    ADMIN = "admin"
    EMPLOYEE = "employee"
    CUSTOMER = "customer"


__all__ = ["Role"]
