"""Aggregate application use cases."""

from .errors import EntityNotFoundError
from .users import authenticate_user, create_user

__all__ = [
    "EntityNotFoundError",
    "authenticate_user",
    "create_user",
]
