"""Errors raised by use cases and mapped to HTTP responses by the API layer."""

from __future__ import annotations


class EntityNotFoundError(ValueError):
    """Raised when a referenced car, promotion or content block is missing."""
