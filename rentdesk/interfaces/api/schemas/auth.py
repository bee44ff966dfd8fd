"""Schemas for authentication endpoints."""

from pydantic import BaseModel

from rentdesk.domain.entities import Role


class Token(BaseModel):
    access_token: str
    token_type: str
    role: Role


__all__ = ["Token"]
