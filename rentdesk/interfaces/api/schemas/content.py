"""Pydantic models describing static content payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ContentUpdate(BaseModel):
    title: str = Field(..., min_length=1, max_length=160)
    content: str = ""


class ContentRead(BaseModel):
    id: int
    type: str
    title: str
    content: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ContentRead", "ContentUpdate"]
