"""Pydantic models describing car payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CarBase(BaseModel):
    brand: str = Field(..., min_length=1, max_length=60)
    model: str = Field(..., min_length=1, max_length=60)
    year: int | None = Field(default=None, ge=1900, le=2100)
    location: str = Field(default="", max_length=120)
    price_per_day: float = Field(..., ge=0, allow_inf_nan=False)
    is_available: bool = True
    description: str | None = None


class CarCreate(CarBase):
    """Payload used to list a new car."""


class CarUpdate(BaseModel):
    """Partial update of a car; archiving goes through its own endpoints."""

    brand: str | None = Field(default=None, min_length=1, max_length=60)
    model: str | None = Field(default=None, min_length=1, max_length=60)
    year: int | None = Field(default=None, ge=1900, le=2100)
    location: str | None = Field(default=None, max_length=120)
    price_per_day: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    is_available: bool | None = None
    description: str | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("brand", "model", "location", "price_per_day", "is_available")
    @classmethod
    def _reject_null(cls, value, info):
        # Omit a field to keep it; only year and description can be cleared.
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class CarRead(BaseModel):
    """Stored representation of a car, base price only."""

    id: int
    brand: str
    model: str
    year: int | None
    location: str
    price_per_day: float
    is_available: bool
    archived: bool
    description: str | None
    owner_id: int | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class PricedCarRead(CarRead):
    """Car as listed to renters: ``price_per_day`` already includes the best promotion."""

    original_price: float
    applied_promotion_id: int | None = None


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class CarPageRead(BaseModel):
    data: list[PricedCarRead]
    pagination: Pagination


__all__ = [
    "CarCreate",
    "CarPageRead",
    "CarRead",
    "CarUpdate",
    "Pagination",
    "PricedCarRead",
]
