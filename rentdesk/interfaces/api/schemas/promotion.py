"""Pydantic models describing promotion payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rentdesk.domain.entities import DiscountType, PromotionScope


class PromotionCreate(BaseModel):
    """Payload used to create a promotion.

    ``discount_value`` accepts raw form input; non-numeric values become 0.
    """

    title: str = Field(..., min_length=1, max_length=160)
    description: str | None = None
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float | str | None = 0
    applicable_to: PromotionScope = PromotionScope.ALL
    item_ids: list[int] = Field(default_factory=list)
    start_date: datetime
    end_date: datetime
    is_active: bool = True


class PromotionUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=160)
    description: str | None = None
    discount_type: DiscountType | None = None
    discount_value: float | str | None = None
    applicable_to: PromotionScope | None = None
    item_ids: list[int] | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class PromotionRead(BaseModel):
    id: int
    title: str
    description: str | None
    discount_type: DiscountType
    discount_value: float
    applicable_to: PromotionScope
    item_ids: list[int]
    start_date: datetime
    end_date: datetime
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["PromotionCreate", "PromotionRead", "PromotionUpdate"]
