"""Unit tests for promotion price resolution."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from rentdesk.application.use_cases.promotions import resolve_price
from rentdesk.domain.entities import (
    Car,
    DiscountType,
    Promotion,
    PromotionScope,
    coerce_discount_value,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def _car(car_id: int = 7, price: float = 1000.0) -> Car:
    return Car(
        id=car_id,
        brand="Toyota",
        model="Corolla",
        year=2022,
        location="Lima",
        price_per_day=price,
        is_available=True,
        archived=False,
        description=None,
        owner_id=None,
        created_at=None,
        updated_at=None,
    )


def _promotion(
    promotion_id: int,
    *,
    discount_type: DiscountType = DiscountType.PERCENTAGE,
    value: float = 10,
    scope: PromotionScope = PromotionScope.ALL,
    item_ids: list[int] | None = None,
) -> Promotion:
    return Promotion(
        id=promotion_id,
        title=f"Promo {promotion_id}",
        description=None,
        discount_type=discount_type,
        discount_value=value,
        applicable_to=scope,
        item_ids=item_ids or [],
        start_date=NOW - timedelta(days=1),
        end_date=NOW + timedelta(days=1),
        is_active=True,
    )


def test_lowest_candidate_wins_without_stacking():
    promotions = [
        _promotion(1, value=10),
        _promotion(2, discount_type=DiscountType.FIXED, value=50, scope=PromotionScope.CAR, item_ids=[7]),
    ]

    price = resolve_price(_car(), promotions)

    assert price.original_price == 1000
    assert price.resolved_price == pytest.approx(900)
    assert price.applied_promotion_id == 1


def test_car_scoped_promotion_ignores_other_cars():
    promotions = [
        _promotion(1, value=10),
        _promotion(2, discount_type=DiscountType.FIXED, value=50, scope=PromotionScope.CAR, item_ids=[7]),
    ]

    price = resolve_price(_car(car_id=8), promotions)

    assert price.resolved_price == pytest.approx(900)
    assert price.applied_promotion_id == 1


def test_no_applicable_promotion_keeps_original_price():
    promotions = [_promotion(1, scope=PromotionScope.CAR, item_ids=[99])]

    price = resolve_price(_car(), promotions)

    assert price.resolved_price == 1000
    assert price.applied_promotion_id is None


@pytest.mark.parametrize(
    ("discount_type", "value"), [(DiscountType.PERCENTAGE, 0), (DiscountType.FIXED, 0)]
)
def test_zero_discount_is_still_reported_as_applied(discount_type, value):
    promotions = [_promotion(7, discount_type=discount_type, value=value)]

    price = resolve_price(_car(), promotions)

    assert price.resolved_price == 1000
    assert price.applied_promotion_id == 7


def test_first_unchanged_price_is_replaced_by_a_real_discount():
    promotions = [_promotion(7, value=0), _promotion(8, value=5)]

    price = resolve_price(_car(), promotions)

    assert price.resolved_price == pytest.approx(950)
    assert price.applied_promotion_id == 8


def test_empty_promotion_list():
    price = resolve_price(_car(price=250), [])

    assert (price.original_price, price.resolved_price, price.applied_promotion_id) == (250, 250, None)


def test_fixed_discount_larger_than_price_goes_negative():
    promotions = [_promotion(3, discount_type=DiscountType.FIXED, value=1200)]

    price = resolve_price(_car(), promotions)

    assert price.resolved_price == pytest.approx(-200)
    assert price.applied_promotion_id == 3


def test_negative_discount_never_raises_the_price():
    promotions = [_promotion(4, discount_type=DiscountType.FIXED, value=-100)]

    price = resolve_price(_car(), promotions)

    assert price.resolved_price == 1000
    assert price.applied_promotion_id == 4


def test_tie_reports_first_promotion():
    promotions = [
        _promotion(5, discount_type=DiscountType.FIXED, value=100),
        _promotion(6, value=10),
    ]

    first = resolve_price(_car(), promotions)
    reversed_order = resolve_price(_car(), list(reversed(promotions)))

    assert first.resolved_price == reversed_order.resolved_price == pytest.approx(900)
    assert first.applied_promotion_id == 5
    assert reversed_order.applied_promotion_id == 6


def test_resolution_is_deterministic():
    promotions = [_promotion(1, value=15), _promotion(2, discount_type=DiscountType.FIXED, value=120)]

    assert resolve_price(_car(), promotions) == resolve_price(_car(), promotions)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", 0.0),
        ("   ", 0.0),
        ("abc", 0.0),
        ("NaN", 0.0),
        ("inf", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("12.5", 12.5),
        (20, 20.0),
    ],
)
def test_coerce_discount_value(raw, expected):
    assert coerce_discount_value(raw) == expected


def test_promotion_effectiveness_window():
    promotion = _promotion(1)

    assert promotion.is_effective(NOW)
    assert promotion.is_effective(promotion.start_date)
    assert promotion.is_effective(promotion.end_date)
    assert not promotion.is_effective(NOW + timedelta(days=2))
    promotion.is_active = False
    assert not promotion.is_effective(NOW)
