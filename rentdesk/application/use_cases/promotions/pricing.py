"""Price Resolver: best single promotion for a car."""

from __future__ import annotations

from collections.abc import Iterable

from rentdesk.domain.entities import Car, EffectivePrice, Promotion


def resolve_price(car: Car, promotions: Iterable[Promotion]) -> EffectivePrice:
    """Return the lowest price any single applicable promotion gives ``car``.

    ``promotions`` is expected to hold effective promotions only. Discounts
    never stack. Each candidate is capped at ``car.price_per_day`` so the
    resolved price never exceeds it, but candidates are not floored at zero:
    a fixed discount larger than the price yields a negative price.
    Whenever at least one promotion applies, the first one reaching the
    lowest price is reported, even if it leaves the price unchanged.
    """

    original_price = car.price_per_day
    best_price = original_price
    applied_promotion_id: int | None = None
    matched = False

    for promotion in promotions:
        if not promotion.applies_to(car.id):
            continue
        candidate = min(promotion.discounted_price(original_price), original_price)
        if not matched or candidate < best_price:
            best_price = candidate
            applied_promotion_id = promotion.id
            matched = True

    return EffectivePrice(
        original_price=original_price,
        resolved_price=best_price,
        applied_promotion_id=applied_promotion_id,
    )


__all__ = ["resolve_price"]
