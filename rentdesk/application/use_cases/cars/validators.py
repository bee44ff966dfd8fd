"""Validation helpers shared by car use cases."""

import math

from rentdesk.domain.entities import Car


def ensure_valid_car(car: Car) -> None:
    """Ensure required fields are present and the base price is a real number."""

    if not car.brand or not car.model:
        raise ValueError("Car brand and model are required")
    if car.location is None:
        raise ValueError("Car location must not be null")
    if not isinstance(car.is_available, bool):
        raise ValueError("Car availability must be true or false")
    if car.price_per_day is None or not math.isfinite(car.price_per_day):
        raise ValueError("Car price per day must be a number")
    if car.price_per_day < 0:
        raise ValueError("Car price per day must not be negative")
