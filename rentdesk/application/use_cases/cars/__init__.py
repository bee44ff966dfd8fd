"""Use cases for managing the rental fleet."""

from .archive_car import archive_car, unarchive_car
from .create_car import create_car
from .list_cars import CarPage, PricedCar, get_car, list_cars
from .update_car import update_car

__all__ = [
    "CarPage",
    "PricedCar",
    "archive_car",
    "create_car",
    "get_car",
    "list_cars",
    "unarchive_car",
    "update_car",
]
