"""Static menu data."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from takeaway.constant import DISH_NAMES, TOPPINGS_BY_DISH as _TOPPINGS_BY_DISH_RAW
from takeaway.models import CookingLevel, MainDish

MENU_DISHES: tuple[MainDish, ...] = tuple(MainDish(name) for name in DISH_NAMES)

TOPPINGS_BY_DISH: Mapping[MainDish, tuple[str, ...]] = MappingProxyType(
    {MainDish(dish): tuple(toppings) for dish, toppings in _TOPPINGS_BY_DISH_RAW.items()}
)

COOKING_LEVELS: tuple[CookingLevel, ...] = tuple(CookingLevel)


def toppings_for_dish(dish: str) -> list[str] | None:
    """Return a fresh list of toppings for a dish, or None when the menu has none."""
    try:
        menu_dish = MainDish(dish)
    except ValueError:
        return None
    toppings = TOPPINGS_BY_DISH.get(menu_dish)
    if toppings is None:
        return None
    return list(toppings)
