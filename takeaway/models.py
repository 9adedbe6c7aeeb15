"""Domain models for takeaway orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from takeaway.constant import COOKING_LEVEL_DESCRIPTIONS, COOKING_LEVEL_KEY
from takeaway.errors import OrderDecodeError


class MainDish(str, Enum):
    """Dishes the menu offers."""

    HAMBURGER = "Hamburger"
    PIZZA = "Pizza"


class CookingLevel(str, Enum):
    """Hamburger cooking levels, stored by code."""

    MR = "MR"
    M = "M"
    MW = "MW"
    WD = "WD"

    @property
    def description(self) -> str:
        return COOKING_LEVEL_DESCRIPTIONS[self.value]


def _text(value: Any, name: str) -> str:
    """Null becomes the empty string; anything but a string is rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise OrderDecodeError(f"{name} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Order:
    """A single order; empty fields mean "not chosen yet"."""

    main_dish: str = ""
    toppings: list[str] = field(default_factory=list)
    extras: dict[str, str] = field(default_factory=dict)

    @property
    def dish(self) -> MainDish | None:
        """The main dish as a menu enum, or None when unset or unknown."""
        try:
            return MainDish(self.main_dish)
        except ValueError:
            return None

    @property
    def cooking_level(self) -> str:
        return self.extras.get(COOKING_LEVEL_KEY, "")

    @cooking_level.setter
    def cooking_level(self, level: str) -> None:
        self.extras[COOKING_LEVEL_KEY] = str(getattr(level, "value", level))

    def to_dict(self) -> dict[str, Any]:
        """Serializable mapping with zero-value fields left out."""
        data: dict[str, Any] = {}
        if self.main_dish:
            data["main_dish"] = getattr(self.main_dish, "value", self.main_dish)
        if self.toppings:
            data["toppings"] = list(self.toppings)
        if self.extras:
            data["extras"] = dict(self.extras)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Order:
        """
        Build an order from a decoded mapping.

        Unknown keys are ignored and every field is optional. Values are not
        checked against the menu, only against the expected shape.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise OrderDecodeError(f"expected a mapping at top level, got {type(data).__name__}")

        main_dish = _text(data.get("main_dish"), "main_dish")

        toppings = data.get("toppings")
        if toppings is None:
            toppings = []
        elif not isinstance(toppings, list):
            raise OrderDecodeError("toppings must be a list")

        extras = data.get("extras")
        if extras is None:
            extras = {}
        elif not isinstance(extras, dict):
            raise OrderDecodeError("extras must be a mapping")

        return cls(
            main_dish=main_dish,
            toppings=[_text(topping, "toppings") for topping in toppings],
            extras={_text(key, "extras"): _text(value, f"extras.{key}") for key, value in extras.items()},
        )


@dataclass(frozen=True)
class SavedOrder:
    """An order together with the file it was written to."""

    order: Order
    path: Path
