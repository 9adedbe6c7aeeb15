"""Editable static menu and prompt configuration."""

from __future__ import annotations

DISH_NAMES: list[str] = ["Hamburger", "Pizza"]

TOPPINGS_BY_DISH: dict[str, list[str]] = {
    "Hamburger": ["Cheder", "Onion"],
    "Pizza": ["Tuna", "Olives"],
}

COOKING_LEVEL_KEY = "cookingLevel"

COOKING_LEVEL_DESCRIPTIONS: dict[str, str] = {
    "MR": "Medium rare",
    "M": "Medium",
    "MW": "Medium well",
    "WD": "Well done",
}

DONE_OPTION = "Done"

IMPORT_CHOICE = "Continue an existing order"
NEW_ORDER_CHOICE = "Create a new order"

IMPORT_DECISION_LABEL = "Please select whether to continue an existing order or create a new one"
IMPORT_PATH_LABEL = "Please enter the filename of an existing order"
MAIN_DISH_LABEL = "Please select a main dish"
TOPPINGS_LABEL = "Please enter a topping from the following list, or select done to continue"
COOKING_LEVEL_LABEL = "Please select a cooking level for the hamburger"
