"""Rendering helpers for prompts and order summaries."""

from __future__ import annotations

from rich.text import Text

from takeaway.constant import COOKING_LEVEL_DESCRIPTIONS
from takeaway.models import MainDish, Order


def badge_style(dish: str) -> str:
    """Return a consistent badge style for dish tags."""
    if dish == MainDish.HAMBURGER:
        return "bold #ffffff on #b23a48"
    if dish == MainDish.PIZZA:
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #2f6db5"


def format_option_rows(options: list[str], cursor_index: int) -> Text:
    """Render selectable options with a pointer on the highlighted row."""
    text = Text(style="white")
    for idx, option in enumerate(options):
        if idx > 0:
            text.append("\n")
        pointer = "➤ " if idx == cursor_index else "  "
        style = "bold white" if idx == cursor_index else "white"
        text.append(f"{pointer}{option}", style=style)
    return text


def format_cooking_level_option(level: str) -> str:
    description = COOKING_LEVEL_DESCRIPTIONS.get(level)
    if description is None:
        return level
    return f"{level} ({description})"


def format_order_summary(order: Order) -> Text:
    """Render an order as a short multi-line summary."""
    text = Text()
    if order.main_dish:
        text.append(f" {order.main_dish} ", style=badge_style(order.main_dish))
    else:
        text.append("(no main dish)", style="dim")

    if order.toppings:
        text.append("\n  Toppings: ")
        text.append(", ".join(order.toppings))

    for key, value in order.extras.items():
        text.append(f"\n  {key}: ")
        text.append(value)
    return text
