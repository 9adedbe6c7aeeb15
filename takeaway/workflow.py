"""Order workflow: import, fill in missing fields, save."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from takeaway.chooser import Chooser
from takeaway.codec import decode_order, encode_order, format_for_path
from takeaway.config import ORDER_DIR, ORDER_FILE_PREFIX, ORDER_FILE_SUFFIX
from takeaway.constant import (
    COOKING_LEVEL_LABEL,
    DONE_OPTION,
    IMPORT_CHOICE,
    IMPORT_DECISION_LABEL,
    IMPORT_PATH_LABEL,
    MAIN_DISH_LABEL,
    NEW_ORDER_CHOICE,
    TOPPINGS_LABEL,
)
from takeaway.data import COOKING_LEVELS, MENU_DISHES, toppings_for_dish
from takeaway.errors import ChooserAborted, OrderFileError, WorkflowError
from takeaway.models import CookingLevel, MainDish, Order, SavedOrder
from takeaway.rendering import format_cooking_level_option

logger = logging.getLogger(__name__)


def ask_to_import(chooser: Chooser) -> bool:
    """Ask whether to continue an existing order."""
    try:
        _, answer = chooser.select_one(IMPORT_DECISION_LABEL, [IMPORT_CHOICE, NEW_ORDER_CHOICE])
    except ChooserAborted as exc:
        raise WorkflowError(f"failed to get response: {exc}") from exc

    if answer == IMPORT_CHOICE:
        return True
    if answer == NEW_ORDER_CHOICE:
        return False
    raise WorkflowError(f"failed to understand choice {answer!r}")


def validate_order_path(text: str) -> None:
    """Reject anything that is not an existing, readable regular file."""
    try:
        path = Path(text).expanduser().resolve()
    except (OSError, RuntimeError) as exc:
        raise ValueError(f"failed to get absolute path for file: {exc}") from exc

    if not path.exists():
        raise ValueError(f"no such file: {path}")
    if path.is_dir():
        raise ValueError("provided path is a dir, not a file")
    if not os.access(path, os.R_OK):
        raise ValueError(f"file is not readable: {path}")


def read_order_file(path: str | Path) -> Order:
    """Read and decode an order file, choosing the format from its extension."""
    try:
        with open(path, "rb") as fh:
            payload = fh.read()
    except OSError as exc:
        raise WorkflowError(f"failed to read file: {exc}") from exc

    try:
        order = decode_order(payload, format_for_path(path))
    except OrderFileError as exc:
        raise WorkflowError(f"failed to read file contents: {exc}") from exc

    logger.info("imported order from %s", path)
    return order


def import_order_from_file(chooser: Chooser) -> Order:
    try:
        path = chooser.prompt_text(IMPORT_PATH_LABEL, validate_order_path)
    except ChooserAborted as exc:
        raise WorkflowError(f"failed to get response: {exc}") from exc
    return read_order_file(Path(path).expanduser())


def select_main_dish(chooser: Chooser) -> MainDish:
    options = [dish.value for dish in MENU_DISHES]
    try:
        index, _ = chooser.select_one(MAIN_DISH_LABEL, options)
    except ChooserAborted as exc:
        raise WorkflowError(f"failed to get response: {exc}") from exc
    if not 0 <= index < len(MENU_DISHES):
        raise WorkflowError(f"failed to understand dish choice {index!r}")
    return MENU_DISHES[index]


def pick_toppings(chooser: Chooser, dish: str) -> list[str]:
    """
    Let the user pick toppings one at a time until they choose Done.

    A picked topping is removed from the offered list, so each topping can be
    chosen at most once and the result keeps the order of picking. Dishes
    without toppings on the menu return an empty list without prompting.
    """
    remaining = toppings_for_dish(dish)
    if remaining is None:
        return []

    selected: list[str] = []
    while True:
        index, topping = chooser.select_one(TOPPINGS_LABEL, remaining + [DONE_OPTION])
        if index == len(remaining):
            break
        del remaining[index]
        selected.append(topping)
    return selected


def pick_cooking_level(chooser: Chooser) -> CookingLevel:
    options = [format_cooking_level_option(level.value) for level in COOKING_LEVELS]
    try:
        index, _ = chooser.select_one(COOKING_LEVEL_LABEL, options)
    except ChooserAborted as exc:
        raise WorkflowError(f"failed to determine cooking level: {exc}") from exc
    if not 0 <= index < len(COOKING_LEVELS):
        raise WorkflowError(f"failed to understand cooking level choice {index!r}")
    return COOKING_LEVELS[index]


def save_order(order: Order, directory: str | Path | None = None) -> Path:
    """Write the order as YAML to a fresh temp file and return its absolute path."""
    try:
        payload = encode_order(order)
    except OrderFileError as exc:
        raise WorkflowError(f"failed to marshal to yml: {exc}") from exc

    try:
        fd, name = tempfile.mkstemp(prefix=ORDER_FILE_PREFIX, suffix=ORDER_FILE_SUFFIX, dir=directory)
    except OSError as exc:
        raise WorkflowError(f"failed to create order file: {exc}") from exc

    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
    except OSError as exc:
        raise WorkflowError(f"failed to write to file: {exc}") from exc

    path = Path(name).resolve()
    logger.info("saved order to %s", path)
    return path


def fill_order(chooser: Chooser, order: Order) -> Order:
    """Ask for every field that is still unset, in dish, toppings, cooking level order."""
    if not order.main_dish:
        order.main_dish = select_main_dish(chooser).value

    if not order.toppings:
        try:
            order.toppings = pick_toppings(chooser, order.main_dish)
        except ChooserAborted as exc:
            # Not fatal: the order is saved without toppings.
            logger.warning("topping selection aborted: %s", exc)
            order.toppings = []

    if order.main_dish == MainDish.HAMBURGER and not order.cooking_level:
        order.cooking_level = pick_cooking_level(chooser)

    return order


def run_order_workflow(chooser: Chooser, output_dir: str | Path | None = ORDER_DIR) -> SavedOrder:
    """Run the full ordering flow and return the saved order."""
    order = Order()
    if ask_to_import(chooser):
        order = import_order_from_file(chooser)

    fill_order(chooser, order)
    path = save_order(order, output_dir)
    return SavedOrder(order=order, path=path)
