"""Entry point for the takeaway ordering assistant."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.text import Text

from takeaway.chooser import TextualChooser
from takeaway.config import DEBUG_LOG_PATH, LOG_LEVEL, ORDER_DIR
from takeaway.errors import TakeawayError
from takeaway.rendering import format_order_summary
from takeaway.workflow import run_order_workflow

logger = logging.getLogger(__name__)


def configure_logging(log_path: str = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send package logs to a debug file; the terminal belongs to the prompts."""
    log_file = Path(log_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    package_logger = logging.getLogger("takeaway")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level, logging.INFO))


def main() -> None:
    """Run the ordering flow and exit non-zero on any failure."""
    console = Console()
    try:
        configure_logging()
    except OSError as exc:
        console.print(Text(f"failed to set up logging: {exc}", style="bold red"), soft_wrap=True)
        sys.exit(1)

    try:
        saved = run_order_workflow(TextualChooser(), ORDER_DIR)
    except TakeawayError as exc:
        logger.error("order failed: %s", exc)
        console.print(Text(str(exc), style="bold red"), soft_wrap=True)
        sys.exit(1)

    console.print(Text(f"Successfully wrote down order at {saved.path}"), soft_wrap=True)
    console.print(format_order_summary(saved.order))
    console.print(Text("Your order is done.", style="bold green"))


if __name__ == "__main__":
    main()
