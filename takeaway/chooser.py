"""Interactive prompts used by the order workflow."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Static

from takeaway.errors import ChooserAborted
from takeaway.rendering import format_option_rows

logger = logging.getLogger(__name__)

Validator = Callable[[str], None]


class Chooser(Protocol):
    """What the workflow needs from an interactive prompt backend."""

    def select_one(self, label: str, options: list[str]) -> tuple[int, str]:
        """Return the index and value of the chosen option."""
        ...

    def prompt_text(self, label: str, validate: Validator) -> str:
        """Return free text accepted by validate, which raises ValueError to reject."""
        ...


_DIALOG_CSS = """
Screen {
    align: center middle;
}

#dialog {
    width: 80;
    height: auto;
    border: round $secondary;
    background: $panel;
    padding: 1 2;
}

#title {
    text-style: bold;
    margin-bottom: 1;
    color: white;
}

#value {
    border: heavy $secondary;
    padding: 0 1;
    color: white;
    margin-bottom: 1;
}

#error {
    color: #ffb3b3;
    margin-bottom: 1;
}

#help {
    margin-top: 1;
    color: #dddddd;
}
"""


class SelectApp(App[int | None]):
    """Single-choice list; exits with the selected index or None when cancelled."""

    CSS = _DIALOG_CSS

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        Binding("ctrl+c", "cancel", "Cancel", priority=True),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "confirm", "Select"),
    ]

    cursor_index = reactive(0)

    def __init__(self, label: str, options: list[str]) -> None:
        super().__init__()
        self.label = label
        self.options = list(options)

    def compose(self) -> ComposeResult:
        with Container(id="dialog"):
            yield Static(self.label, id="title")
            yield Static(id="body")
            yield Static("J/K/↑/↓ move, Enter select, Esc/Ctrl+C cancel", id="help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_confirm(self) -> None:
        if not self.options:
            return
        self.exit(self.cursor_index)

    def action_cancel(self) -> None:
        self.exit(None)

    def _refresh_content(self) -> None:
        self.query_one("#body", Static).update(format_option_rows(self.options, self.cursor_index))


class TextPromptApp(App[str | None]):
    """Free-text prompt that re-asks until the validator accepts the input."""

    CSS = _DIALOG_CSS

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", priority=True),
    ]

    def __init__(self, label: str, validate: Validator) -> None:
        super().__init__()
        self.label = label
        self.validator = validate
        self.value = ""
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="dialog"):
            yield Static(self.label, id="title")
            yield Static(id="value")
            yield Static(id="error")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key == "escape":
            self.action_cancel()
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.value += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        try:
            self.validator(self.value)
        except ValueError as exc:
            self.error = str(exc)
            self._refresh_content()
            return
        self.exit(self.value)

    def action_cancel(self) -> None:
        self.exit(None)

    def _refresh_content(self) -> None:
        self.query_one("#value", Static).update(Text(f"{self.value}|"))
        self.query_one("#error", Static).update(Text(self.error))


class TextualChooser:
    """Chooser that runs one Textual app per question."""

    def select_one(self, label: str, options: list[str]) -> tuple[int, str]:
        index = SelectApp(label, options).run()
        if index is None:
            raise ChooserAborted(f"no option selected for {label!r}")
        logger.debug("select_one label=%r index=%d value=%r", label, index, options[index])
        return index, options[index]

    def prompt_text(self, label: str, validate: Validator) -> str:
        answer = TextPromptApp(label, validate).run()
        if answer is None:
            raise ChooserAborted(f"no answer given for {label!r}")
        logger.debug("prompt_text label=%r answer=%r", label, answer)
        return answer
