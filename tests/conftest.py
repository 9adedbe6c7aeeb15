from __future__ import annotations

import pytest

from takeaway.errors import ChooserAborted


class ScriptedChooser:
    """Answers prompts from a script of option values or prompt texts.

    Use ABORT in the script to simulate the user cancelling a prompt.
    """

    ABORT = object()

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = []

    def _next(self):
        if not self.answers:
            raise AssertionError("chooser asked more questions than scripted")
        answer = self.answers.pop(0)
        if answer is self.ABORT:
            raise ChooserAborted("aborted")
        return answer

    def select_one(self, label, options):
        self.calls.append((label, list(options)))
        answer = self._next()
        if answer not in options:
            # Lets tests feed answers the prompt never offered.
            return -1, answer
        return options.index(answer), answer

    def prompt_text(self, label, validate):
        self.calls.append((label, None))
        answer = self._next()
        validate(answer)
        return answer


@pytest.fixture
def scripted_chooser():
    return ScriptedChooser
