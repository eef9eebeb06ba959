"""Interactive prompts for the resolver, one outstanding question at a time."""

import sys
from enum import Enum

import click

SHOW_CURSOR = "\x1b[?25h"


class PromptState(Enum):
    IDLE = "idle"
    PROMPTING = "prompting"
    ANSWERED = "answered"
    ABORTED = "aborted"


def abort_run():
    """Restore the terminal cursor and exit after the operator cancelled a prompt."""
    sys.stdout.write(SHOW_CURSOR)
    sys.stdout.write("\n")
    sys.stdout.flush()
    sys.exit(1)


class ClickPrompter:
    """Asks questions on the terminal through click.

    Tracks which field is being asked so an interrupted run can be reported.
    Ctrl+C or Ctrl+D during a question ends the process with status 1.
    """

    def __init__(self):
        self.state = PromptState.IDLE
        self.field = None

    def _ask(self, field, ask_fn):
        self.state = PromptState.PROMPTING
        self.field = field
        try:
            answer = ask_fn()
        except click.Abort:
            self.state = PromptState.ABORTED
            abort_run()
        self.state = PromptState.ANSWERED
        return answer

    def ask_toggle(self, field: str, message: str, default: bool) -> bool:
        return self._ask(field, lambda: click.confirm(message, default=bool(default)))

    def ask_text(self, field: str, message: str, default: str, validate=None) -> str:
        """Prompt for text, re-asking until validate(value) returns None."""

        def value_proc(value):
            problem = validate(value) if validate else None
            if problem:
                raise click.UsageError(problem)
            return value

        return self._ask(
            field, lambda: click.prompt(message, default=default, value_proc=value_proc),
        )
