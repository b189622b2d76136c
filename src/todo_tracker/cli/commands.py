# src/todo_tracker/cli/commands.py

"""
Menu commands and the transition table of the interaction loop.

Each menu choice ("1", "2", "3") maps to a handler that performs one
step and returns a Transition (message to print + next session state).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState, SessionState
from ..tasks.errors import MalformedInput
from ..tasks.task_models import MAX_TASK_ID

logger = logging.getLogger(__name__)

INVALID_OPTION_MESSAGE = "Invalid option. Please input option 1 to 3.\n"
INVALID_ID_MESSAGE = "Invalid task ID. Please enter a whole number."
FAREWELL_MESSAGE = "Ending now."

# Leading "+" is accepted, sign "-" is not.
_TASK_ID_RE = re.compile(r"\+?[0-9]+")


@dataclass(slots=True)
class Transition:
    message: str | None = None
    next_state: SessionState = SessionState.AWAITING_CHOICE


CommandHandler = Callable[[AppState], Transition]


def parse_task_id(raw: str) -> int:
    """Parse a trimmed line as an unsigned task id. Raises MalformedInput."""
    text = raw.strip()
    if not _TASK_ID_RE.fullmatch(text):
        raise MalformedInput(raw)
    value = int(text)
    if value > MAX_TASK_ID:
        raise MalformedInput(raw)
    return value


class CommandRegistry:
    """Menu-choice registry used by the console loop."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, choice: str, handler: CommandHandler, help_text: str) -> None:
        key = choice.strip()
        self._handlers[key] = handler
        self._help[key] = help_text

    def handle(self, state: AppState, line: str) -> Transition:
        """
        Dispatch one menu choice.
        Unknown choices are not errors: they return a corrective message.
        """
        choice = line.strip()
        handler = self._handlers.get(choice)
        if handler is None:
            logger.debug("Invalid menu choice %r", choice)
            return Transition(message=INVALID_OPTION_MESSAGE)
        return handler(state)

    def build_menu(self) -> str:
        lines = ["Options:"]
        for choice, help_text in self._help.items():
            lines.append(f"{choice}. {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState) -> Transition:
    print("Enter task description:")
    description = input().strip()
    state.task_store.add_task(description)
    return Transition()


def cmd_complete(state: AppState) -> Transition:
    print("Enter the task ID to mark as complete:")
    raw = input()
    try:
        task_id = parse_task_id(raw)
    except MalformedInput:
        if state.strict_input:
            raise
        logger.info("Rejected task id input %r", raw.strip())
        return Transition(message=INVALID_ID_MESSAGE)

    result = state.task_store.mark_done(task_id)
    return Transition(message=result.message)


def cmd_end(state: AppState) -> Transition:
    print(FAREWELL_MESSAGE)
    state.task_store.save()
    return Transition(next_state=SessionState.ENDED)


registry.register("1", cmd_add, help_text="Add Task to list")
registry.register("2", cmd_complete, help_text="Mark Task as Complete")
registry.register("3", cmd_end, help_text="End")
