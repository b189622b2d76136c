# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState, SessionState
from ..tasks.task_models import Task, TaskList

logger = logging.getLogger(__name__)

DONE_GLYPH = "[✓]"
PENDING_GLYPH = "[ ]"


class SessionAborted(Exception):
    """Input ended (EOF / Ctrl-C) before the user chose to save and exit."""


def format_task(task: Task) -> str:
    status = DONE_GLYPH if task.done else PENDING_GLYPH
    return f"{status} {task.id} {task.description}"


def render_task_lines(task_list: TaskList) -> list[str]:
    """
    Task listing in list order.

    If anything is done, a summary line and a blank line follow.
    """
    lines = [format_task(task) for task in task_list]
    done = task_list.done_count()
    if done > 0:
        noun = "task" if done == 1 else "tasks"
        lines.append(f"You have {done} completed {noun}.")
        lines.append("")
    return lines


def _print_board(state: AppState, registry: CommandRegistry) -> None:
    print("ToDo List:")
    for line in render_task_lines(state.task_store.task_list):
        print(line)
    print(registry.build_menu())


def run_console_loop(state: AppState, registry: CommandRegistry | None = None) -> None:
    """
    Drive one session until the user picks "End".

    Raises SessionAborted when stdin closes or the user hits Ctrl-C; nothing is saved then.
    TaskError subclasses (SaveFailed, MalformedInput in strict mode) propagate.
    """
    registry = registry or command_registry
    logger.info("Console session started (tasks=%d).", state.task_store.count_tasks())

    while state.session is SessionState.AWAITING_CHOICE:
        _print_board(state, registry)

        try:
            choice = input()
            transition = registry.handle(state, choice)
        except EOFError:
            logger.info("Console EOF received, exiting without saving.")
            raise SessionAborted("end of input") from None
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting without saving.")
            print()
            raise SessionAborted("interrupted") from None

        if transition.message is not None:
            print(transition.message)
        state.session = transition.next_state

    logger.info("Console session finished.")
