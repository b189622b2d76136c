# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs
the console menu loop in the main thread until the user picks "End".

Exit status:
- 0: tasks saved after "End"
- 1: input ended / interrupted (nothing saved), or a fatal task error
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import SessionAborted, run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import TaskError

logger = logging.getLogger(__name__)


def run(settings=None) -> int:
    """Run one session and return the process exit status."""
    if settings is None:
        settings = get_settings()

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    except SessionAborted:
        print("Exiting without saving.")
        return 1
    except TaskError as e:
        logger.exception("Session aborted by a fatal task error.")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_file)

    status = run(settings)

    logger.info("Bye (status=%d).", status)
    sys.exit(status)


if __name__ == "__main__":
    main()
