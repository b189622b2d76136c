# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected or loaded once),
- builds the TaskStore for the configured file,
- loads the task list (missing/corrupt file -> empty list),
- wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    task_store = TaskStore(settings.tasks_file)
    task_store.load()

    logger.debug("AppState ready tasks_file=%s total=%d", settings.tasks_file, task_store.count_tasks())
    return AppState(settings=settings, task_store=task_store)
