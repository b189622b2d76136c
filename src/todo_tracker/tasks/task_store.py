# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path

from .errors import LoadFailed
from .task_file import DEFAULT_TASKS_FILE, read_task_list, write_task_list
from .task_models import MarkDoneResult, Task, TaskList

logger = logging.getLogger(__name__)


def add_task(task_list: TaskList, description: str) -> Task:
    """Append a new pending task. The id is the task's 1-based position."""
    task = Task(id=len(task_list) + 1, description=description, done=False)
    task_list.tasks.append(task)
    return task


def mark_task_done(task_list: TaskList, task_id: int) -> MarkDoneResult:
    task = task_list.find(task_id)
    if task is None:
        return MarkDoneResult.NOT_FOUND
    if task.done:
        return MarkDoneResult.ALREADY_DONE
    task.done = True
    return MarkDoneResult.MARKED_DONE


class TaskStore:
    """
    Session task store backed by one JSON file.

    The list lives in memory for the whole session:
    - load() once at startup (missing/corrupt file -> empty list)
    - add_task()/mark_done() mutate memory only
    - save() rewrites the file
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE) -> None:
        self._path = Path(path)
        self._task_list = TaskList()

    @property
    def task_list(self) -> TaskList:
        return self._task_list

    def load(self) -> TaskList:
        try:
            self._task_list = read_task_list(self._path)
        except LoadFailed as e:
            # First run (or unreadable file): start empty.
            logger.info("Starting with an empty task list: %s", e)
            self._task_list = TaskList()
        else:
            logger.info("TaskStore loaded path=%s total=%d", self._path, len(self._task_list))
        return self._task_list

    def save(self) -> None:
        write_task_list(self._path, self._task_list)
        logger.info("TaskStore saved path=%s total=%d", self._path, len(self._task_list))

    def count_tasks(self) -> int:
        return len(self._task_list)

    def add_task(self, description: str) -> Task:
        task = add_task(self._task_list, description)
        logger.debug("Task added id=%s description=%r", task.id, task.description)
        return task

    def mark_done(self, task_id: int) -> MarkDoneResult:
        result = mark_task_done(self._task_list, task_id)
        logger.debug("Mark done id=%s result=%s", task_id, result.value)
        return result
