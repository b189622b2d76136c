# src/todo_tracker/tasks/task_file.py

"""
JSON file adapter for the task list.

File layout (pretty-printed, 2-space indent):

    {
      "tasks": [
        {"id": 1, "description": "Buy milk", "done": true}
      ]
    }

The whole file is rewritten on every save. Writes are not atomic.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import LoadFailed, SaveFailed
from .task_models import MAX_TASK_ID, Task, TaskList

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "TaskList.json"


def _task_from_obj(obj: Any, index: int) -> Task:
    if not isinstance(obj, dict):
        raise ValueError(f"tasks[{index}] is not an object")

    try:
        task_id = obj["id"]
        description = obj["description"]
        done = obj["done"]
    except KeyError as e:
        raise ValueError(f"tasks[{index}] is missing field {e.args[0]!r}") from None

    # bool is an int subclass; reject it explicitly.
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        raise ValueError(f"tasks[{index}].id must be an integer")
    if task_id < 0 or task_id > MAX_TASK_ID:
        raise ValueError(f"tasks[{index}].id is out of range 0..{MAX_TASK_ID}")
    if not isinstance(description, str):
        raise ValueError(f"tasks[{index}].description must be a string")
    if not isinstance(done, bool):
        raise ValueError(f"tasks[{index}].done must be a boolean")

    return Task(id=task_id, description=description, done=done)


def task_list_from_obj(data: Any) -> TaskList:
    """Validate decoded JSON and build a TaskList. Raises ValueError on shape errors."""
    if not isinstance(data, dict):
        raise ValueError("top-level value is not an object")
    raw_tasks = data.get("tasks")
    if not isinstance(raw_tasks, list):
        raise ValueError("'tasks' is missing or not an array")
    return TaskList(tasks=[_task_from_obj(obj, i) for i, obj in enumerate(raw_tasks)])


def task_list_to_obj(task_list: TaskList) -> dict[str, list[dict[str, Any]]]:
    return {
        "tasks": [
            {"id": t.id, "description": t.description, "done": t.done}
            for t in task_list
        ]
    }


def read_task_list(path: str | Path) -> TaskList:
    """
    Read the task file.

    Any I/O, decoding or shape problem is reported as LoadFailed.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise LoadFailed(path, "file does not exist") from e
    except OSError as e:
        raise LoadFailed(path, e.strerror or str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LoadFailed(path, f"invalid JSON ({e})") from e

    try:
        task_list = task_list_from_obj(data)
    except ValueError as e:
        raise LoadFailed(path, str(e)) from e

    logger.debug("Read %d tasks from %s", len(task_list), path)
    return task_list


def write_task_list(path: str | Path, task_list: TaskList) -> None:
    """Overwrite the task file with every task in list order."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(task_list_to_obj(task_list), f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise SaveFailed(path, e.strerror or str(e)) from e

    logger.debug("Wrote %d tasks to %s", len(task_list), path)
