# src/todo_tracker/tasks/errors.py

"""Failures raised by the task file adapter and by input parsing."""

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for todo_tracker failures."""


class LoadFailed(TaskError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not load tasks from {self.path}: {reason}")


class SaveFailed(TaskError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not save tasks to {self.path}: {reason}")


class MalformedInput(TaskError, ValueError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Not a valid task ID: {raw!r}")
