# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

# Ids are unsigned 32-bit in the file format.
MAX_TASK_ID = 2**32 - 1


class MarkDoneResult(StrEnum):
    """
    Outcome of marking a task as done.

    Notes:
    - only MARKED_DONE changes state
    - ALREADY_DONE / NOT_FOUND are reported to the user, not raised
    """

    MARKED_DONE = "marked_done"
    ALREADY_DONE = "already_done"
    NOT_FOUND = "not_found"

    @property
    def message(self) -> str:
        return _MARK_DONE_MESSAGES[self]


_MARK_DONE_MESSAGES: dict[MarkDoneResult, str] = {
    MarkDoneResult.MARKED_DONE: "Task marked as done.",
    MarkDoneResult.ALREADY_DONE: "Task is already marked as done.",
    MarkDoneResult.NOT_FOUND: "Task not found.",
}


@dataclass(slots=True)
class Task:
    id: int
    description: str
    done: bool = False


@dataclass(slots=True)
class TaskList:
    """Ordered tasks. Insertion order is display order and file order."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def find(self, task_id: int) -> Task | None:
        # First match wins if a hand-edited file contains duplicate ids.
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def done_count(self) -> int:
        return sum(1 for t in self.tasks if t.done)
