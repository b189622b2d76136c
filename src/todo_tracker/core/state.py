# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..tasks.task_store import TaskStore


class SessionState(StrEnum):
    """Interaction loop states. ENDED is terminal."""

    AWAITING_CHOICE = "awaiting_choice"
    ENDED = "ended"


@dataclass
class AppState:
    # Settings object (real Settings or a test stand-in with the same attributes).
    settings: Any
    task_store: TaskStore

    session: SessionState = SessionState.AWAITING_CHOICE

    @property
    def strict_input(self) -> bool:
        return bool(getattr(self.settings, "strict_input", False))
