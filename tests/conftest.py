# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import TaskStore

from .fakes import ScriptedInput


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="todo-tracker-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_file=tmp_path / "TaskList.json",
        strict_input=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    store = TaskStore(settings.tasks_file)
    store.load()
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def feed_input(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str]], ScriptedInput]:
    """Replace builtins.input with a scripted sequence of lines."""

    def _feed(lines: Iterable[str]) -> ScriptedInput:
        scripted = ScriptedInput(lines)
        monkeypatch.setattr("builtins.input", scripted)
        return scripted

    return _feed
