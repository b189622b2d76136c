# tests/test_console.py

from __future__ import annotations

import json

import pytest

from todo_tracker.connectors.console_connector import (
    SessionAborted,
    format_task,
    render_task_lines,
    run_console_loop,
)
from todo_tracker.core.state import SessionState
from todo_tracker.tasks.errors import MalformedInput
from todo_tracker.tasks.task_models import Task, TaskList

MENU = "Options:\n1. Add Task to list\n2. Mark Task as Complete\n3. End\n"


def test_format_task_glyphs() -> None:
    assert format_task(Task(1, "Buy milk", True)) == "[✓] 1 Buy milk"
    assert format_task(Task(2, "Walk dog", False)) == "[ ] 2 Walk dog"


def test_render_without_done_has_no_summary() -> None:
    assert render_task_lines(TaskList(tasks=[Task(1, "a"), Task(2, "b")])) == ["[ ] 1 a", "[ ] 2 b"]
    assert render_task_lines(TaskList(tasks=[])) == []


def test_render_counts_completed_tasks() -> None:
    lines = render_task_lines(TaskList(tasks=[Task(1, "a", True), Task(2, "b"), Task(3, "c", True)]))
    assert lines == [
        "[✓] 1 a",
        "[ ] 2 b",
        "[✓] 3 c",
        "You have 2 completed tasks.",
        "",
    ]
    assert render_task_lines(TaskList(tasks=[Task(1, "a", True)]))[-2] == "You have 1 completed task."


def test_empty_session_output(state, feed_input, capsys) -> None:
    feed_input(["3"])
    run_console_loop(state)

    assert state.session is SessionState.ENDED
    assert capsys.readouterr().out == "ToDo List:\n" + MENU + "Ending now.\n"


def test_invalid_option_loops(state, feed_input, capsys) -> None:
    feed_input(["7", "3"])
    run_console_loop(state)

    out = capsys.readouterr().out
    assert out == (
        "ToDo List:\n" + MENU
        + "Invalid option. Please input option 1 to 3.\n\n"
        + "ToDo List:\n" + MENU
        + "Ending now.\n"
    )


def test_listing_shown_before_each_menu(state, feed_input, capsys) -> None:
    feed_input(["1", "Buy milk", "2", "1", "3"])
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "ToDo List:\n[ ] 1 Buy milk\nOptions:" in out
    assert "Task marked as done.\nToDo List:\n[✓] 1 Buy milk\nYou have 1 completed task.\n\nOptions:" in out


def test_eof_aborts_without_saving(state, settings, feed_input) -> None:
    feed_input(["1", "Buy milk"])
    with pytest.raises(SessionAborted):
        run_console_loop(state)
    assert not settings.tasks_file.exists()


def test_keyboard_interrupt_aborts_without_saving(state, settings, monkeypatch) -> None:
    def _interrupt(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", _interrupt)
    with pytest.raises(SessionAborted):
        run_console_loop(state)
    assert not settings.tasks_file.exists()


def test_strict_mode_malformed_id_propagates(state, settings, feed_input) -> None:
    settings.strict_input = True
    feed_input(["1", "Buy milk", "2", "x", "3"])
    with pytest.raises(MalformedInput):
        run_console_loop(state)
    assert not settings.tasks_file.exists()


def test_default_mode_malformed_id_continues(state, settings, feed_input, capsys) -> None:
    feed_input(["1", "Buy milk", "2", "x", "3"])
    run_console_loop(state)

    assert "Invalid task ID. Please enter a whole number." in capsys.readouterr().out
    data = json.loads(settings.tasks_file.read_text("utf-8"))
    assert data == {"tasks": [{"id": 1, "description": "Buy milk", "done": False}]}


def test_strict_mode_accepts_plus_prefixed_id(state, settings, feed_input) -> None:
    settings.strict_input = True
    feed_input(["1", "Buy milk", "2", "+1", "3"])
    run_console_loop(state)

    data = json.loads(settings.tasks_file.read_text("utf-8"))
    assert data == {"tasks": [{"id": 1, "description": "Buy milk", "done": True}]}
