# tests/test_task_api.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskboard.core.state import AppState
from taskboard.errors import NotFoundError, ValidationError
from taskboard.tasks.task_api import (
    board_summary,
    parse_due_date,
    submit_edit_form,
    submit_task_form,
    visible_tasks,
)
from taskboard.tasks.task_models import Priority


def test_submit_task_form_creates_task(state: AppState) -> None:
    task = submit_task_form(state, title="Buy milk", description=" 2 litres ", priority="Low")

    assert task is not None
    assert task.priority is Priority.LOW
    assert task.description == "2 litres"
    assert state.task_store.list() == [task]


def test_submit_task_form_ignores_blank_title(state: AppState) -> None:
    assert submit_task_form(state, title="   ") is None
    assert len(state.task_store) == 0


def test_submit_task_form_propagates_other_validation_errors(state: AppState) -> None:
    with pytest.raises(ValidationError):
        submit_task_form(state, title="x", priority="Someday")
    assert len(state.task_store) == 0


def test_visible_tasks_applies_raw_control_values(state: AppState) -> None:
    apple = submit_task_form(state, title="Apple pie", priority="High")
    submit_task_form(state, title="Banana bread", priority="High")
    apple_juice = submit_task_form(state, title="Apple juice", priority="Low")
    assert apple is not None and apple_juice is not None

    view = visible_tasks(state, search_text="apple", filter="All", sort_key="date-asc")
    assert view == [apple, apple_juice]

    view = visible_tasks(state, search_text="apple", filter="Priority-Low", sort_key="bogus")
    assert view == [apple_juice]


def test_visible_tasks_defaults_show_stored_order(state: AppState) -> None:
    for title in ("one", "two", "three"):
        submit_task_form(state, title=title)
    assert [t.title for t in visible_tasks(state)] == ["three", "two", "one"]


def test_board_summary_ignores_filters(state: AppState) -> None:
    a = submit_task_form(state, title="a")
    submit_task_form(state, title="b")
    assert a is not None
    state.task_store.toggle_status(a.id)

    stats = board_summary(state)
    assert (stats.total, stats.completed, stats.pending, stats.completion_percent) == (2, 1, 1, 50)


def test_submit_task_form_parses_datetime_local_due_date(state: AppState) -> None:
    task = submit_task_form(state, title="Call mom", due_date="2024-05-01T09:30")

    assert task is not None
    assert task.due_date == datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
    assert state.task_store.list() == [task]


def test_submit_task_form_empty_due_date_means_none(state: AppState) -> None:
    task = submit_task_form(state, title="Someday", due_date="")
    assert task is not None
    assert task.due_date is None


def test_submit_task_form_rejects_bad_due_date(state: AppState) -> None:
    with pytest.raises(ValidationError):
        submit_task_form(state, title="x", due_date="next tuesday")
    assert len(state.task_store) == 0


def test_submit_task_form_non_text_title_is_validation_error(state: AppState) -> None:
    with pytest.raises(ValidationError):
        submit_task_form(state, title=123)  # type: ignore[arg-type]
    assert len(state.task_store) == 0


def test_submit_edit_form_replaces_fields_and_clears_due_date(state: AppState) -> None:
    task = submit_task_form(state, title="Old", priority="Low", due_date="2024-05-01T09:30")
    assert task is not None

    edited = submit_edit_form(
        state,
        task.id,
        title=" New ",
        description="more detail",
        priority="High",
        due_date="",
    )

    assert edited.title == "New"
    assert edited.description == "more detail"
    assert edited.priority is Priority.HIGH
    assert edited.due_date is None
    assert edited.created_at == task.created_at
    assert state.task_store.get(task.id) == edited


def test_submit_edit_form_sets_due_date_from_string(state: AppState) -> None:
    task = submit_task_form(state, title="x")
    assert task is not None

    edited = submit_edit_form(
        state, task.id, title="x", description="", priority="Medium", due_date="2024-06-01T18:00"
    )
    assert edited.due_date == datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc)


def test_submit_edit_form_errors_leave_task_unchanged(state: AppState) -> None:
    task = submit_task_form(state, title="keep")
    assert task is not None

    with pytest.raises(ValidationError):
        submit_edit_form(state, task.id, title="   ", description="", priority="Low", due_date="")
    with pytest.raises(ValidationError):
        submit_edit_form(state, task.id, title="y", description="", priority="Low", due_date="soon")
    with pytest.raises(NotFoundError):
        submit_edit_form(state, "missing", title="y", description="", priority="Low", due_date="")

    assert state.task_store.list() == [task]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("  ", None),
        ("2024-05-01T09:30", datetime(2024, 5, 1, 9, 30)),
        ("2024-05-01T09:30:00Z", datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)),
    ],
)
def test_parse_due_date(raw: str | None, expected: datetime | None) -> None:
    assert parse_due_date(raw) == expected
