# src/taskboard/tasks/task_api.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.state import AppState
from ..errors import ValidationError
from .task_models import Task
from .task_query import TaskQuery, apply_query
from .task_stats import TaskStats, compute_stats

logger = logging.getLogger(__name__)


def parse_due_date(raw: str | datetime | None) -> datetime | None:
    """
    Due date from a form field.

    "" or None means no due date; strings are ISO-8601 (a datetime-local value
    like "2024-05-01T09:30" is fine). Anything unparseable is a ValidationError.
    """
    if raw is None or isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise ValidationError(f"due date must be text, got {type(raw).__name__}")
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"bad due date: {raw!r}") from None


def visible_tasks(
    state: AppState,
    *,
    search_text: str | None = "",
    filter: str | None = "All",
    sort_key: str | None = "none",
) -> list[Task]:
    """
    The list the UI should render for the current control values.
    Unknown filter/sort values fall back to "All"/"none".
    """
    query = TaskQuery.from_controls(search_text=search_text, filter=filter, sort_key=sort_key)
    return apply_query(state.task_store.list(), query)


def board_summary(state: AppState) -> TaskStats:
    """Totals over the whole collection (the progress bar ignores search/filter)."""
    return compute_stats(state.task_store.list())


def submit_task_form(
    state: AppState,
    *,
    title: str,
    description: str | None = "",
    priority: str | None = "Medium",
    due_date: str | datetime | None = None,
) -> Task | None:
    """
    Create a task from raw form input.

    A blank title is ignored (returns None, store untouched), the way the
    form silently refuses to submit. Other validation errors propagate.
    """
    if title is None or (isinstance(title, str) and not title.strip()):
        return None

    try:
        task = state.task_store.create(
            title=title,
            description=description,
            priority=priority,
            due_date=parse_due_date(due_date),
        )
    except ValidationError:
        logger.info("Rejected task form title=%r priority=%r", title, priority)
        raise

    logger.info("Task added id=%s", task.id)
    return task


def submit_edit_form(
    state: AppState,
    task_id: str,
    *,
    title: str,
    description: str | None,
    priority: str | None,
    due_date: str | datetime | None,
) -> Task:
    """
    Save the edit dialog: every field is replaced, an empty due date clears it.

    Unlike the create form, a blank title is an error here (ValidationError),
    and an unknown id raises NotFoundError. Either way the task is unchanged.
    """
    task = state.task_store.update(
        task_id,
        title=title,
        description=description,
        priority=priority,
        due_date=parse_due_date(due_date),
    )
    logger.info("Task edited id=%s", task.id)
    return task
