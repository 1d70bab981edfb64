# src/priotask/tasks/task_api.py

"""
Form layer in front of the TaskStore.

The store trusts its input. Everything that turns raw user text into a valid
TaskFormData lives here:
- name: required, at least 3 characters after trimming
- end time: required, ISO 8601 / "YYYY-MM-DD HH:MM" / relative ("2d", "3h", "45m")
- priority: High or Low (case-insensitive), defaults to High
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta

from ..core.ports import TaskRepo
from .task_models import Priority, Task, TaskFormData

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3
DEFAULT_PRIORITY = Priority.HIGH

_RELATIVE_RE = re.compile(r"^\s*(\d+)\s*([dhm])\s*$", re.IGNORECASE)
_UNITS = {"d": "days", "h": "hours", "m": "minutes"}


class TaskFormError(ValueError):
    """Raised when form input does not validate. `errors` maps field name -> message."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


def as_local_naive(ts: datetime) -> datetime:
    """Convert an offset-aware datetime to naive local time; naive values pass through."""
    if ts.tzinfo is None:
        return ts
    return ts.astimezone().replace(tzinfo=None)


def parse_relative_deadline(raw: str, now: datetime) -> datetime | None:
    """'2d' / '3h' / '45m' relative to `now`; None if `raw` is not in that form."""
    m = _RELATIVE_RE.match(raw or "")
    if not m:
        return None
    amount = int(m.group(1))
    unit = _UNITS[m.group(2).lower()]
    return now + timedelta(**{unit: amount})


def parse_deadline(raw: str, now: datetime) -> datetime:
    text = (raw or "").strip()
    if not text:
        raise ValueError("end time is required")

    rel = parse_relative_deadline(text, now)
    if rel is not None:
        return rel

    try:
        return as_local_naive(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in ("%Y-%m-%d %H:%M", "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ValueError(f"unrecognized end time: {text!r}")


def parse_task_form(
    name: str,
    end_time: str | datetime,
    priority: str | Priority | None = None,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> TaskFormData:
    errors: dict[str, str] = {}

    clean_name = (name or "").strip()
    if not clean_name:
        errors["name"] = "Task name is required."
    elif len(clean_name) < MIN_NAME_LENGTH:
        errors["name"] = f"Task name must be at least {MIN_NAME_LENGTH} characters."

    deadline = now = clock()
    if isinstance(end_time, datetime):
        deadline = as_local_naive(end_time)
    else:
        try:
            deadline = parse_deadline(end_time, now)
        except ValueError as e:
            errors["end_time"] = str(e)

    prio = DEFAULT_PRIORITY
    if priority is not None and str(priority).strip():
        try:
            prio = Priority.parse(priority)
        except ValueError:
            errors["priority"] = "Priority must be High or Low."

    if errors:
        raise TaskFormError(errors)

    return TaskFormData(name=clean_name, end_time=deadline, priority=prio)


def add_task_from_form(store: TaskRepo, form: TaskFormData) -> Task:
    task = store.create(form.name, form.end_time, form.priority)
    logger.info("Added task id=%s (%s)", task.id, task.priority.value)
    return task


def resolve_task_ref(store: TaskRepo, ref: str) -> str | None:
    """
    Map a console reference to a task id.

    - "#N": N-th task (1-based) in the current listing order
    - anything else: exact id, or a unique id prefix
    """
    ref = (ref or "").strip()
    if not ref:
        return None

    tasks = store.all_tasks()

    if ref.startswith("#"):
        try:
            pos = int(ref[1:])
        except ValueError:
            return None
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1].id
        return None

    matches = [t.id for t in tasks if t.id.startswith(ref)]
    if ref in matches:
        return ref
    if len(matches) == 1:
        return matches[0]
    return None
