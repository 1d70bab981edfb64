# src/priotask/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Priority(StrEnum):
    """
    Priority tier of an active task.

    Notes:
    - values are the user-facing tags ("High" / "Low")
    - `rank` is the sort position: lower sorts first
    """

    HIGH = "High"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return 0 if self is Priority.HIGH else 1

    @classmethod
    def parse(cls, raw: str | Priority) -> Priority:
        if isinstance(raw, Priority):
            return raw
        value = (raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == value:
                return member
        raise ValueError(f"Unknown priority: {raw!r}")


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    name: str
    end_time: datetime
    priority: Priority
    is_completed: bool
    created_at: datetime


@dataclass(frozen=True, slots=True)
class TaskFormData:
    """Validated creation record produced by the form layer (see task_api.parse_task_form)."""

    name: str
    end_time: datetime
    priority: Priority
