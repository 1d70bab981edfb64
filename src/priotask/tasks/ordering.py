# src/priotask/tasks/ordering.py

"""
Canonical task order.

Rule chain, applied until one discriminates:
1. incomplete tasks before completed ones
2. completed: most recently created first (created_at is the completion-recency proxy)
3. incomplete: High before Low
4. incomplete, same priority: earliest end_time first

Full ties keep their input order (Python's sort is stable).
The comparator only reads the two tasks it is given; it never consults a clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from functools import cmp_to_key

from .task_models import Task


def _cmp(a: datetime, b: datetime) -> int:
    return (a > b) - (a < b)


def compare_tasks(a: Task, b: Task) -> int:
    """Return <0 if `a` sorts before `b`, >0 if after, 0 on a full tie."""
    if a.is_completed != b.is_completed:
        return 1 if a.is_completed else -1

    if a.is_completed:
        # Descending created_at.
        return _cmp(b.created_at, a.created_at)

    if a.priority != b.priority:
        return a.priority.rank - b.priority.rank

    return _cmp(a.end_time, b.end_time)


task_sort_key = cmp_to_key(compare_tasks)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=task_sort_key)
