# tests/test_ordering.py

from __future__ import annotations

from datetime import datetime, timedelta

from priotask.tasks.ordering import compare_tasks, sort_tasks
from priotask.tasks.task_models import Priority, Task

T0 = datetime(2026, 10, 19, 12, 0)


def _task(
    task_id: str,
    *,
    priority: Priority = Priority.HIGH,
    due_days: float = 1,
    completed: bool = False,
    created_min: int = 0,
) -> Task:
    return Task(
        id=task_id,
        name=f"task {task_id}",
        end_time=T0 + timedelta(days=due_days),
        priority=priority,
        is_completed=completed,
        created_at=T0 + timedelta(minutes=created_min),
    )


def test_incomplete_sorts_before_completed_regardless_of_other_keys() -> None:
    active = _task("a", priority=Priority.LOW, due_days=30)
    done = _task("d", priority=Priority.HIGH, due_days=-5, completed=True, created_min=99)

    assert compare_tasks(active, done) < 0
    assert compare_tasks(done, active) > 0
    assert sort_tasks([done, active]) == [active, done]


def test_high_beats_low_even_with_later_deadline() -> None:
    high = _task("h", priority=Priority.HIGH, due_days=2)
    low = _task("l", priority=Priority.LOW, due_days=1)

    assert compare_tasks(high, low) < 0
    assert sort_tasks([low, high]) == [high, low]


def test_same_priority_earlier_deadline_first() -> None:
    early = _task("e", priority=Priority.LOW, due_days=1)
    late = _task("l", priority=Priority.LOW, due_days=3)

    assert compare_tasks(early, late) < 0
    assert sort_tasks([late, early]) == [early, late]


def test_completed_tasks_most_recently_created_first() -> None:
    older = _task("o", completed=True, created_min=1)
    newer = _task("n", completed=True, created_min=5)

    assert compare_tasks(newer, older) < 0
    assert sort_tasks([older, newer]) == [newer, older]


def test_completed_tasks_ignore_priority_and_deadline() -> None:
    older_high = _task("o", priority=Priority.HIGH, due_days=1, completed=True, created_min=1)
    newer_low = _task("n", priority=Priority.LOW, due_days=9, completed=True, created_min=2)

    assert sort_tasks([older_high, newer_low]) == [newer_low, older_high]


def test_full_tie_compares_equal_and_keeps_input_order() -> None:
    first = _task("1", due_days=2, created_min=0)
    second = _task("2", due_days=2, created_min=7)

    assert compare_tasks(first, second) == 0
    assert [t.id for t in sort_tasks([first, second])] == ["1", "2"]
    assert [t.id for t in sort_tasks([second, first])] == ["2", "1"]


def test_mixed_collection_canonical_order() -> None:
    tasks = [
        _task("done-old", completed=True, created_min=1),
        _task("low-soon", priority=Priority.LOW, due_days=0.5),
        _task("high-late", priority=Priority.HIGH, due_days=4),
        _task("done-new", completed=True, created_min=8),
        _task("high-soon", priority=Priority.HIGH, due_days=1),
        _task("low-late", priority=Priority.LOW, due_days=6),
    ]

    assert [t.id for t in sort_tasks(tasks)] == [
        "high-soon",
        "high-late",
        "low-soon",
        "low-late",
        "done-new",
        "done-old",
    ]
