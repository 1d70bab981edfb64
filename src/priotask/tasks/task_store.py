# src/priotask/tasks/task_store.py

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from .ordering import sort_tasks
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(n: int) -> str:
    if n <= 0:
        return "0"
    out: list[str] = []
    while n:
        n, r = divmod(n, 36)
        out.append(_ALPHABET[r])
    return "".join(reversed(out))


def generate_task_id() -> str:
    """Millisecond timestamp + random suffix, both base 36."""
    return _base36(int(time.time() * 1000)) + _base36(secrets.randbits(52))


class TaskStore:
    """
    In-memory task store (one session, nothing survives a restart).

    Invariant: `_tasks` is in canonical order whenever a public method returns.
    Every mutation ends with `_resort()`; there is no lazy sorting.

    Views (`active_tasks`, `completed_tasks`, `all_tasks`) are fresh lists of frozen
    Task records, so callers cannot mutate the store through them.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = generate_task_id,
    ) -> None:
        self._tasks: list[Task] = []
        self._issued_ids: set[str] = set()
        self._clock = clock
        self._id_factory = id_factory
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _resort(self, tasks: list[Task]) -> None:
        # `_tasks` is only ever replaced by a fully sorted list.
        self._tasks = sort_tasks(tasks)

    def _new_id(self) -> str:
        task_id = self._id_factory()
        while task_id in self._issued_ids:
            task_id = self._id_factory()
        self._issued_ids.add(task_id)
        return task_id

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- mutations ----

    def create(self, name: str, end_time: datetime, priority: Priority | str) -> Task:
        """
        Add a task. Input is assumed to be validated by the form layer already
        (name length, parseable deadline, known priority).
        """
        task = Task(
            id=self._new_id(),
            name=name,
            end_time=end_time,
            priority=Priority.parse(priority),
            is_completed=False,
            created_at=self._clock(),
        )
        self._resort([*self._tasks, task])
        logger.debug(
            "Task created id=%s priority=%s end_time=%s",
            task.id,
            task.priority.value,
            task.end_time.isoformat(),
        )
        return task

    def toggle_complete(self, task_id: str) -> None:
        """Flip completion. Unknown ids are a no-op (e.g. a stale view raced a delete)."""
        i = self._index_of(task_id)
        if i is None:
            logger.debug("toggle_complete: no task id=%s", task_id)
            return

        current = self._tasks[i]
        candidate = list(self._tasks)
        candidate[i] = replace(current, is_completed=not current.is_completed)
        self._resort(candidate)
        logger.debug("Task toggled id=%s completed=%s", task_id, not current.is_completed)

    def delete(self, task_id: str) -> None:
        i = self._index_of(task_id)
        if i is None:
            logger.debug("delete: no task id=%s", task_id)
            return

        self._resort(self._tasks[:i] + self._tasks[i + 1 :])
        logger.debug("Task deleted id=%s", task_id)

    # ---- views ----

    def active_tasks(self) -> list[Task]:
        return [t for t in self._tasks if not t.is_completed]

    def completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.is_completed]

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        i = self._index_of(task_id)
        return None if i is None else self._tasks[i]

    def count_tasks(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
