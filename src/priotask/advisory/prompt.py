# src/priotask/advisory/prompt.py

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Final

from ..tasks.task_models import Task

ADVISORY_SYSTEM_PROMPT: Final[str] = """
You are a planning assistant for a personal task list.

Input: the user's active (not yet completed) tasks, already in the order they
should be worked on: High priority before Low, earliest deadline first.

Task:
- Suggest what to focus on next and how to pace the work before the deadlines.
- Point out deadlines that are overdue or very close.

Rules:
- Address the user directly, short and practical.
- 3-6 sentences or a short list. No emojis.
- Do not invent tasks that are not in the list.
""".strip()


def _fmt_ts(ts: datetime) -> str:
    return ts.strftime("%Y-%m-%d %H:%M")


def _fmt_task_line(task: Task, now: datetime) -> str:
    due = _fmt_ts(task.end_time)
    overdue = " (overdue)" if task.end_time < now else ""
    return f"- {task.name} | priority: {task.priority.value} | due: {due}{overdue}"


def build_advisory_prompt(
    active_tasks: Sequence[Task],
    now: datetime,
    *,
    max_tasks: int = 25,
) -> str:
    """
    Render the active-task snapshot as the user message for the advisory model.

    Tasks are listed in the order given (the store's canonical order); anything past
    `max_tasks` is summarized as a count.
    """
    lines = [f"Current time: {_fmt_ts(now)}"]

    if not active_tasks:
        lines.append("I have no active tasks right now.")
        return "\n".join(lines)

    lines.append(f"My active tasks ({len(active_tasks)}):")
    shown = list(active_tasks)[: max(1, max_tasks)]
    lines.extend(_fmt_task_line(t, now) for t in shown)

    hidden = len(active_tasks) - len(shown)
    if hidden > 0:
        lines.append(f"... and {hidden} more with later deadlines or lower priority.")

    lines.append("What should I focus on?")
    return "\n".join(lines)
