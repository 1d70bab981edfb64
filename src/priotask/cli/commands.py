# src/priotask/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import TaskFormError, add_task_from_form, parse_task_form, resolve_task_ref
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if len(inspect.signature(handler).parameters) >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_line(pos: int, task: Task) -> str:
    mark = "x" if task.is_completed else " "
    due = task.end_time.strftime("%Y-%m-%d %H:%M")
    return f"#{pos} [{mark}] {task.name} ({task.priority.value}, due {due}) id={task.id}"


# /exit and /quit are handled by the console loop itself, before the registry.
EXIT_HELP_LINE = "  /exit - Quit the console (alias: /quit)."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help() + "\n" + EXIT_HELP_LINE


def cmd_list(state: AppState, args: list[str]) -> str:
    with state.lock:
        tasks = state.task_store.all_tasks()
        n_active = len(state.task_store.active_tasks())

    if not tasks:
        return "No tasks yet. Add one with /add <name> | <deadline> | [High|Low]."

    # Canonical order puts every active task ahead of every completed one.
    lines = [f"Active ({n_active}):"]
    if n_active == 0:
        lines.append("  (none)")
    for pos, task in enumerate(tasks, start=1):
        if pos == n_active + 1:
            lines.append(f"Completed ({len(tasks) - n_active}):")
        lines.append("  " + format_task_line(pos, task))
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <name> | <deadline> | [High|Low]

    deadline: "2026-10-21 18:00", ISO 8601, or relative ("2d", "3h", "45m").
    """
    fields = [f.strip() for f in " ".join(args).split("|")]
    if len(fields) < 2:
        return "Usage: /add <name> | <deadline> | [High|Low]"

    name, deadline = fields[0], fields[1]
    priority = fields[2] if len(fields) > 2 else None

    try:
        form = parse_task_form(name, deadline, priority)
    except TaskFormError as e:
        return "Task not added:\n" + "\n".join(f"  {k}: {v}" for k, v in e.errors.items())

    with state.lock:
        task = add_task_from_form(state.task_store, form)
    return f"Added: {task.name} ({task.priority.value}) id={task.id}"


def _no_match(ref: str) -> str:
    return f"No task matches {ref!r}. Use /list to see ids."


def cmd_done(state: AppState, args: list[str]) -> str:
    """/done <id|#N> -> toggle completion (run again to reopen)."""
    with state.lock:
        if not args:
            return "Usage: /done <id|#N>"
        task_id = resolve_task_ref(state.task_store, args[0])
        if task_id is None:
            return _no_match(args[0])
        state.task_store.toggle_complete(task_id)
        task = state.task_store.get(task_id)

    if task is None:
        return "Task no longer exists."
    return f"{'Completed' if task.is_completed else 'Reopened'}: {task.name}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    with state.lock:
        if not args:
            return "Usage: /rm <id|#N>"
        task_id = resolve_task_ref(state.task_store, args[0])
        if task_id is None:
            return _no_match(args[0])
        task = state.task_store.get(task_id)
        state.task_store.delete(task_id)

    name = task.name if task is not None else task_id
    return f"Deleted: {name}"


def _advice_report(state: AppState) -> str:
    adv = state.advisory
    if adv.loading:
        return "Advice: generating..."
    if adv.error:
        return f"Advice error: {adv.error}"
    if adv.text:
        return "Advice:\n" + adv.text
    return "No advice yet. Use /advice to request some."


def cmd_advice(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /advice       -> request fresh advice for the active tasks
    /advice show  -> show the latest advice / error
    """
    if args and args[0].lower() == "show":
        return _advice_report(state)

    runner = state.advisory_runner
    if runner is None:
        with state.lock:
            request_no, prompt = state.advisory.begin(state.task_store)
        asyncio.run(state.advisory.complete(request_no, prompt))
        return _advice_report(state)

    with state.lock:
        future = runner.submit(state.advisory, state.task_store)

    if emit is not None:
        def _on_done(_fut) -> None:
            with contextlib.suppress(Exception):
                emit(_advice_report(state))

        future.add_done_callback(_on_done)

    return "Requesting advice... (task commands keep working meanwhile)"


def cmd_status(state: AppState, args: list[str]) -> str:
    with state.lock:
        n_active = len(state.task_store.active_tasks())
        n_done = len(state.task_store.completed_tasks())
    models = ", ".join(list(getattr(state.settings, "llm_models", []) or []))
    adv = state.advisory
    return (
        "Status:\n"
        f"  Tasks: {n_active} active, {n_done} completed\n"
        f"  Advice: {'loading' if adv.loading else 'idle'}, {adv.requests_issued} requested\n"
        f"  Models (priority -> fallback): {models}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks in priority order.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <name> | <deadline> | [High|Low].")
registry.register("done", cmd_done, help_text="Toggle completion: /done <id|#N>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id|#N>.", aliases=["delete", "del"])
registry.register("advice", cmd_advice, help_text="Ask for advice on active tasks: /advice | /advice show.")
registry.register("status", cmd_status, help_text="Show task counts, advice state and models.")
