# tests/test_commands.py

from __future__ import annotations

from priotask.cli.commands import CommandRegistry, registry
from priotask.core.state import AppState


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a", aliases=["aa"])
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x y") == "h2:x,y"
    assert reg.handle(state, "/AA") == "h2:"
    assert reg.handle(state, "/b", emit=notes.append) == "h3"
    assert called == {"h2": 2, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_rm_flow(state: AppState) -> None:
    out = registry.handle(state, "/add Task A | 2d | High")
    assert out is not None and out.startswith("Added: Task A (High)")
    registry.handle(state, "/add Task B | 1d | low")

    listing = registry.handle(state, "/list") or ""
    lines = listing.splitlines()
    assert lines[0] == "Active (2):"
    assert "#1 [ ] Task A (High" in lines[1]
    assert "#2 [ ] Task B (Low" in lines[2]

    assert registry.handle(state, "/done #1") == "Completed: Task A"
    lines = (registry.handle(state, "/list") or "").splitlines()
    assert lines[0] == "Active (1):"
    assert "#1 [ ] Task B" in lines[1]
    assert lines[2] == "Completed (1):"
    assert "#2 [x] Task A" in lines[3]

    assert registry.handle(state, "/rm #1") == "Deleted: Task B"
    lines = (registry.handle(state, "/list") or "").splitlines()
    assert lines[:2] == ["Active (0):", "  (none)"]
    assert lines[2] == "Completed (1):"


def test_add_reports_validation_errors(state: AppState) -> None:
    out = registry.handle(state, "/add ab | | urgent") or ""

    assert out.startswith("Task not added:")
    assert "name:" in out and "end_time:" in out and "priority:" in out
    assert state.task_store.count_tasks() == 0
    assert "Usage" in (registry.handle(state, "/add only a name") or "")


def test_done_and_rm_with_unknown_ref(state: AppState) -> None:
    assert "No task matches" in (registry.handle(state, "/done #9") or "")
    assert "No task matches" in (registry.handle(state, "/rm nope") or "")
    assert "Usage" in (registry.handle(state, "/done") or "")
    assert "Usage" in (registry.handle(state, "/rm") or "")


def test_advice_inline_without_runner(state: AppState, llm) -> None:
    registry.handle(state, "/add Write report | 1d | High")

    out = registry.handle(state, "/advice") or ""

    assert out == "Advice:\nStart with the report."
    assert "Write report" in llm.calls[0][0][0]["content"]
    assert registry.handle(state, "/advice show") == out
    assert "1 requested" in (registry.handle(state, "/status") or "")


def test_help_lists_exit(state: AppState) -> None:
    out = registry.handle(state, "/help") or ""

    assert "/add" in out
    assert "/exit" in out


def test_add_with_utc_offset_deadline(state: AppState) -> None:
    registry.handle(state, "/add Plain one | 1d | High")

    out = registry.handle(state, "/add Aware one | 2026-10-21T18:00Z | High") or ""

    assert out.startswith("Added: Aware one")
    assert state.task_store.count_tasks() == 2
    assert all(t.end_time.tzinfo is None for t in state.task_store.all_tasks())
