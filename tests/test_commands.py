# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry, render_list, resolve_task_id
from tasklist.core.state import AppState
from tasklist.tasks.task_models import TaskFilter


def test_command_registry_routes_raw_argument_text(state: AppState) -> None:
    reg = CommandRegistry()
    calls: list[str] = []

    def handler(state, arg_text):
        calls.append(arg_text)
        return f"got:{arg_text}"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x   y") == "got:x   y"
    assert reg.handle(state, "/ALPHA") == "got:"
    assert calls == ["x   y", ""]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_positional_toggle(state: AppState) -> None:
    registry.handle(state, "/add Buy milk")
    out = registry.handle(state, "/add   Walk  dog ")

    assert out is not None
    assert "1. [ ] Walk  dog" in out
    assert "2. [ ] Buy milk" in out
    assert state.shown_ids == ["t2", "t1"]

    out = registry.handle(state, "/done 2")
    assert "2. [x] Buy milk" in (out or "")
    assert "1 active, 1 completed, 2 total" in (out or "")


def test_toggle_by_exact_id_and_unknown_target(state: AppState) -> None:
    state.store.add("a")

    registry.handle(state, "/done t1")
    assert state.store.get("t1").done is True

    assert "No such task" in (registry.handle(state, "/done 9") or "")
    assert "No such task" in (registry.handle(state, "/rm nope") or "")


def test_edit_and_edit_to_empty(state: AppState) -> None:
    state.store.add("draft")
    render_list(state)

    registry.handle(state, "/edit 1   final   version ")
    assert state.store.get("t1").text == "final   version"

    registry.handle(state, "/edit 1")
    assert len(state.store) == 0


def test_filter_search_clear_and_all(state: AppState) -> None:
    for text in ["Buy milk", "Buy bread", "Walk dog"]:
        state.store.add(text)
    state.store.toggle("t2")

    out = registry.handle(state, "/filter active") or ""
    assert state.task_filter is TaskFilter.ACTIVE
    assert "Tasks (Active):" in out
    assert "Buy bread" not in out

    out = registry.handle(state, "/search BUY") or ""
    assert state.shown_ids == ["t1"]
    assert "search: 'BUY'" in out

    registry.handle(state, "/search")
    registry.handle(state, "/filter all")
    assert state.query == ""
    assert state.shown_ids == ["t3", "t2", "t1"]

    registry.handle(state, "/all on")
    assert state.store.stats().active == 0
    registry.handle(state, "/clear")
    assert len(state.store) == 0

    assert "Usage" in (registry.handle(state, "/filter archived") or "")
    assert "Usage" in (registry.handle(state, "/all maybe") or "")


def test_stats_and_help(state: AppState) -> None:
    state.store.add("a")
    assert "Total: 1" in (registry.handle(state, "/stats") or "")
    help_text = registry.handle(state, "/help") or ""
    assert "/add" in help_text and "/filter" in help_text


def test_resolve_task_id_ignores_stale_positions(state: AppState) -> None:
    assert resolve_task_id(state, "1") is None
    state.store.add("a")
    assert resolve_task_id(state, "1") is None
    render_list(state)
    assert resolve_task_id(state, "1") == "t1"
    assert resolve_task_id(state, "0") is None
