# tests/test_console.py

from __future__ import annotations

import builtins

import pytest

from tasklist.connectors.console_connector import handle_line, run_console_loop
from tasklist.core.state import AppState


def test_plain_text_adds_a_task(state: AppState) -> None:
    out = handle_line(state, "  Water plants ")
    assert state.store.tasks[0].text == "Water plants"
    assert "1. [ ] Water plants" in (out or "")


def test_blank_line_is_ignored(state: AppState) -> None:
    assert handle_line(state, "   ") is None
    assert len(state.store) == 0


def test_crashing_handler_is_reported(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.store, "add", boom)
    assert handle_line(state, "anything") == "Internal error while handling a command."


def test_console_loop_runs_until_exit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    lines = iter(["Buy milk", "/done 1", "/exit", "never reached"])
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(lines))

    run_console_loop(state)

    assert [t.text for t in state.store.tasks] == ["Buy milk"]
    assert state.store.tasks[0].done is True
    assert "[x] Buy milk" in capsys.readouterr().out


def test_console_loop_stops_on_eof(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    def eof(_prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", eof)
    run_console_loop(state)
