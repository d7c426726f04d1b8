# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.storage.kv_store import InMemoryKeyValueStore
from tasklist.tasks.task_store import TaskListStore

from .fakes import ManualClock, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="INFO",
        console_enabled=False,
        http_enabled=False,
        http_mode="file",
        http_host="127.0.0.1",
        http_port=0,
        asset_path=tmp_path / "index.html",
        data_dir=tmp_path / "data",
        storage_backend="json",
        store_path=tmp_path / "data" / "todos.json",
        storage_key="todos.v1",
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def store(kv: InMemoryKeyValueStore) -> TaskListStore:
    """Store with deterministic ids ("t1", "t2", ...) and a fixed clock."""
    return TaskListStore(kv, id_factory=SequentialIds(), clock=ManualClock())


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskListStore) -> AppState:
    return AppState(settings=settings, store=store)
