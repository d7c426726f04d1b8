# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

from tasklist.cli.bootstrap import create_initial_state, shutdown_state
from tasklist.storage.kv_store import InMemoryKeyValueStore
from tasklist.tasks.task_models import TaskFilter


def test_state_persists_across_restarts(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)
    state.store.add("Buy milk")
    state.store.add("Walk dog")
    shutdown_state(state)

    assert settings.store_path.exists()

    again = create_initial_state(settings=settings)
    assert [t.text for t in again.store.tasks] == ["Walk dog", "Buy milk"]
    # view selection is not persisted
    assert again.task_filter is TaskFilter.ALL
    assert again.query == ""


def test_injected_backend_is_used(settings: SimpleNamespace) -> None:
    kv = InMemoryKeyValueStore()
    state = create_initial_state(settings=settings, kv=kv)
    state.store.add("x")

    assert kv.get(settings.storage_key) is not None
    assert not settings.store_path.exists()
