# src/tasklist/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import TaskFilter
from ..tasks.task_store import FilteredView, TaskListStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    store: TaskListStore

    # Process-local view selection (never persisted).
    task_filter: TaskFilter = TaskFilter.ALL
    query: str = ""

    # Ids in the order they were last shown, so commands can address tasks by position.
    shown_ids: list[str] = field(default_factory=list)

    lock: threading.RLock = field(default_factory=threading.RLock)

    def current_view(self) -> FilteredView:
        return self.store.filtered_view(self.task_filter, self.query)
