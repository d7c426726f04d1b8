# src/tasklist/tasks/task_store.py

from __future__ import annotations

import json
import logging
import random
import threading
import time
import uuid
from collections.abc import Callable, Iterator
from dataclasses import replace

from ..core.ports import Clock, IdFactory, KeyValueStore
from .task_models import Task, TaskFilter, TaskStats

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos.v1"

TaskList = tuple[Task, ...]


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def new_task_id() -> str:
    """Random UUID; falls back to timestamp + random suffix if the OS has no entropy source."""
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return f"t_{now_ms()}_{random.getrandbits(48):012x}"


def encode_tasks(tasks: TaskList) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def decode_tasks(blob: str) -> TaskList:
    """
    Parse a persisted JSON array of tasks.

    Raises ValueError (json.JSONDecodeError included) if the blob does not
    have the persisted shape. Duplicate ids keep their first occurrence.
    """
    data = json.loads(blob)
    if not isinstance(data, list):
        raise ValueError("persisted task list is not a JSON array")

    out: list[Task] = []
    seen: set[str] = set()
    for raw in data:
        task = Task.from_dict(raw)
        if task.id in seen:
            logger.warning("Dropping duplicate task id=%s from persisted list.", task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return tuple(out)


class FilteredView:
    """
    Lazy, restartable, read-only view over a task list snapshot.

    Each iteration re-applies the filter and the query to the snapshot the
    view was created from; later store mutations are not visible.
    """

    __slots__ = ("_tasks", "task_filter", "query")

    def __init__(self, tasks: TaskList, task_filter: TaskFilter, query: str) -> None:
        self._tasks = tasks
        self.task_filter = task_filter
        self.query = query

    def __iter__(self) -> Iterator[Task]:
        for t in self._tasks:
            if self.task_filter.matches(t) and t.matches_query(self.query):
                yield t

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def ids(self) -> list[str]:
        return [t.id for t in self]


class TaskListStore:
    """
    Canonical in-memory task list, persisted to a key-value store after every mutation.

    Ordering: newest first (add prepends).

    Failure policy:
    - unreadable / missing blob on load -> empty list
    - failed write -> logged and dropped, memory stays authoritative
    - unknown id on toggle/remove/edit -> list unchanged (snapshot still rewritten)

    Thread-safety:
    - mutations are serialized by one lock
    - the list is an immutable tuple swapped atomically, so queries read a
      consistent snapshot without locking
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        id_factory: IdFactory = new_task_id,
        clock: Clock = now_ms,
    ) -> None:
        self._kv = kv
        self._key = key
        self._id_factory = id_factory
        self._clock = clock
        self._lock = threading.RLock()
        self._tasks: TaskList = ()
        self.load()
        logger.info("TaskListStore ready key=%s total=%s", self._key, len(self._tasks))

    # ---- persistence ----

    def close(self) -> None:
        """Release the key-value backend."""
        self._kv.close()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> TaskList:
        """Reload from the key-value store; any failure yields an empty list."""
        with self._lock:
            self._tasks = self._read()
            return self._tasks

    def _read(self) -> TaskList:
        try:
            blob = self._kv.get(self._key)
        except Exception:
            logger.warning("Failed to read task list key=%s; starting empty.", self._key, exc_info=True)
            return ()

        if blob is None:
            return ()

        try:
            return decode_tasks(blob)
        except (ValueError, TypeError, OverflowError, RecursionError) as e:
            logger.warning("Corrupt task list under key=%s (%s); starting empty.", self._key, e)
            return ()

    def _persist(self) -> None:
        try:
            self._kv.set(self._key, encode_tasks(self._tasks))
        except Exception as e:
            logger.warning("Failed to persist task list key=%s: %s", self._key, e)
            logger.debug("Persist failure details.", exc_info=True)

    def _commit(self, new_tasks: TaskList) -> TaskList:
        # Caller holds the lock. Writes even when the list is unchanged.
        self._tasks = new_tasks
        self._persist()
        return self._tasks

    def _mutate(self, fn: Callable[[TaskList], TaskList]) -> TaskList:
        with self._lock:
            return self._commit(fn(self._tasks))

    # ---- queries ----

    @property
    def tasks(self) -> TaskList:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def filtered_view(self, task_filter: TaskFilter = TaskFilter.ALL, query: str = "") -> FilteredView:
        return FilteredView(self._tasks, task_filter, query)

    def stats(self) -> TaskStats:
        tasks = self._tasks
        total = len(tasks)
        completed = sum(1 for t in tasks if t.done)
        return TaskStats(total=total, active=total - completed, completed=completed)

    # ---- mutations ----

    def add(self, raw_text: str) -> TaskList:
        text = raw_text.strip()
        if not text:
            return self._tasks

        with self._lock:
            task = Task(id=self._id_factory(), text=text, done=False, created_at=self._clock())
            logger.debug("Task added id=%s", task.id)
            return self._commit((task, *self._tasks))

    def toggle(self, task_id: str) -> TaskList:
        return self._mutate(
            lambda tasks: tuple(replace(t, done=not t.done) if t.id == task_id else t for t in tasks)
        )

    def remove(self, task_id: str) -> TaskList:
        return self._mutate(lambda tasks: tuple(t for t in tasks if t.id != task_id))

    def edit(self, task_id: str, new_raw_text: str) -> TaskList:
        text = new_raw_text.strip()
        if not text:
            return self.remove(task_id)

        return self._mutate(
            lambda tasks: tuple(replace(t, text=text) if t.id == task_id else t for t in tasks)
        )

    def clear_completed(self) -> TaskList:
        return self._mutate(lambda tasks: tuple(t for t in tasks if not t.done))

    def toggle_all(self, done: bool) -> TaskList:
        done = bool(done)
        return self._mutate(lambda tasks: tuple(replace(t, done=done) for t in tasks))
