# src/tasklist/tasks/task_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """
    Named completion-status filters for the task list.

    Notes:
    - the selected filter is UI state; it is never persisted with the tasks.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.done
        if self is TaskFilter.COMPLETED:
            return task.done
        return True

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        """Lenient lookup by value or label; unknown input raises ValueError."""
        if not raw:
            return cls.ALL
        key = raw.strip().lower()
        for f in cls:
            if key == f.value:
                return f
        raise ValueError(f"unknown filter: {raw!r}")


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    done: bool
    created_at: int  # epoch milliseconds

    def matches_query(self, query: str) -> bool:
        q = query.strip().lower()
        return not q or q in self.text.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "done": self.done,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from its persisted JSON object.

        Raises ValueError if the object does not have the persisted shape.
        """
        if not isinstance(raw, dict):
            raise ValueError("task entry is not an object")

        task_id = raw.get("id")
        text = raw.get("text")
        done = raw.get("done")
        created_at = raw.get("createdAt")

        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"task {task_id}: text must be a non-empty string")
        if not isinstance(done, bool):
            raise ValueError(f"task {task_id}: done must be a boolean")
        # bool is an int subclass; reject it explicitly.
        if isinstance(created_at, bool) or not isinstance(created_at, (int, float)):
            raise ValueError(f"task {task_id}: createdAt must be a number")
        if isinstance(created_at, float) and not math.isfinite(created_at):
            raise ValueError(f"task {task_id}: createdAt must be finite")

        return cls(id=task_id, text=text, done=done, created_at=int(created_at))


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    active: int
    completed: int
