# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

IdFactory = Callable[[], str]
# Returns a fresh, unique task id.

Clock = Callable[[], int]
# Returns "now" as epoch milliseconds.


class KeyValueStore(Protocol):
    """
    Durable (or in-memory) string key -> string value store.

    The task store persists its whole list as one JSON blob under one key,
    so backends never need to understand the payload.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...
    def close(self) -> None: ...
