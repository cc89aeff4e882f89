# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete implementations.
This keeps the slot backend and the front end swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol


class SlotStore(Protocol):
    """
    Persistent key-value slots holding strings (a local counterpart of browser localStorage).

    set_item replaces the whole slot; get_item returns None for an absent key.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskRepo(Protocol):
    """Ordered list of task strings kept in one persisted slot."""

    def load(self) -> list[str]: ...
    def save(self, tasks: Sequence[str]) -> None: ...
    def append(self, task: str) -> None: ...
    def remove_first(self, task: str) -> None: ...


class Notifier(Protocol):
    """Blocking, user-facing notice (the front end decides how to show it)."""

    def alert(self, message: str) -> None: ...
