# src/tasklist/storage/task_storage.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.ports import SlotStore

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "tasks"


class TaskStorage:
    """
    Task list persisted as a JSON array of strings in a single named slot.

    Reads never fail: an absent slot, invalid JSON, a non-array value or an array
    with non-string items all load as an empty list. Writes replace the slot.

    append/remove_first are load-modify-save and are not safe across concurrent
    writers; the app only ever has one (the console thread).
    """

    def __init__(self, slots: SlotStore, key: str = DEFAULT_SLOT_KEY) -> None:
        self._slots = slots
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[str]:
        raw = self._slots.get_item(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError):
            logger.info("Slot %r is not valid JSON; loading an empty task list.", self._key)
            return []
        if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
            logger.info("Slot %r is not an array of strings; loading an empty task list.", self._key)
            return []
        return data

    def save(self, tasks: Sequence[str]) -> None:
        self._slots.set_item(self._key, json.dumps(list(tasks)))

    def append(self, task: str) -> None:
        tasks = self.load()
        tasks.append(task)
        self.save(tasks)
        logger.debug("Task appended (total=%d): %r", len(tasks), task)

    def remove_first(self, task: str) -> None:
        """Remove the first stored occurrence of `task` (exact match). Absent -> nothing is written."""
        tasks = self.load()
        try:
            idx = tasks.index(task)
        except ValueError:
            logger.debug("remove_first: %r not stored; nothing to do.", task)
            return
        del tasks[idx]
        self.save(tasks)
        logger.debug("Task removed at index %d (total=%d): %r", idx, len(tasks), task)

    def clear(self) -> None:
        self._slots.remove_item(self._key)
