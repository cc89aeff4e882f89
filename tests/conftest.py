# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.core.state import AppState
from tasklist.storage.task_storage import TaskStorage

from .fakes import CountingSlotStore, RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console loop.

    A SimpleNamespace rather than the real config keeps tests isolated from the
    developer's environment and .env file.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "local_storage.json",
        storage_key="tasks",
        blocking_alerts=False,
    )


@pytest.fixture()
def slots() -> CountingSlotStore:
    return CountingSlotStore()


@pytest.fixture()
def storage(slots: CountingSlotStore) -> TaskStorage:
    return TaskStorage(slots)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, slots: CountingSlotStore, notifier: RecordingNotifier) -> AppState:
    """AppState wired with in-memory slots and a recording notifier (tasks not loaded yet)."""
    return create_initial_state(notifier=notifier, settings=settings, slots=slots)
