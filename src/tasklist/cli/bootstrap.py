# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the slot store, task storage, page widgets and controller into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskController
from ..core.ports import Notifier, SlotStore
from ..core.state import AppState
from ..storage.slot_store import JsonFileSlotStore
from ..storage.task_storage import TaskStorage
from ..ui.widgets import build_page

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    notifier: Notifier,
    settings=None,
    slots: SlotStore | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and slots are injectable so tests can run against tmp paths or an
    in-memory slot store. Tasks are NOT loaded here; call
    state.controller.load_tasks() once the front end is ready.
    """
    if settings is None:
        settings = get_settings()

    if slots is None:
        _ensure_local_dirs(settings)
        slots = JsonFileSlotStore(settings.storage_path)

    storage = TaskStorage(slots, key=settings.storage_key)
    page = build_page()
    controller = TaskController(page=page, storage=storage, notifier=notifier)
    controller.bind()

    logger.debug("State created (slot key=%r).", settings.storage_key)
    return AppState(settings=settings, storage=storage, page=page, controller=controller)
