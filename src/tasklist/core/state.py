# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..storage.task_storage import TaskStorage
from ..ui.widgets import TaskPage
from .controller import TaskController


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: object

    storage: TaskStorage
    page: TaskPage
    controller: TaskController
