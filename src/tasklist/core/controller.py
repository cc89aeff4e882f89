# src/tasklist/core/controller.py

"""
Task controller: user events -> storage + rendering.

Flow:
- load_tasks() once at startup renders every stored task without saving it again
- add-button click / Enter in the input -> add_task(persist=True) with the live input value
- per-item Remove buttons are wired by the renderer
"""

from __future__ import annotations

import logging

from ..ui.renderer import TaskRenderer
from ..ui.widgets import ListItem, TaskPage
from .ports import Notifier, TaskRepo

logger = logging.getLogger(__name__)

EMPTY_TASK_MESSAGE = "Please enter a task"
SUBMIT_KEYS = frozenset({"Enter", "Return"})


class TaskController:
    def __init__(
        self,
        *,
        page: TaskPage,
        storage: TaskRepo,
        notifier: Notifier,
        renderer: TaskRenderer | None = None,
    ) -> None:
        self.page = page
        self.storage = storage
        self.notifier = notifier
        self.renderer = renderer or TaskRenderer(page.task_list, storage)

    def bind(self) -> None:
        """Attach event handlers to the page widgets."""
        self.page.add_button.on_click = self._on_add_clicked
        self.page.task_input.on_key = self._on_input_key

    def _on_add_clicked(self) -> None:
        self.add_task(persist=True)

    def _on_input_key(self, key: str) -> None:
        if key in SUBMIT_KEYS:
            self.add_task(persist=True)

    def add_task(self, text: str | None = None, *, persist: bool) -> ListItem | None:
        """
        Render one task and optionally persist it.

        text=None reads the current input value. Text that trims to empty shows
        the blocking notice and changes nothing. Returns the new item, or None
        if the input was rejected.
        """
        task_input = self.page.task_input
        raw = text if isinstance(text, str) else task_input.value
        task = raw.strip()

        if not task:
            logger.debug("Rejected empty task input.")
            self.notifier.alert(EMPTY_TASK_MESSAGE)
            return None

        item = self.renderer.render(task)
        self.page.task_list.append_child(item)

        if persist:
            self.storage.append(task)
            logger.info("Task added: %r", task)

        task_input.value = ""
        task_input.focus()
        return item

    def load_tasks(self) -> None:
        stored = self.storage.load()
        for task in stored:
            self.add_task(task, persist=False)
        logger.info("Loaded %d stored task(s).", len(stored))

    def remove_at(self, position: int) -> str:
        """Click the Remove button of the item at 1-based `position`; returns its text."""
        items = self.page.task_list.items
        if position < 1 or position > len(items):
            raise IndexError(f"no task #{position} (list has {len(items)})")
        item = items[position - 1]
        item.remove_button.click()
        return item.text
