# src/tasklist/ui/renderer.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from .widgets import Button, ItemList, ListItem

logger = logging.getLogger(__name__)

REMOVE_LABEL = "Remove"
REMOVE_CLASS = "remove-btn"


class TaskRenderer:
    """
    Turns task text into a ListItem with a wired "Remove" button.

    Clicking Remove detaches that exact item from the list, then removes the
    first stored task with the same text. With duplicate texts, the stored entry
    removed may belong to a different on-screen item.
    """

    def __init__(self, task_list: ItemList, storage: TaskRepo) -> None:
        self._task_list = task_list
        self._storage = storage

    def render(self, task: str) -> ListItem:
        remove_button = Button(label=REMOVE_LABEL, css_class=REMOVE_CLASS)
        item = ListItem(text=task, remove_button=remove_button)

        def _on_remove() -> None:
            self._task_list.remove_child(item)
            self._storage.remove_first(task)
            logger.info("Task removed: %r", task)

        remove_button.on_click = _on_remove
        return item
