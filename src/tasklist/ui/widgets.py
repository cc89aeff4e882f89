# src/tasklist/ui/widgets.py

"""
Minimal widget model for the task page.

Front ends (console today) read and drive these objects; the controller only
ever talks to widgets, never to a terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

KeyHandler = Callable[[str], None]
ClickHandler = Callable[[], None]

TASK_INPUT_ID = "task-input"
ADD_BUTTON_ID = "add-task-btn"
TASK_LIST_ID = "task-list"


@dataclass(slots=True)
class TextInput:
    element_id: str = TASK_INPUT_ID
    value: str = ""
    focused: bool = False
    on_key: KeyHandler | None = None

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def press(self, key: str) -> None:
        if self.on_key is not None:
            self.on_key(key)


@dataclass(slots=True)
class Button:
    label: str
    element_id: str | None = None
    css_class: str = ""
    on_click: ClickHandler | None = None

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click()


@dataclass(slots=True, eq=False)
class ListItem:
    """One rendered task. Compared by identity: duplicates on screen are distinct items."""

    text: str
    remove_button: Button


@dataclass(slots=True)
class ItemList:
    element_id: str = TASK_LIST_ID
    _children: list[ListItem] = field(default_factory=list)

    @property
    def items(self) -> list[ListItem]:
        return list(self._children)

    def append_child(self, item: ListItem) -> None:
        self._children.append(item)

    def remove_child(self, item: ListItem) -> None:
        for i, child in enumerate(self._children):
            if child is item:
                del self._children[i]
                return
        raise ValueError(f"{item!r} is not a child of #{self.element_id}")

    def texts(self) -> list[str]:
        return [c.text for c in self._children]

    def __len__(self) -> int:
        return len(self._children)


@dataclass(slots=True)
class TaskPage:
    task_input: TextInput
    add_button: Button
    task_list: ItemList


def build_page() -> TaskPage:
    return TaskPage(
        task_input=TextInput(),
        add_button=Button(label="Add Task", element_id=ADD_BUTTON_ID),
        task_list=ItemList(),
    )
