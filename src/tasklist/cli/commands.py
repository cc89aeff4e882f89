# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..ui.widgets import ItemList

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" when there is nothing to say) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (also /quit, Ctrl+D).")
        lines.append("Any other line is added as a task.")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_list(task_list: ItemList) -> str:
    if not len(task_list):
        return "(no tasks)"
    lines = []
    for i, item in enumerate(task_list.items, start=1):
        lines.append(f"{i:>3}. {item.text}  [{item.remove_button.label}: /rm {i}]")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text>  -> type text into the input and click the add button
    /add         -> click the add button with an empty input (shows the notice)
    """
    page = state.page
    page.task_input.value = " ".join(args)
    before = len(page.task_list)
    page.add_button.click()
    if len(page.task_list) == before:
        return ""
    return format_task_list(page.task_list)


def cmd_rm(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /rm <n>  -> click the Remove button of task number n (as shown by /list)
    """
    if len(args) != 1:
        return "Usage: /rm <n>"

    raw = args[0].rstrip(".")
    if not raw.isdecimal():
        return "Invalid task number."

    try:
        text = state.controller.remove_at(int(raw))
    except IndexError:
        return f"No task #{raw}."

    if emit is not None:
        emit(f"Removed: {text}")
    return format_task_list(state.page.task_list)


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state.page.task_list)


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    path = getattr(settings, "storage_path", "(in memory)")
    return (
        "Status:\n"
        f"  Storage file: {path}\n"
        f"  Slot key: {state.storage.key}\n"
        f"  Stored tasks: {len(state.storage.load())}\n"
        f"  Shown tasks: {len(state.page.task_list)}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("rm", cmd_rm, help_text="Remove task number n: /rm <n>.", aliases=["remove", "del"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show storage location and task counts.")
