# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import format_task_list, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]
LineWriter = Callable[[str], None]

EXIT_COMMANDS = ("/exit", "/quit")


class ConsoleNotifier:
    """
    Console version of a modal alert: print the message, then (if blocking)
    wait for Enter before handing control back.
    """

    def __init__(
        self,
        *,
        read_line: LineReader | None = None,
        write: LineWriter | None = None,
        blocking: bool = True,
    ) -> None:
        self._read_line = read_line
        self._write = write
        self._blocking = blocking

    def alert(self, message: str) -> None:
        write = self._write or print
        write(f"[!] {message}")
        if not self._blocking:
            return
        try:
            (self._read_line or input)("    (press Enter to continue) ")
        except EOFError:
            # Nothing left to dismiss with; the main loop sees EOF on its next read.
            write("")


def run_console_loop(
    state: AppState,
    *,
    read_line: LineReader | None = None,
    write: LineWriter | None = None,
) -> None:
    """
    Interactive loop over the task page.

    Each plain line is typed into the task input followed by Enter, so it goes
    through the same add flow as the add button. Lines starting with "/" are commands.
    """
    read_line = read_line or input
    write = write or print
    page = state.page
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))
    logger.info("Console connector started.")

    write(f"[{app_name}] Type a task and press Enter. Use /help for commands, /exit to quit.")
    write(format_task_list(page.task_list))

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        command = line.strip()
        if command.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        # Ctrl+C inside an event (e.g. at a blocking notice) quits like it does at the prompt.
        try:
            if command.startswith("/"):
                _run_command(state, command, write)
            else:
                _submit_line(state, line, write)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

    logger.info("Console connector finished.")


def _run_command(state: AppState, command: str, write: LineWriter) -> None:
    try:
        reply = command_registry.handle(state, command, emit=write)
    except Exception:
        logger.exception("Command handler crashed.")
        reply = "Internal error while handling a command."
    if reply:
        write(reply)


def _submit_line(state: AppState, line: str, write: LineWriter) -> None:
    page = state.page
    before = len(page.task_list)
    page.task_input.value = line
    try:
        page.task_input.press("Enter")
    except Exception:
        logger.exception("Adding a task from the console failed.")
        write("Internal error while adding the task; it may not have been saved.")
    if len(page.task_list) != before:
        write(format_task_list(page.task_list))
