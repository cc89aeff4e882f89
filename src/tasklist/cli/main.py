# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, renders the stored tasks, then runs the
console loop in the main thread until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (storage=%s key=%s)...", settings.app_name, settings.storage_path, settings.storage_key)

    notifier = ConsoleNotifier(blocking=settings.blocking_alerts)
    state = create_initial_state(notifier=notifier, settings=settings)
    state.controller.load_tasks()

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
