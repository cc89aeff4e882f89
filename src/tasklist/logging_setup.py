# src/tasklist/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME = "tasklist.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    stderr shares the terminal with the task list and the prompt:
    tasklist records pass (the handler level decides which), anything else
    (third-party, captured py.warnings) only at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasklist" or record.name.startswith("tasklist."):
            return True
        return record.levelno >= logging.ERROR


def _open_log_file(log_dir: Path, level: int, fmt: logging.Formatter) -> logging.Handler | None:
    """File handler under log_dir, or None if the directory cannot be created or written."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_dir / LOG_FILENAME), encoding="utf-8")
    except OSError as e:
        sys.stderr.write(f"[tasklist] file logging disabled ({log_dir}: {e})\n")
        return None
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path | None = ".local/tasklist",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Configure the root logger for a console session.

    - stderr: tasklist records at console_level (WARNING by default, so INFO
      chatter about adds/removes never interleaves with the printed list)
    - <log_dir>/tasklist.log: everything at file_level; skipped when log_dir is
      None or not writable, the app still runs without it

    Replaces any handlers already on the root logger. Returns the log file path
    or None when file logging is off.
    """
    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_dir is not None:
        fh = _open_log_file(Path(log_dir), file_level, fmt)
        if fh is not None:
            root.addHandler(fh)
            log_file = Path(log_dir) / LOG_FILENAME

    logging.captureWarnings(True)
    return log_file
