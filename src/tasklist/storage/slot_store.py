# src/tasklist/storage/slot_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileSlotStore:
    """
    File-backed key-value slots.

    All slots live in one JSON object file: {"<key>": "<string value>", ...}.

    Writes:
    - serialize the full object to a sibling .tmp file
    - os.replace() it over the real file, so a reader never sees a half-written slot
    - JSON is ASCII-escaped, so any str (lone surrogates included) round-trips
    - a failed write removes the .tmp file and re-raises

    A missing file means "no slots". A corrupt file is treated the same way
    (logged once per read) and is replaced on the next write.
    """

    def __init__(self, path: str | Path = "local_storage.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileSlotStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError):
            logger.warning("Slot file %s is unreadable; treating it as empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Slot file %s does not hold a JSON object; treating it as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def _write_all(self, slots: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(slots, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        slots = self._read_all()
        slots[key] = value
        self._write_all(slots)
        logger.debug("Slot %r written (%d chars) to %s", key, len(value), self._path)

    def remove_item(self, key: str) -> None:
        slots = self._read_all()
        if key not in slots:
            return
        del slots[key]
        self._write_all(slots)
        logger.debug("Slot %r removed from %s", key, self._path)


class InMemorySlotStore:
    """Dict-backed slots. Nothing survives the process; used by tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove_item(self, key: str) -> None:
        self._slots.pop(key, None)
