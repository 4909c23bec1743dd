# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .task_migration import OpaqueRecord, merge_records, split_records
from .task_models import StoreError, StoreParseError, StoreReadError, StoreWriteError, Task

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    JSON file task store.

    The whole list is read on every load and rewritten on every save:
    - missing file => empty list, no error
    - unreadable or malformed file => error is logged, empty list
    - records of unknown shape are hidden from callers but written back as-is
    - failed write => error is logged, previous file is left in place

    There is no locking; two processes writing the same file race and the last
    writer wins.
    """

    def __init__(self, path: str | Path = "todos.json") -> None:
        self._path = Path(path)
        # Unreadable records from the last load; written back on save.
        self._opaque: list[OpaqueRecord] = []
        logger.debug("JsonTaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Compatibility hook for shutdown (no open handles are kept)."""
        return

    # ---- low-level helpers ----

    def _read_raw(self) -> list[Any]:
        try:
            blob = self._path.read_bytes()
        except OSError as e:
            raise StoreReadError(f"cannot read {self._path}: {e}") from e

        # UnicodeDecodeError is a ValueError; very deep nesting hits RecursionError.
        try:
            data = json.loads(blob.decode("utf-8"))
        except (ValueError, RecursionError) as e:
            raise StoreParseError(f"malformed JSON in {self._path}: {e}") from e

        if not isinstance(data, list):
            raise StoreParseError(
                f"expected a JSON array in {self._path}, got {type(data).__name__}"
            )
        return data

    def _write_raw(self, records: list[Any]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(records, ensure_ascii=False, indent=2)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            raise StoreWriteError(f"cannot write {self._path}: {e}") from e

    # ---- public API ----

    def load(self) -> list[Task]:
        self._opaque = []
        if not self._path.exists():
            return []
        try:
            raw = self._read_raw()
        except StoreError as e:
            logger.error("Failed to load tasks: %s", e)
            return []
        tasks, self._opaque = split_records(raw)
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        try:
            self._write_raw(merge_records(tasks, self._opaque))
        except StoreError as e:
            logger.error("Failed to save tasks: %s", e)
            return False
        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)
        return True
