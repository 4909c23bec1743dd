# src/todo_tracker/tasks/task_migration.py

"""
Normalization of stored task records.

Older files stored tasks as {"text": ..., "completed": ...}. Every record is
classified into a known shape first, then converted by the matching branch, so
there is exactly one place that knows about each layout.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .task_models import Task

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"title", "description", "completed", "state"})
_TRUE_STRINGS = frozenset({"true", "yes", "y", "1", "on", "x"})


@dataclass(frozen=True, slots=True)
class OpaqueRecord:
    """A stored record we cannot read as a task, kept verbatim for writing back."""

    anchor: int  # number of tasks stored before it
    raw: Any


class RecordShape(StrEnum):
    LEGACY_TEXT = "legacy_text"  # {"text", "completed"}
    CURRENT = "current"  # {"title", "description", "completed", ["state"]}
    UNKNOWN = "unknown"


def classify_record(raw: Any) -> RecordShape:
    if not isinstance(raw, Mapping):
        return RecordShape.UNKNOWN
    if "title" in raw:
        return RecordShape.CURRENT
    if "text" in raw:
        return RecordShape.LEGACY_TEXT
    return RecordShape.UNKNOWN


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_completed(value: Any) -> bool:
    # Hand-edited files may carry "false"/"true" strings; only real booleans
    # and recognised true strings count as completed.
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


def _from_legacy(raw: Mapping[str, Any]) -> Task:
    extra = {k: v for k, v in raw.items() if k not in _KNOWN_KEYS and k != "text"}
    return Task(
        title=_as_text(raw.get("text")),
        description="",
        completed=_as_completed(raw.get("completed", False)),
        state="",
        extra=extra,
    )


def _from_current(raw: Mapping[str, Any]) -> Task:
    extra = {k: v for k, v in raw.items() if k not in _KNOWN_KEYS}
    state = raw.get("state")
    return Task(
        title=_as_text(raw.get("title")),
        description=_as_text(raw.get("description")),
        completed=_as_completed(raw.get("completed", False)),
        state=None if state is None else _as_text(state),
        extra=extra,
    )


def normalize_record(raw: Any) -> Task | None:
    """Convert one stored record into a Task; None for shapes we cannot read."""
    shape = classify_record(raw)
    if shape == RecordShape.LEGACY_TEXT:
        return _from_legacy(raw)
    if shape == RecordShape.CURRENT:
        return _from_current(raw)
    return None


def split_records(raw_records: Iterable[Any]) -> tuple[list[Task], list[OpaqueRecord]]:
    """
    Normalize a sequence of stored records, preserving order.

    Records of unknown shape are not turned into tasks. They come back as
    OpaqueRecord entries, anchored to the number of tasks that preceded them,
    so a later save can put them back where they were.
    """
    tasks: list[Task] = []
    opaque: list[OpaqueRecord] = []
    migrated = 0
    for pos, raw in enumerate(raw_records):
        shape = classify_record(raw)
        task = normalize_record(raw)
        if task is None:
            logger.warning("Keeping unreadable task record at position %d untouched: %r", pos, raw)
            opaque.append(OpaqueRecord(anchor=len(tasks), raw=raw))
            continue
        if shape == RecordShape.LEGACY_TEXT:
            migrated += 1
        tasks.append(task)

    if migrated:
        logger.info("Task migration: converted %d legacy record(s)", migrated)
    return tasks, opaque


def migrate_records(raw_records: Iterable[Any]) -> list[Task]:
    """
    Tasks readable from a sequence of stored records.

    Idempotent: feeding the serialized output back in yields equal tasks.
    """
    tasks, _ = split_records(raw_records)
    return tasks


def merge_records(tasks: Sequence[Task], opaque: Sequence[OpaqueRecord]) -> list[Any]:
    """Serialize tasks, re-inserting opaque records at their anchors."""
    pending = sorted(opaque, key=lambda o: o.anchor)
    out: list[Any] = []
    i = 0
    for pos, task in enumerate(tasks):
        while i < len(pending) and pending[i].anchor <= pos:
            out.append(pending[i].raw)
            i += 1
        out.append(task.to_record())
    out.extend(o.raw for o in pending[i:])
    return out
