# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class TaskError(RuntimeError):
    """Base error for the task subsystem."""


class TaskValidationError(TaskError, ValueError):
    """Operator input was rejected before anything was mutated."""


class EmptyValueError(TaskValidationError):
    pass


class InvalidIndexError(TaskValidationError):
    def __init__(self, message: str = "invalid index") -> None:
        super().__init__(message)


class StoreError(TaskError):
    pass


class StoreReadError(StoreError):
    pass


class StoreParseError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class TaskField(StrEnum):
    """Fields that can be edited after a task is created."""

    TITLE = "title"
    DESCRIPTION = "description"
    STATE = "state"

    @classmethod
    def parse(cls, raw: str | None) -> TaskField:
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            names = ", ".join(f.value for f in cls)
            raise TaskValidationError(f"unknown field '{raw}' (expected one of: {names})") from None


@dataclass(slots=True)
class Task:
    title: str
    description: str = ""
    completed: bool = False
    # Free-form label; None means the stored record never had one.
    state: str | None = None
    # Keys we do not know about, written back untouched.
    extra: dict[str, Any] = field(default_factory=dict)

    def get_field(self, name: TaskField) -> str:
        value = getattr(self, name.value)
        return "" if value is None else str(value)

    def set_field(self, name: TaskField, value: str) -> None:
        setattr(self, name.value, value)

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = dict(self.extra)
        record["title"] = self.title
        record["description"] = self.description
        record["completed"] = self.completed
        if self.state is not None:
            record["state"] = self.state
        return record
