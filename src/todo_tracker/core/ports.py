# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task operations.

Operations depend on this Protocol instead of the JSON store, which keeps the
storage swappable and lets tests run against an in-memory list.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list task storage: read everything, write everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> bool: ...
