# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from todo_tracker.tasks.task_models import Task


class MemoryTaskRepo:
    """
    In-memory TaskRepo for operation tests.

    - Hands out copies so callers cannot mutate the stored list by accident
    - Counts writes for "no write happened" assertions
    - Can be told to fail writes, like a full disk would
    """

    def __init__(self, tasks: list[Task] | None = None, *, fail_writes: bool = False) -> None:
        self.tasks: list[Task] = list(tasks or [])
        self.fail_writes = fail_writes
        self.saves = 0

    def load(self) -> list[Task]:
        return [replace(t, extra=dict(t.extra)) for t in self.tasks]

    def save(self, tasks: Sequence[Task]) -> bool:
        self.saves += 1
        if self.fail_writes:
            return False
        self.tasks = [replace(t, extra=dict(t.extra)) for t in tasks]
        return True
