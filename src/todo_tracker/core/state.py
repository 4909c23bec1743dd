# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import RunMode
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in shells and commands.
    settings: object

    task_store: TaskRepo
    mode: RunMode = RunMode.SCRIPTED

    @property
    def uppercase_titles(self) -> bool:
        return bool(getattr(self.settings, "uppercase_titles", False))

    @property
    def newest_first(self) -> bool:
        return bool(getattr(self.settings, "newest_first", False))
