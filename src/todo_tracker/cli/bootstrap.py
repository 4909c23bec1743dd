# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the store file for the run mode,
- wires the concrete JSON store into AppState.
"""

from __future__ import annotations

import logging

from ..config import RunMode, get_settings, resolve_store_path
from ..core.state import AppState
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, mode: RunMode = RunMode.SCRIPTED) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store_path = resolve_store_path(settings, mode)
    logger.debug("Using task store %s (mode=%s)", store_path, mode)

    return AppState(
        settings=settings,
        task_store=JsonTaskStore(store_path),
        mode=mode,
    )
