# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker import config
from todo_tracker.config import RunMode
from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import JsonTaskStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the real home directory and cached settings."""
    for name in (
        "TODO_STORE_PATH",
        "TODO_STORE_FILENAME",
        "TODO_UPPERCASE_TITLES",
        "TODO_NEWEST_FIRST",
        "TODO_LOG_TO_FILE",
        "TODO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(config, "_SETTINGS", None)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """main() reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the shells.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        log_to_file=False,
        store_path=tmp_path / "todos.json",
        store_filename="todos.json",
        uppercase_titles=False,
        newest_first=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> JsonTaskStore:
    return JsonTaskStore(settings.store_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: JsonTaskStore) -> AppState:
    """
    AppState wired with a real JSON store in tmp_path.

    NOTE: the file store is kept here because the on-disk format is part of
    what the shell tests check.
    """
    return AppState(settings=settings, task_store=store, mode=RunMode.SCRIPTED)
