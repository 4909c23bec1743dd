# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_tracker.config import RunMode, Settings, get_settings, resolve_store_path


def test_defaults(tmp_path: Path) -> None:
    s = Settings.from_env()
    assert s.store_path is None
    assert s.store_filename == "todos.json"
    assert s.uppercase_titles is False
    assert s.newest_first is False
    assert s.log_level == "WARNING"
    assert s.data_dir == tmp_path / "data"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_STORE_PATH", str(tmp_path / "custom.json"))
    monkeypatch.setenv("TODO_UPPERCASE_TITLES", "yes")
    monkeypatch.setenv("TODO_NEWEST_FIRST", "1")
    monkeypatch.setenv("TODO_LOG_TO_FILE", "off")

    s = Settings.from_env()
    assert s.store_path == tmp_path / "custom.json"
    assert s.uppercase_titles is True
    assert s.newest_first is True
    assert s.log_to_file is False


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_store_path_depends_on_mode(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    s = Settings.from_env()
    assert resolve_store_path(s, RunMode.INTERACTIVE) == tmp_path / "home" / "todos.json"
    assert resolve_store_path(s, RunMode.SCRIPTED) == workdir / "todos.json"

    monkeypatch.setenv("TODO_STORE_PATH", str(tmp_path / "explicit.json"))
    s = Settings.from_env()
    assert resolve_store_path(s, RunMode.INTERACTIVE) == tmp_path / "explicit.json"
    assert resolve_store_path(s, RunMode.SCRIPTED) == tmp_path / "explicit.json"
