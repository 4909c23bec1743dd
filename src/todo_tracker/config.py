# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk besides .env at import time.
- The store location depends on the run mode (interactive vs scripted).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"
DEFAULT_STORE_FILENAME = "todos.json"


class RunMode(StrEnum):
    """How the process was started; decides where the store lives."""

    INTERACTIVE = "interactive"  # menu loop, store under the home directory
    SCRIPTED = "scripted"  # one-shot command, store under the cwd


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Store ----
    store_path: Path | None
    store_filename: str

    # ---- Behaviour ----
    uppercase_titles: bool
    newest_first: bool

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(override=False)

        store_filename = _env(_k("STORE_FILENAME"), DEFAULT_STORE_FILENAME).strip()

        return Settings(
            app_name=_env(_k("APP_NAME"), "todo"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            data_dir=_env_path(_k("DATA_DIR"), Path.home() / ".local" / "todo"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), False),
            store_path=_env_optional_path(_k("STORE_PATH")),
            store_filename=store_filename or DEFAULT_STORE_FILENAME,
            uppercase_titles=_env_bool(_k("UPPERCASE_TITLES"), False),
            newest_first=_env_bool(_k("NEWEST_FIRST"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def resolve_store_path(settings, mode: RunMode) -> Path:
    """
    Pick the JSON file for a run mode.

    An explicit store_path always wins. Otherwise interactive runs use the home
    directory and scripted runs use the current working directory.
    """
    explicit = getattr(settings, "store_path", None)
    if explicit:
        return Path(explicit)

    filename = getattr(settings, "store_filename", None) or DEFAULT_STORE_FILENAME
    if mode == RunMode.INTERACTIVE:
        return Path.home() / filename
    return Path.cwd() / filename
