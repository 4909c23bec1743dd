# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging and AppState, then either:
- runs one scripted command when arguments are given (store in the cwd), or
- starts the interactive menu when there are none (store in the home dir).

Exit status is 0 on every path; problems are reported as text.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import RunMode, get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        store = getattr(state, "task_store", None)
        if store is not None and hasattr(store, "close"):
            store.close()
    except Exception:
        logger.debug("Task store close failed.", exc_info=True)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if getattr(settings, "log_to_file", False) else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    mode = RunMode.SCRIPTED if argv else RunMode.INTERACTIVE
    state = create_initial_state(settings=settings, mode=mode)
    logger.debug("Starting %s in %s mode", settings.app_name, mode)

    try:
        if mode == RunMode.SCRIPTED:
            print(command_registry.handle(state, list(argv)))
        else:
            run_console_loop(state)
    except Exception:
        logger.exception("Unhandled error.")
    finally:
        _shutdown(state)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
