# src/todo_tracker/connectors/console_connector.py

"""
Interactive menu over stdin/stdout.

Every cycle re-reads the store, redraws the list, waits for a choice and runs
one task operation. Positions are recomputed on each redraw.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EMPTY_LIST_TEXT, format_task_line, parse_position
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Task, TaskField, TaskValidationError

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MAIN_MENU = "[l] list  [a] add  [s] select task  [q] exit"
TASK_MENU = "[t] toggle  [e] edit field  [d] delete  [b] back"


class _ExitLoop(Exception):
    pass


def _numbered(state: AppState, tasks: list[Task]) -> list[tuple[int, Task]]:
    rows = list(enumerate(tasks, start=1))
    if state.newest_first:
        rows.reverse()
    return rows


def _render(state: AppState, write: Writer) -> list[Task]:
    tasks = task_api.list_tasks(state.task_store)
    app_name = str(getattr(state.settings, "app_name", "todo"))
    write(f"--- {app_name.upper()}: TASKS ---")
    if not tasks:
        write(EMPTY_LIST_TEXT)
    for pos, task in _numbered(state, tasks):
        write(format_task_line(pos, task))
    return tasks


def _ask(read: Reader, prompt: str) -> str:
    try:
        return read(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        raise _ExitLoop() from None


def _add(state: AppState, read: Reader, write: Writer) -> None:
    title = _ask(read, "Title: ")
    description = _ask(read, "Description (optional): ")
    task = task_api.add_task(
        state.task_store, title, description, uppercase=state.uppercase_titles
    )
    write(f"Added: {task.title}")


def _edit(state: AppState, index: int, read: Reader, write: Writer) -> None:
    names = "/".join(f.value for f in TaskField)
    field = TaskField.parse(_ask(read, f"Field ({names}): "))
    value = _ask(read, f"New {field.value}: ")
    changed = task_api.edit_task_field(
        state.task_store, index, field, value, uppercase=state.uppercase_titles
    )
    write("Updated." if changed else "No change.")


def _task_menu(state: AppState, index: int, read: Reader, write: Writer) -> None:
    """Submenu for one selected task; returns when the operator goes back."""
    while True:
        task = task_api.get_task(state.task_store, index)
        write(format_task_line(index + 1, task))
        choice = _ask(read, f"{TASK_MENU}\n> ").lower()

        if choice in ("b", "back", ""):
            return
        if choice in ("t", "toggle"):
            task = task_api.toggle_task(state.task_store, index)
            write(f"Marked {'completed' if task.completed else 'pending'}.")
        elif choice in ("e", "edit"):
            try:
                _edit(state, index, read, write)
            except TaskValidationError as e:
                write(str(e))
        elif choice in ("d", "delete"):
            confirm = _ask(read, f"Delete '{task.title}'? [y/N] ").lower()
            if confirm in ("y", "yes"):
                task_api.delete_task(state.task_store, index)
                write("Deleted.")
                return
            write("Cancelled.")
        else:
            write("Unknown choice.")


def _handle_choice(state: AppState, choice: str, read: Reader, write: Writer) -> None:
    if choice in ("l", "list"):
        return  # the list is redrawn on the next cycle
    if choice in ("a", "add"):
        _add(state, read, write)
        return
    parts = choice.split()
    if parts[0] in ("s", "select"):
        # accept "s", "s 3" and "select 3"
        raw = parts[1] if len(parts) > 1 else _ask(read, "Task number: ")
        index = parse_position(raw)
        task_api.get_task(state.task_store, index)
        _task_menu(state, index, read, write)
        return
    write("Unknown choice.")


def run_console_loop(
    state: AppState, *, read: Reader | None = None, write: Writer | None = None
) -> None:
    read = read or input
    write = write or print
    logger.info("Interactive menu started (store=%s).", getattr(state.task_store, "path", "?"))

    while True:
        _render(state, write)
        try:
            choice = _ask(read, f"{MAIN_MENU}\n> ").lower()
        except _ExitLoop:
            logger.info("Console EOF/interrupt received, exiting.")
            write("")
            break

        if not choice:
            continue
        if choice in ("q", "quit", "exit"):
            break

        try:
            _handle_choice(state, choice, read, write)
        except _ExitLoop:
            logger.info("Console EOF/interrupt received, exiting.")
            write("")
            break
        except TaskValidationError as e:
            write(str(e))
        except Exception:
            logger.exception("Menu action crashed.")
            write("Internal error while handling that action.")

    write("Goodbye!")
    logger.info("Interactive menu finished.")
