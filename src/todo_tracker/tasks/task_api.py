# src/todo_tracker/tasks/task_api.py

"""
Task operations.

Each function is one read-modify-write cycle against the store it is given.
Indices are 0-based here; shells convert from the 1-based numbers they show.
Validation happens before any mutation, so a rejected call never writes.
"""

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from .task_models import EmptyValueError, InvalidIndexError, Task, TaskField

logger = logging.getLogger(__name__)


def _normalize_title(title: str, *, uppercase: bool) -> str:
    title = title.strip()
    return title.upper() if uppercase else title


def _check_index(tasks: list[Task], index: int) -> None:
    if not 0 <= index < len(tasks):
        raise InvalidIndexError()


def _persist(store: TaskRepo, tasks: list[Task], action: str) -> None:
    if not store.save(tasks):
        # The store already reported the failure; the in-memory change is lost.
        logger.warning("%s was not persisted", action)


def add_task(store: TaskRepo, title: str, description: str = "", *, uppercase: bool = False) -> Task:
    title = _normalize_title(title or "", uppercase=uppercase)
    if not title:
        raise EmptyValueError("cannot add empty task")

    tasks = store.load()
    task = Task(title=title, description=(description or "").strip(), completed=False)
    tasks.append(task)
    _persist(store, tasks, "add")
    logger.info("Added task #%d: %s", len(tasks), title)
    return task


def list_tasks(store: TaskRepo) -> list[Task]:
    """Current tasks in storage order (oldest first)."""
    return store.load()


def get_task(store: TaskRepo, index: int) -> Task:
    tasks = store.load()
    _check_index(tasks, index)
    return tasks[index]


def toggle_task(store: TaskRepo, index: int) -> Task:
    tasks = store.load()
    _check_index(tasks, index)

    task = tasks[index]
    task.completed = not task.completed
    _persist(store, tasks, "toggle")
    logger.info("Toggled task #%d completed=%s", index + 1, task.completed)
    return task


def mark_done(store: TaskRepo, index: int) -> Task:
    tasks = store.load()
    _check_index(tasks, index)

    task = tasks[index]
    if task.completed:
        return task
    task.completed = True
    _persist(store, tasks, "done")
    logger.info("Completed task #%d", index + 1)
    return task


def edit_task_field(
    store: TaskRepo,
    index: int,
    field: TaskField | str,
    new_value: str,
    *,
    uppercase: bool = False,
) -> bool:
    """
    Overwrite one field of a task.

    Returns False (and does not write) when the value is unchanged.
    """
    name = field if isinstance(field, TaskField) else TaskField.parse(field)

    value = (new_value or "").strip()
    if not value:
        raise EmptyValueError(f"cannot set empty {name.value}")
    if name == TaskField.TITLE:
        value = _normalize_title(value, uppercase=uppercase)

    tasks = store.load()
    _check_index(tasks, index)

    task = tasks[index]
    if task.get_field(name) == value:
        logger.debug("Edit of task #%d %s skipped: no change", index + 1, name.value)
        return False

    task.set_field(name, value)
    _persist(store, tasks, "edit")
    logger.info("Edited task #%d %s", index + 1, name.value)
    return True


def delete_task(store: TaskRepo, index: int) -> Task:
    tasks = store.load()
    _check_index(tasks, index)

    removed = tasks.pop(index)
    _persist(store, tasks, "delete")
    logger.info("Deleted task #%d: %s", index + 1, removed.title)
    return removed
