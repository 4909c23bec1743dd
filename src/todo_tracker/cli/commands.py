# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import InvalidIndexError, Task, TaskValidationError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "no pending tasks"


class CommandRegistry:
    """Command registry used by the scripted shell (add, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: Sequence[str]) -> str:
        """
        Handle one command line already split into words, e.g. ["done", "2"].
        Always returns the reply text; unknown commands get the usage text.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        args = list(argv[1:])

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {argv[0]}\n{self.build_help()}"

        try:
            return handler(state, args)
        except TaskValidationError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Usage: todo <command> [args]", "", "Commands:"]
        width = max((len(f"{n} {u}".strip()) for n, (u, _) in self._help.items()), default=0)
        for name, (usage, help_text) in self._help.items():
            left = f"{name} {usage}".strip()
            lines.append(f"  {left:<{width}}  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_position(raw: str | None) -> int:
    """Turn a 1-based position typed by the operator into a 0-based index."""
    try:
        pos = int((raw or "").strip())
    except ValueError:
        raise InvalidIndexError() from None
    if pos < 1:
        raise InvalidIndexError()
    return pos - 1


def format_task_line(pos: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"{pos}. [{mark}] {task.title}"
    if task.state:
        line += f" ({task.state})"
    if task.description:
        line += f" - {task.description}"
    return line


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    position = len(task_api.list_tasks(state.task_store)) + 1
    task = task_api.add_task(state.task_store, text, uppercase=state.uppercase_titles)
    return f"Added task {position}: {task.title}"


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = task_api.list_tasks(state.task_store)
    if not tasks:
        return EMPTY_LIST_TEXT
    return "\n".join(format_task_line(i, t) for i, t in enumerate(tasks, start=1))


def _single_position(args: list[str]) -> int:
    if len(args) != 1:
        raise InvalidIndexError()
    return parse_position(args[0])


def cmd_done(state: AppState, args: list[str]) -> str:
    index = _single_position(args)
    task = task_api.mark_done(state.task_store, index)
    return f"Completed task {index + 1}: {task.title}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    index = _single_position(args)
    task = task_api.toggle_task(state.task_store, index)
    status = "completed" if task.completed else "pending"
    return f"Task {index + 1} is now {status}: {task.title}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    index = _single_position(args)
    task = task_api.delete_task(state.task_store, index)
    return f"Deleted task {index + 1}: {task.title}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    edit <n> <field> <value...>
    field is one of: title, description, state
    """
    if len(args) < 3:
        return "Usage: todo edit <n> <title|description|state> <value>"

    index = parse_position(args[0])
    field, value = args[1], " ".join(args[2:])
    changed = task_api.edit_task_field(
        state.task_store, index, field, value, uppercase=state.uppercase_titles
    )
    if not changed:
        return "no change"
    return f"Updated task {index + 1} {field.lower()}."


registry.register("add", cmd_add, help_text="Add a task.", usage="<text>")
registry.register("list", cmd_list, help_text="List tasks.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark task n completed.", usage="<n>")
registry.register("toggle", cmd_toggle, help_text="Flip completion of task n.", usage="<n>")
registry.register(
    "edit",
    cmd_edit,
    help_text="Change a field of task n.",
    usage="<n> <field> <value>",
)
registry.register("delete", cmd_delete, help_text="Delete task n.", usage="<n>", aliases=["rm"])
registry.register("help", cmd_help, help_text="Show this help.", aliases=["-h", "--help"])
