"""todo-tracker: a personal task list kept in a JSON file."""

__version__ = "0.1.0"
