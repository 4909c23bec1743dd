# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Name shown in the interactive menu header (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_DATA_DIR": "Directory for the log file (default: ~/.local/todo).",
    "TODO_LOG_TO_FILE": "Also write a DEBUG log to <data_dir>/todo.log (true/false).",
    # Store
    "TODO_STORE_PATH": "Explicit JSON store path; overrides the per-mode default.",
    "TODO_STORE_FILENAME": (
        "Store filename under ~ (interactive) or the cwd (scripted) (default: todos.json)."
    ),
    # Behaviour
    "TODO_UPPERCASE_TITLES": "Uppercase titles on add and on title edits (true/false).",
    "TODO_NEWEST_FIRST": "Show newest tasks first in the menu; storage order is unchanged.",
}
