"""Shared Rich console with taskpad's colour theme."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

# Style names used by the task table; override here, not at call sites
TASKPAD_THEME = Theme(
    {
        "priority.high": "bold red",
        "priority.medium": "yellow",
        "priority.low": "green",
        "task.overdue": "bold red",
        "task.done": "strike dim",
        "task.id": "dim",
    }
)


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Console used by every command.

    Cached per ``highlight`` setting; tests clear the cache so a fresh
    console picks up the captured stdout.
    """
    return Console(theme=TASKPAD_THEME, highlight=highlight)
