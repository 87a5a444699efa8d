"""taskpad domain models.

Pydantic models for the task entity and the values derived from a task
collection.
"""

from .task import (
    DEFAULT_PRIORITY,
    FILTER_MODES,
    PRIORITIES,
    PRIORITY_RANK,
    FilterMode,
    Priority,
    Task,
    TaskStats,
    new_task_id,
)

__all__ = [
    "Task",
    "TaskStats",
    "Priority",
    "FilterMode",
    "PRIORITIES",
    "FILTER_MODES",
    "PRIORITY_RANK",
    "DEFAULT_PRIORITY",
    "new_task_id",
]
