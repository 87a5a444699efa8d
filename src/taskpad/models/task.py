"""Task data model."""

from __future__ import annotations

import uuid
from datetime import UTC, date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Priority = Literal["low", "medium", "high"]
FilterMode = Literal["all", "pending", "completed"]

PRIORITIES: tuple[str, ...] = ("low", "medium", "high")
FILTER_MODES: tuple[str, ...] = ("all", "pending", "completed")
DEFAULT_PRIORITY: Priority = "medium"

# Lower rank sorts first
PRIORITY_RANK = {"high": 1, "medium": 2, "low": 3}


def new_task_id() -> str:
    """Generate a new task identifier."""
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _today(now: datetime | None) -> date:
    return (now or datetime.now()).date()


class Task(BaseModel):
    """Task model representing a single to-do item.

    Attributes:
        id: Unique identifier, assigned at creation and never reassigned
        description: Task text (non-empty, enforced by the collection)
        priority: One of "low", "medium", "high"
        due_date: Optional calendar date the task is due
        completed: Completion status
        created_at: Creation timestamp (UTC), never reassigned

    The JSON wire names are ``dueDate`` and ``createdAt``; both the wire
    names and the attribute names are accepted on construction.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_task_id, frozen=True)
    description: str
    priority: Priority = DEFAULT_PRIORITY
    due_date: date | None = Field(default=None, alias="dueDate")
    completed: bool = False
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt", frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_legacy_id(cls, value: Any) -> Any:
        # Older exports used numeric ids (timestamp + random fraction)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def _empty_due_date(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def toggle(self) -> None:
        """Flip the completion status."""
        self.completed = not self.completed

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Return True if the task is incomplete and its due day has passed.

        A task due today is not overdue.
        """
        if self.due_date is None or self.completed:
            return False
        return self.due_date < _today(now)

    def days_until_due(self, now: datetime | None = None) -> int | None:
        """Whole calendar days from today until the due date.

        ``now`` is truncated to its calendar day, so the result does not
        depend on the time of day: today is 0, tomorrow 1, yesterday -1.
        Returns None when the task has no due date.
        """
        if self.due_date is None:
            return None
        return (self.due_date - _today(now)).days

    def due_label(self, now: datetime | None = None) -> str | None:
        """Short human-readable due status for display."""
        if self.due_date is None:
            return None
        if self.is_overdue(now):
            return f"Overdue: {self.due_date.isoformat()}"

        days = self.days_until_due(now)
        if days == 0:
            return "Due Today"
        if days == 1:
            return "Due Tomorrow"
        if days > 1:
            return f"Due in {days} days"
        return self.due_date.isoformat()


class TaskStats(BaseModel):
    """Summary counts over a task collection."""

    total: int = 0
    pending: int = 0
    completed: int = 0
