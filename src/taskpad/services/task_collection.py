"""Task collection - the in-memory owner of all tasks.

The collection keeps tasks in insertion order, persists the whole list
through an injected ``TaskStore`` after every mutation, and derives the
filtered, sorted view and summary counts used for display.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

import pydantic

from taskpad.exceptions import DecodeError, TaskNotFoundError, ValidationError
from taskpad.models import (
    DEFAULT_PRIORITY,
    FILTER_MODES,
    PRIORITY_RANK,
    Task,
    TaskStats,
)
from taskpad.repositories import TaskStore
from taskpad.services.codec import (
    decode_json,
    describe_validation_errors,
    encode_json,
)
from taskpad.utils.logger import get_logger


def sort_key(task: Task) -> tuple:
    """Display order: pending first, then priority rank, then due date.

    Tasks without a due date come after dated tasks of the same priority.
    """
    return (
        task.completed,
        PRIORITY_RANK[task.priority],
        task.due_date is None,
        task.due_date or date.max,
    )


class TaskCollection:
    """Ordered collection of tasks backed by a ``TaskStore``."""

    def __init__(self, store: TaskStore):
        """Initialize the collection and load any stored tasks.

        Args:
            store: TaskStore holding the JSON-encoded task array
        """
        self.store = store
        self.logger = get_logger()
        self._tasks: list[Task] = self._load()

    def _load(self) -> list[Task]:
        try:
            data = self.store.load()
            if not data:
                return []
            tasks = decode_json(data)
        except DecodeError as e:
            self.logger.warning("stored tasks are unreadable, starting empty: %s", e)
            return []
        if len({task.id for task in tasks}) != len(tasks):
            self.logger.warning("stored tasks contain duplicate ids, starting empty")
            return []
        return tasks

    def _persist(self) -> None:
        self.store.save(encode_json(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        """Tasks in insertion order (a copy of the backing list)."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def get(self, task_id: str) -> Task | None:
        """Return the task with ``task_id``, or None."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def resolve_id(self, ref: str) -> str:
        """Resolve a full task id or a unique id prefix to a full id.

        Raises:
            TaskNotFoundError: If no task matches
            ValidationError: If the prefix matches more than one task
        """
        if self.get(ref) is not None:
            return ref

        matches = []
        if ref:
            matches = [task for task in self._tasks if task.id.startswith(ref)]
        if not matches:
            raise TaskNotFoundError(f"No task found with ID or prefix '{ref}'")
        if len(matches) > 1:
            ids = ", ".join(task.id for task in matches)
            raise ValidationError(f"Multiple tasks match prefix '{ref}': {ids}")
        return matches[0].id

    def add(
        self,
        description: str,
        priority: str = DEFAULT_PRIORITY,
        due_date: date | str | None = None,
    ) -> Task:
        """Create a task, append it and persist.

        Args:
            description: Task text; surrounding whitespace is removed
            priority: "low", "medium" or "high"
            due_date: Optional due date (date or ISO string)

        Returns:
            The created Task

        Raises:
            ValidationError: If the description is blank or a field is invalid
        """
        description = (description or "").strip()
        if not description:
            raise ValidationError("Task description must not be empty")

        try:
            task = Task(description=description, priority=priority, due_date=due_date)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid task: {describe_validation_errors(e)}") from e

        self._tasks.append(task)
        self._persist()
        self.logger.debug("added task %s", task.id)
        return task

    def remove(self, task_id: str) -> bool:
        """Remove the task with ``task_id``. Returns False if it was absent."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                self._persist()
                self.logger.debug("removed task %s", task_id)
                return True
        return False

    def toggle(self, task_id: str) -> Task | None:
        """Flip completion of the task with ``task_id``. Returns None if absent."""
        task = self.get(task_id)
        if task is None:
            return None
        task.toggle()
        self._persist()
        self.logger.debug("toggled task %s (completed=%s)", task_id, task.completed)
        return task

    def filter(self, mode: str = "all") -> list[Task]:
        """Tasks matching ``mode`` ("all", "pending" or "completed"), in insertion order."""
        if mode == "all":
            return list(self._tasks)
        if mode == "pending":
            return [task for task in self._tasks if not task.completed]
        if mode == "completed":
            return [task for task in self._tasks if task.completed]
        raise ValidationError(
            f"Unknown filter mode '{mode}' (expected one of: {', '.join(FILTER_MODES)})"
        )

    def sorted_view(self, mode: str = "all") -> list[Task]:
        """Filtered tasks in display order; ties keep insertion order."""
        return sorted(self.filter(mode), key=sort_key)

    def stats(self) -> TaskStats:
        """Counts over the whole collection, independent of any filter."""
        completed = sum(1 for task in self._tasks if task.completed)
        return TaskStats(
            total=len(self._tasks),
            pending=len(self._tasks) - completed,
            completed=completed,
        )

    def replace(self, tasks: Iterable[Task]) -> None:
        """Replace every task at once and persist.

        No confirmation happens here; callers ask the user first.

        Raises:
            ValidationError: If two of the new tasks share an id
        """
        new_tasks = list(tasks)
        seen: set[str] = set()
        for task in new_tasks:
            if task.id in seen:
                raise ValidationError(f"Duplicate task id '{task.id}' in imported tasks")
            seen.add(task.id)

        self._tasks = new_tasks
        self._persist()
        self.logger.info("replaced collection with %d task(s)", len(new_tasks))
