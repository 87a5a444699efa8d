"""Task store interface and implementations.

The collection only sees the ``TaskStore`` contract: a single text value
saved and loaded under a fixed key.
"""

from .store import FileTaskStore, InMemoryTaskStore, TaskStore

__all__ = [
    "TaskStore",
    "FileTaskStore",
    "InMemoryTaskStore",
]
