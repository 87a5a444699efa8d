"""Bootstrap of the task collection for the active configuration.

Usage Pattern:
    from taskpad.services.context_manager import get_task_collection

    collection = get_task_collection()
    collection.add("Buy milk", priority="high")
"""

from __future__ import annotations

from taskpad.config import get_config_manager
from taskpad.repositories import FileTaskStore
from taskpad.services.task_collection import TaskCollection


def get_task_store(profile: str = "default") -> FileTaskStore:
    """Build the file store configured for ``profile``."""
    config_manager = get_config_manager(profile)
    return FileTaskStore(config_manager.data_dir, key=config_manager.config.storage.key)


def get_task_collection(profile: str = "default") -> TaskCollection:
    """Load the task collection backed by the configured store."""
    return TaskCollection(get_task_store(profile))
