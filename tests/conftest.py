"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and
log directories.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from unittest.mock import patch

import pytest

import taskpad.config as config_mod
import taskpad.utils.logger as logger_mod
from taskpad.models import Task
from taskpad.repositories import InMemoryTaskStore
from taskpad.services.task_collection import TaskCollection
from taskpad.utils.ui.console import get_console


def _reset_logger() -> None:
    logger_mod._logger = None
    existing = logging.getLogger("taskpad")
    for handler in list(existing.handlers):
        handler.close()
        existing.removeHandler(handler)


# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point platformdirs lookups at *tmp_path* for every test.

    Yields a dict with the config, data and log directories in use.
    """
    dirs = {
        "config": tmp_path / "config",
        "data": tmp_path / "data",
        "log": tmp_path / "log",
    }
    monkeypatch.delenv("TASKPAD_LOG_LEVEL", raising=False)
    config_mod._config_manager = None
    _reset_logger()
    get_console.cache_clear()
    with (
        patch("taskpad.config.user_config_dir", return_value=str(dirs["config"])),
        patch("taskpad.config.user_data_dir", return_value=str(dirs["data"])),
        patch("taskpad.utils.logger.user_log_dir", return_value=str(dirs["log"])),
    ):
        yield dirs
    config_mod._config_manager = None
    _reset_logger()


# ---------------------------------------------------------------------------
# Domain helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def now() -> datetime:
    """Fixed "current time" for date-dependent tests."""
    return datetime(2024, 5, 10, 15, 30, 0)


@pytest.fixture()
def make_task():
    """Factory building tasks with stable timestamps."""

    def _make(description: str = "Task", **kwargs) -> Task:
        kwargs.setdefault("created_at", datetime(2024, 5, 1, 9, 0, 0, tzinfo=UTC))
        return Task(description=description, **kwargs)

    return _make


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def collection(store) -> TaskCollection:
    return TaskCollection(store)


@pytest.fixture()
def sample_tasks(make_task) -> list[Task]:
    """Three tasks with fixed ids covering each priority."""
    return [
        make_task("Write report", id="task-1", priority="low"),
        make_task(
            "Pay rent", id="task-2", priority="high", due_date=date(2024, 5, 1)
        ),
        make_task("Call mom", id="task-3", priority="medium", completed=True),
    ]
