"""Key-value stores holding the serialized task array.

The stored value is the JSON text produced by the codec; stores never
interpret it.
"""

from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from taskpad.config import STORE_KEY
from taskpad.exceptions import DecodeError
from taskpad.utils.logger import get_logger


class TaskStore(ABC):
    """Abstract base class for task persistence."""

    @abstractmethod
    def load(self) -> str | None:
        """Return the stored text, or None if nothing has been saved yet.

        Raises:
            DecodeError: If the stored bytes cannot be read as text
        """
        raise NotImplementedError("TaskStore.load() must be implemented by adapter")

    @abstractmethod
    def save(self, data: str) -> None:
        """Replace the stored text with ``data``."""
        raise NotImplementedError("TaskStore.save() must be implemented by adapter")


class InMemoryTaskStore(TaskStore):
    """Store that keeps the value in process memory."""

    def __init__(self, data: str | None = None):
        self.data = data
        self.save_count = 0

    def load(self) -> str | None:
        return self.data

    def save(self, data: str) -> None:
        self.data = data
        self.save_count += 1


class FileTaskStore(TaskStore):
    """Store that keeps the value in ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so readers never see a partial file.
    """

    def __init__(self, directory: Path | str, key: str = STORE_KEY):
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"{self.path} is not valid UTF-8 text") from e

    def save(self, data: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{self.key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        get_logger().debug("saved %d bytes to %s", len(data), self.path)
