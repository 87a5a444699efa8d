"""Import/export of task lists as JSON or CSV files."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from taskpad.exceptions import DecodeError, TaskNotFoundError, UnsupportedFormatError
from taskpad.models import Task
from taskpad.services.codec import decode_csv, decode_json, encode_csv, encode_json
from taskpad.utils.logger import get_logger

ExportFormat = Literal["json", "csv"]
EXPORT_FORMATS: tuple[str, ...] = ("json", "csv")


class ImportPreview(BaseModel):
    """Decoded contents of an import file, before anything is replaced."""

    source: str
    format: ExportFormat
    tasks: list[Task] = Field(default_factory=list)
    skipped_rows: int = 0


def check_format(fmt: str) -> ExportFormat:
    """Normalize ``fmt`` and reject anything but json/csv."""
    normalized = fmt.lower().lstrip(".")
    if normalized not in EXPORT_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported file format '{fmt}'. Please use JSON or CSV."
        )
    return normalized  # type: ignore[return-value]


def export_filename(fmt: str, today: date | None = None) -> str:
    """Default export file name, e.g. ``todo-list-2024-05-01.json``."""
    today = today or date.today()
    return f"todo-list-{today.isoformat()}.{check_format(fmt)}"


def detect_format(path: Path | str) -> ExportFormat:
    """Pick the codec for ``path`` from its extension."""
    suffix = Path(path).suffix
    if not suffix:
        raise UnsupportedFormatError(
            f"Cannot tell the format of '{path}'. Please use a .json or .csv file."
        )
    return check_format(suffix)


def encode_tasks(tasks: Iterable[Task], fmt: str) -> str:
    """Encode tasks in the given format."""
    if check_format(fmt) == "csv":
        return encode_csv(tasks)
    return encode_json(tasks)


def decode_tasks(text: str, fmt: str, source: str = "<text>") -> ImportPreview:
    """Decode text in the given format into an import preview."""
    fmt = check_format(fmt)
    if fmt == "csv":
        result = decode_csv(text)
        return ImportPreview(
            source=source,
            format=fmt,
            tasks=result.tasks,
            skipped_rows=result.skipped_rows,
        )
    return ImportPreview(source=source, format=fmt, tasks=decode_json(text))


def read_import(path: Path | str) -> ImportPreview:
    """Read and decode an import file.

    Raises:
        TaskNotFoundError: If the file does not exist
        UnsupportedFormatError: If the extension is not .json or .csv
        DecodeError: If the file is not UTF-8 text or a JSON file is malformed
    """
    path = Path(path)
    fmt = detect_format(path)
    if not path.is_file():
        raise TaskNotFoundError(f"File not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"{path} is not valid UTF-8 text") from e

    preview = decode_tasks(text, fmt, source=str(path))
    get_logger().info(
        "read %d task(s) from %s (%d row(s) skipped)",
        len(preview.tasks),
        path,
        preview.skipped_rows,
    )
    return preview


def write_export(
    tasks: Iterable[Task],
    fmt: str,
    directory: Path | str = ".",
    today: date | None = None,
) -> Path:
    """Write tasks to ``directory`` under the default export file name."""
    directory = Path(directory).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    output_path = directory / export_filename(fmt, today)
    output_path.write_text(encode_tasks(tasks, fmt), encoding="utf-8")
    get_logger().info("exported tasks to %s", output_path)
    return output_path
