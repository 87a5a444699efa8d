"""JSON and CSV codecs for task lists.

JSON is the lossless form (also used for the persistent store). CSV is a
line-based spreadsheet form: one header row, one row per task, the
description always quoted.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Iterable
from typing import Any

import pydantic
from pydantic import BaseModel, Field

from taskpad.exceptions import DecodeError
from taskpad.models import Task
from taskpad.utils.logger import get_logger

CSV_HEADER = ("ID", "Description", "Priority", "Due Date", "Completed", "Created At")
CSV_FIELD_COUNT = len(CSV_HEADER)


class CsvDecodeResult(BaseModel):
    """Tasks decoded from CSV plus the number of rows that were dropped."""

    tasks: list[Task] = Field(default_factory=list)
    skipped_rows: int = 0


def describe_validation_errors(exc: pydantic.ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"]) or "task"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def task_to_dict(task: Task) -> dict[str, Any]:
    """Wire form of a task: id, description, priority, dueDate, completed, createdAt."""
    return task.model_dump(mode="json", by_alias=True)


def encode_json(tasks: Iterable[Task], indent: int | None = 2) -> str:
    """Encode tasks as a JSON array."""
    return json.dumps([task_to_dict(task) for task in tasks], indent=indent)


def decode_json(text: str) -> list[Task]:
    """Decode a JSON array of task objects.

    Either every element decodes or ``DecodeError`` is raised; a partial
    list is never returned.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a JSON array of tasks, got {type(data).__name__}"
        )

    tasks = []
    for index, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise DecodeError(f"Task #{index} is not an object")
        try:
            tasks.append(Task.model_validate(item))
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Task #{index} is invalid: {describe_validation_errors(e)}"
            ) from e
    return tasks


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


def quote_csv_field(value: str) -> str:
    """Wrap a value in double quotes, doubling any embedded quote."""
    return '"' + value.replace('"', '""') + '"'


def _csv_id(task_id: str) -> str:
    # Generated ids never need quoting; imported ids are opaque text
    if "," in task_id or '"' in task_id:
        return quote_csv_field(task_id)
    return task_id


def _split_rows(text: str) -> list[str]:
    """Split on line breaks only.

    ``str.splitlines`` also breaks on form feeds, vertical tabs and Unicode
    separators, all of which are legal inside a description.
    """
    return text.strip().replace("\r\n", "\n").split("\n")


def encode_csv(tasks: Iterable[Task]) -> str:
    """Encode tasks as CSV text (header row plus one row per task)."""
    rows = [",".join(CSV_HEADER)]
    for task in tasks:
        data = task_to_dict(task)
        row = [
            _csv_id(task.id),
            quote_csv_field(task.description),
            task.priority,
            data["dueDate"] or "",
            "true" if task.completed else "false",
            data["createdAt"],
        ]
        rows.append(",".join(row))
    return "\n".join(rows)


def _row_to_payload(fields: list[str]) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "description": fields[1],
        "priority": fields[2].strip(),
        "dueDate": fields[3].strip() or None,
        "completed": fields[4].strip() == "true",
    }
    # Blank id/timestamp cells fall back to freshly generated values
    if fields[0].strip():
        payload["id"] = fields[0].strip()
    if fields[5].strip():
        payload["createdAt"] = fields[5].strip()
    return payload


def decode_csv(text: str) -> CsvDecodeResult:
    """Decode CSV text produced by ``encode_csv`` (or a compatible tool).

    The first line is treated as the header and skipped. Rows with fewer
    than six fields, or whose values do not validate, are dropped and
    counted in ``skipped_rows``.
    """
    logger = get_logger()
    result = CsvDecodeResult()

    lines = _split_rows(text)
    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue

        try:
            fields = next(csv.reader([line], skipinitialspace=True))
        except csv.Error as e:
            logger.warning("skipping CSV line %d: %s", line_no, e)
            result.skipped_rows += 1
            continue

        if len(fields) < CSV_FIELD_COUNT:
            logger.warning(
                "skipping CSV line %d: expected %d fields, got %d",
                line_no,
                CSV_FIELD_COUNT,
                len(fields),
            )
            result.skipped_rows += 1
            continue

        try:
            result.tasks.append(Task.model_validate(_row_to_payload(fields)))
        except pydantic.ValidationError as e:
            logger.warning(
                "skipping CSV line %d: %s", line_no, describe_validation_errors(e)
            )
            result.skipped_rows += 1

    return result
