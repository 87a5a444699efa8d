"""Unit tests for the JSON and CSV task codecs."""

from __future__ import annotations

import json
from datetime import date

import pytest

from taskpad.exceptions import DecodeError
from taskpad.services.codec import (
    CSV_HEADER,
    decode_csv,
    decode_json,
    encode_csv,
    encode_json,
    quote_csv_field,
)

HEADER_LINE = "ID,Description,Priority,Due Date,Completed,Created At"


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


class TestJson:
    def test_encodes_wire_fields(self, make_task):
        task = make_task("Pay rent", id="t1", priority="high", due_date=date(2024, 5, 1))

        data = json.loads(encode_json([task]))

        assert data == [
            {
                "id": "t1",
                "description": "Pay rent",
                "priority": "high",
                "dueDate": "2024-05-01",
                "completed": False,
                "createdAt": "2024-05-01T09:00:00Z",
            }
        ]

    def test_absent_due_date_is_null(self, make_task):
        data = json.loads(encode_json([make_task("x")]))
        assert data[0]["dueDate"] is None

    def test_round_trip(self, sample_tasks):
        assert decode_json(encode_json(sample_tasks)) == sample_tasks

    def test_round_trip_empty_list(self):
        assert decode_json(encode_json([])) == []

    def test_decodes_legacy_export(self):
        text = json.dumps(
            [
                {
                    "id": 1714550400000.42,
                    "description": "Old task",
                    "priority": "low",
                    "dueDate": None,
                    "completed": True,
                    "createdAt": "2024-05-01T08:00:00.000Z",
                }
            ]
        )

        (task,) = decode_json(text)

        assert task.id == "1714550400000.42"
        assert task.priority == "low"
        assert task.completed is True

    def test_malformed_json_raises(self):
        with pytest.raises(DecodeError, match="Invalid JSON"):
            decode_json("[{not json")

    def test_non_array_raises(self):
        with pytest.raises(DecodeError, match="JSON array"):
            decode_json('{"description": "x"}')

    def test_non_object_element_raises(self):
        with pytest.raises(DecodeError, match="Task #2"):
            decode_json('[{"description": "x"}, 42]')

    def test_unknown_priority_raises(self):
        text = '[{"description": "ok"}, {"description": "bad", "priority": "urgent"}]'
        with pytest.raises(DecodeError, match="Task #2 is invalid: priority"):
            decode_json(text)

    def test_missing_description_raises(self):
        with pytest.raises(DecodeError, match="description"):
            decode_json('[{"priority": "low"}]')


# ---------------------------------------------------------------------------
# CSV encoding
# ---------------------------------------------------------------------------


class TestCsvEncode:
    def test_header_only_for_empty_list(self):
        assert encode_csv([]) == HEADER_LINE
        assert ",".join(CSV_HEADER) == HEADER_LINE

    def test_row_layout(self, make_task):
        task = make_task("Pay rent", id="t1", priority="high", due_date=date(2024, 5, 1))

        lines = encode_csv([task]).split("\n")

        assert lines == [
            HEADER_LINE,
            't1,"Pay rent",high,2024-05-01,false,2024-05-01T09:00:00Z',
        ]

    def test_absent_due_date_is_empty_cell(self, make_task):
        line = encode_csv([make_task("x", id="t1", completed=True)]).split("\n")[1]
        assert line == 't1,"x",medium,,true,2024-05-01T09:00:00Z'

    def test_quotes_are_doubled(self, make_task):
        task = make_task('Say "hi", bye', priority="low")
        row = encode_csv([task]).split("\n")[1]
        assert '"Say ""hi"", bye"' in row

    def test_id_with_comma_or_quote_is_quoted(self, make_task):
        row = encode_csv([make_task("x", id='a,"b')]).split("\n")[1]
        assert row.startswith('"a,""b",')

    def test_quote_csv_field(self):
        assert quote_csv_field('a "b" c') == '"a ""b"" c"'
        assert quote_csv_field("") == '""'


# ---------------------------------------------------------------------------
# CSV decoding
# ---------------------------------------------------------------------------


class TestCsvDecode:
    def test_round_trip(self, sample_tasks):
        result = decode_csv(encode_csv(sample_tasks))

        assert result.tasks == sample_tasks
        assert result.skipped_rows == 0

    @pytest.mark.parametrize(
        "description",
        ['Say "hi", bye', "a,b,c", '""', "trailing comma,", "plain"],
    )
    def test_round_trip_tricky_descriptions(self, make_task, description):
        task = make_task(description, priority="low")
        (decoded,) = decode_csv(encode_csv([task])).tasks
        assert decoded == task

    @pytest.mark.parametrize(
        "description",
        [
            "page\x0cbreak, ok",
            "tab\x0bbed",
            "sep\x1cx\x1dy\x1ez",
            "nel\x85end",
            "a\u2028b",
            "p\u2029q",
        ],
    )
    def test_round_trip_keeps_non_newline_separators(self, make_task, description):
        task = make_task(description)

        result = decode_csv(encode_csv([task]))

        assert result.tasks == [task]
        assert result.skipped_rows == 0

    @pytest.mark.parametrize("task_id", ["a,b", 'say "x"', "1700000000000.123"])
    def test_round_trip_opaque_ids(self, make_task, task_id):
        task = make_task("x", id=task_id)
        assert decode_csv(encode_csv([task])).tasks == [task]

    def test_decodes_quoted_description(self):
        text = HEADER_LINE + '\nt1,"Say ""hi"", bye",low,,false,2024-05-01T09:00:00Z'

        (task,) = decode_csv(text).tasks

        assert task.description == 'Say "hi", bye'
        assert task.priority == "low"
        assert task.due_date is None
        assert task.completed is False

    def test_completed_only_for_literal_true(self):
        rows = [
            't1,"a",low,,true,2024-05-01T09:00:00Z',
            't2,"b",low,,TRUE,2024-05-01T09:00:00Z',
            't3,"c",low,,yes,2024-05-01T09:00:00Z',
        ]
        tasks = decode_csv("\n".join([HEADER_LINE, *rows])).tasks
        assert [task.completed for task in tasks] == [True, False, False]

    def test_trims_fields(self):
        text = HEADER_LINE + '\n t1 , "x" , high , 2024-05-01 , true , 2024-05-01T09:00:00Z '

        (task,) = decode_csv(text).tasks

        assert task.id == "t1"
        assert task.priority == "high"
        assert task.due_date == date(2024, 5, 1)
        assert task.completed is True

    def test_short_rows_are_skipped_and_counted(self):
        text = "\n".join(
            [
                HEADER_LINE,
                't1,"ok",low,,false,2024-05-01T09:00:00Z',
                't2,"short",low',
                "garbage",
            ]
        )

        result = decode_csv(text)

        assert [task.id for task in result.tasks] == ["t1"]
        assert result.skipped_rows == 2

    def test_invalid_priority_row_is_skipped(self):
        text = "\n".join(
            [
                HEADER_LINE,
                't1,"bad",urgent,,false,2024-05-01T09:00:00Z',
                't2,"good",high,,false,2024-05-01T09:00:00Z',
            ]
        )

        result = decode_csv(text)

        assert [task.id for task in result.tasks] == ["t2"]
        assert result.skipped_rows == 1

    def test_blank_lines_are_ignored(self):
        text = HEADER_LINE + '\n\nt1,"x",low,,false,2024-05-01T09:00:00Z\n\n'
        result = decode_csv(text)
        assert len(result.tasks) == 1
        assert result.skipped_rows == 0

    def test_blank_id_and_timestamp_are_generated(self):
        (task,) = decode_csv(HEADER_LINE + '\n,"x",low,,false,').tasks
        assert task.id
        assert task.created_at is not None

    def test_header_only(self):
        result = decode_csv(HEADER_LINE)
        assert result.tasks == []
        assert result.skipped_rows == 0

    def test_windows_line_endings(self, sample_tasks):
        text = encode_csv(sample_tasks).replace("\n", "\r\n")
        assert decode_csv(text).tasks == sample_tasks
