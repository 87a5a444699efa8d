"""Services module for taskpad - codecs, the task collection and file transfer."""

from .codec import CsvDecodeResult, decode_csv, decode_json, encode_csv, encode_json
from .task_collection import TaskCollection
from .transfer_service import ImportPreview

__all__ = [
    "TaskCollection",
    "CsvDecodeResult",
    "ImportPreview",
    "encode_json",
    "decode_json",
    "encode_csv",
    "decode_csv",
]
