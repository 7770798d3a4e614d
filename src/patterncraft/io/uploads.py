"""Storage helpers for uploaded datasets."""
from __future__ import annotations

import time
from pathlib import Path, PurePath
from typing import Optional

from ..config import get_settings

CSV_CONTENT_TYPES = frozenset({"text/csv", "application/csv", "application/vnd.ms-excel"})


class UploadRejected(ValueError):
    """Raised when an upload fails validation; ``status_code`` maps to HTTP."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


def upload_dir() -> Path:
    path = Path(get_settings().upload_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_basename(filename: str) -> str:
    """Strip any directory part a client may have sent with the name."""

    return PurePath(filename.replace("\\", "/")).name


def is_csv_upload(filename: str, content_type: Optional[str]) -> bool:
    if content_type and content_type.split(";")[0].strip().lower() in CSV_CONTENT_TYPES:
        return True
    return filename.lower().endswith(".csv")


def validate_upload(filename: Optional[str], content_type: Optional[str], size: int) -> str:
    """Return the cleaned original name or raise :class:`UploadRejected`."""

    if not filename:
        raise UploadRejected("No file uploaded")
    original_name = safe_basename(filename)
    if not original_name:
        raise UploadRejected("No file uploaded")
    if not is_csv_upload(original_name, content_type):
        raise UploadRejected("Only CSV files are allowed!")
    limit = get_settings().max_upload_bytes
    if size > limit:
        raise UploadRejected(f"File exceeds the {limit} byte upload limit", status_code=413)
    return original_name


def stored_name(original_name: str, now_ms: Optional[int] = None) -> str:
    """Return ``<epoch-millis>-<original_name>``."""

    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{now_ms}-{original_name}"


def store_upload(original_name: str, payload: bytes) -> Path:
    """Write ``payload`` under the upload directory and return its path.

    Stored files always carry a ``.csv`` suffix so the row reader accepts
    them.
    """

    name = stored_name(original_name)
    if not name.lower().endswith(".csv"):
        name += ".csv"
    destination = upload_dir() / name
    destination.write_bytes(payload)
    return destination


__all__ = [
    "UploadRejected",
    "is_csv_upload",
    "safe_basename",
    "store_upload",
    "stored_name",
    "upload_dir",
    "validate_upload",
]
