"""Row reading utilities.

A *row* is an ordered mapping of column name to the raw text of the field,
exactly as it appeared in the source.  No type conversion happens here; the
numeric extraction step decides what counts as a number.  CSV files are
streamed with :mod:`csv`, JSON record arrays go through pandas.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator

import pandas as pd

from ..errors import IngestionFailure, UnsupportedDatasetError

Row = Dict[str, str]

SUPPORTED_SUFFIXES = (".csv", ".json")


def _clean_row(raw: Dict[Any, Any]) -> Row:
    # DictReader stores surplus cells under a ``None`` key and fills short
    # lines with ``None`` values; neither belongs to a named column.
    return {str(key): value for key, value in raw.items() if key is not None and value is not None}


def _iter_csv_rows(path: Path) -> Iterator[Row]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            for raw in reader:
                yield _clean_row(raw)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise IngestionFailure(str(exc), source=path.name) from exc


def _cell_text(value: Any) -> str | None:
    if value is None:
        return None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return str(value)


def rows_from_frame(df: pd.DataFrame) -> Iterator[Row]:
    """Yield rows from an in-memory frame, dropping missing cells."""

    for record in df.to_dict("records"):
        row: Row = {}
        for key, value in record.items():
            text = _cell_text(value)
            if text is not None:
                row[str(key)] = text
        yield row


def _iter_json_rows(path: Path) -> Iterator[Row]:
    try:
        if not path.read_text(encoding="utf-8-sig").strip():
            return
        df = pd.read_json(
            path,
            orient="records",
            dtype=False,
            convert_dates=False,
            keep_default_dates=False,
        )
    except (OSError, ValueError) as exc:
        raise IngestionFailure(str(exc), source=path.name) from exc
    yield from rows_from_frame(df)


def read_rows(path: str | Path) -> Iterable[Row]:
    """Return a lazy row iterator for a CSV or JSON dataset.

    The suffix check is eager; read and parse errors surface while iterating
    and are raised as :class:`IngestionFailure`.
    """

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return _iter_csv_rows(path)
    if suffix == ".json":
        return _iter_json_rows(path)
    raise UnsupportedDatasetError(
        f"unsupported dataset format '{suffix or path.name}'", source=path.name
    )


__all__ = ["Row", "SUPPORTED_SUFFIXES", "read_rows", "rows_from_frame"]
