"""Numeric column extraction and main column selection."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional


def parse_number(text: str | None) -> Optional[float]:
    """Return ``text`` as a finite float, or ``None`` when it is not one."""

    if text is None:
        return None
    text = text.strip()
    # float() accepts "1_000"; a raw field with digit separators is text.
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass
class NumericColumns:
    """Per-column numeric series for one dataset.

    ``series`` only holds columns with at least one numeric value and is
    keyed in the order each column yielded its first number.
    """

    series: Dict[str, List[float]] = field(default_factory=dict)
    row_count: int = 0

    @property
    def first_column(self) -> Optional[str]:
        return next(iter(self.series), None)

    def values(self, column: Optional[str]) -> List[float]:
        if column is None:
            return []
        return self.series.get(column, [])

    @property
    def is_empty(self) -> bool:
        return not self.series


def extract_numeric_columns(rows: Iterable[Mapping[str, str]]) -> NumericColumns:
    """Buffer every numeric field of ``rows`` into per-column series.

    Rows may carry different column sets.  Non-numeric fields are skipped
    without a placeholder, so series lengths can differ between columns.
    """

    series: Dict[str, List[float]] = {}
    row_count = 0
    for row in rows:
        row_count += 1
        for column, raw in row.items():
            value = parse_number(raw)
            if value is not None:
                series.setdefault(column, []).append(value)
    return NumericColumns(series=series, row_count=row_count)


def select_main_column(columns: NumericColumns) -> Optional[str]:
    """Return the column with the longest series.

    Ties resolve to the column seen first; ``None`` when nothing is numeric.
    """

    main: Optional[str] = None
    longest = 0
    for column, values in columns.series.items():
        if len(values) > longest:
            longest = len(values)
            main = column
    return main


__all__ = [
    "NumericColumns",
    "extract_numeric_columns",
    "parse_number",
    "select_main_column",
]
