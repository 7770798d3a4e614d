"""Dataset reading, numeric extraction and summary statistics."""

from .columns import NumericColumns, extract_numeric_columns, parse_number, select_main_column
from .rows import Row, read_rows, rows_from_frame
from .summary import EMPTY_SUMMARY, Summary, compute_summary

__all__ = [
    "EMPTY_SUMMARY",
    "NumericColumns",
    "Row",
    "Summary",
    "compute_summary",
    "extract_numeric_columns",
    "parse_number",
    "read_rows",
    "rows_from_frame",
    "select_main_column",
]
