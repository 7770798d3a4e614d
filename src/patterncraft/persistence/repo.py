"""Repository helpers for persisted classification results."""

from __future__ import annotations

from typing import List, Optional

import sqlite3

from .models import PatternRecord

_COLUMNS = (
    "id, owner_id, filename, original_name, pattern_type, confidence, row_count, "
    "numeric_value_count, summary_min, summary_max, summary_avg, main_column, "
    "summary_column, created_at"
)


def _to_record(row: sqlite3.Row) -> PatternRecord:
    return PatternRecord(**{key: row[key] for key in row.keys()})


class PatternResultsRepository:
    """Operations for the ``pattern_results`` table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def insert(self, record: PatternRecord) -> int:
        cur = self.conn.cursor()
        cur.execute(
            """
            INSERT INTO pattern_results (
                owner_id, filename, original_name, pattern_type, confidence,
                row_count, numeric_value_count, summary_min, summary_max,
                summary_avg, main_column, summary_column
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                record.owner_id,
                record.filename,
                record.original_name,
                record.pattern_type,
                record.confidence,
                record.row_count,
                record.numeric_value_count,
                record.summary_min,
                record.summary_max,
                record.summary_avg,
                record.main_column,
                record.summary_column,
            ),
        )
        record.id = cur.lastrowid
        row = self.conn.execute(
            "SELECT created_at FROM pattern_results WHERE id = ?", (record.id,)
        ).fetchone()
        record.created_at = row["created_at"]
        return record.id

    def get(self, record_id: int) -> Optional[PatternRecord]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM pattern_results WHERE id = ?", (record_id,)
        ).fetchone()
        return _to_record(row) if row else None

    def list_recent(self, owner_id: str, limit: int = 10) -> List[PatternRecord]:
        """Return the owner's most recent results, newest first."""

        rows = self.conn.execute(
            f"""
            SELECT {_COLUMNS} FROM pattern_results
            WHERE owner_id = ?
            ORDER BY created_at DESC, id DESC
            LIMIT ?
            """,
            (owner_id, limit),
        ).fetchall()
        return [_to_record(row) for row in rows]


__all__ = ["PatternResultsRepository"]
