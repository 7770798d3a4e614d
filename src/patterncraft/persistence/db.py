"""SQLite persistence for classification results.

The DSN is controlled through environment variables (see
:mod:`patterncraft.config`) and follows the ``sqlite:///path`` form; the
special path ``:memory:`` keeps everything in memory.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..config import get_settings


def _effective_db_path() -> str:
    """Resolve the database path from settings.

    Only SQLite DSNs are supported.  When no DSN is provided the default
    path from settings is used.
    """

    settings = get_settings()
    dsn = settings.db_dsn
    if not dsn:
        dsn = f"sqlite:///{settings.db_sqlite_path}"
    if not dsn.startswith("sqlite:///"):
        raise RuntimeError("Only sqlite DSNs are supported")
    return dsn.split("sqlite:///", 1)[1]


def connect() -> sqlite3.Connection:
    path = _effective_db_path()
    if path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    cur = conn.cursor()
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS pattern_results (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            owner_id TEXT NOT NULL,
            filename TEXT NOT NULL,
            original_name TEXT NOT NULL,
            pattern_type TEXT NOT NULL
                CHECK (pattern_type IN ('fibonacci', 'sine_wave', 'exponential', 'unknown')),
            confidence REAL NOT NULL CHECK (confidence >= 0 AND confidence <= 1),
            row_count INTEGER NOT NULL,
            numeric_value_count INTEGER NOT NULL,
            summary_min REAL,
            summary_max REAL,
            summary_avg REAL,
            main_column TEXT,
            summary_column TEXT,
            created_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
        )
        """
    )
    cur.execute(
        """
        CREATE INDEX IF NOT EXISTS ix_pattern_results_owner_created
        ON pattern_results(owner_id, created_at)
        """
    )
    conn.commit()


@contextmanager
def session() -> Iterator[sqlite3.Connection]:
    conn = connect()
    try:
        init_db(conn)
        yield conn
        conn.commit()
    finally:
        conn.close()


__all__ = ["connect", "init_db", "session"]
