from __future__ import annotations

"""Settings loader backed by environment variables.

``get_settings`` reads the environment once and caches the resulting
``Settings`` object.  Tests may call ``reset_settings_cache`` to force a
reload after changing environment variables at runtime.
"""

from dataclasses import dataclass
import logging
import os
from functools import lru_cache


@dataclass
class Settings:
    db_dsn: str | None = None
    db_sqlite_path: str = ".db/patterncraft.db"
    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    recent_limit: int = 10
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Return settings loaded from environment variables."""

    return Settings(
        db_dsn=os.getenv("DB_DSN"),
        db_sqlite_path=os.getenv("DB_SQLITE_PATH", ".db/patterncraft.db"),
        upload_dir=os.getenv("PATTERNCRAFT_UPLOAD_DIR", "uploads"),
        max_upload_bytes=int(os.getenv("PATTERNCRAFT_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
        recent_limit=int(os.getenv("PATTERNCRAFT_RECENT_LIMIT", "10")),
        log_level=os.getenv("PATTERNCRAFT_LOG_LEVEL", "INFO").upper(),
    )


def reset_settings_cache() -> None:
    """Clear the settings cache (mainly for tests)."""

    get_settings.cache_clear()


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler at the configured level."""

    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
