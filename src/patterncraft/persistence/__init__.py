"""Persistence layer for classification results."""

from .db import connect, init_db, session
from .models import PatternRecord
from .repo import PatternResultsRepository

__all__ = [
    "connect",
    "init_db",
    "session",
    "PatternRecord",
    "PatternResultsRepository",
]
