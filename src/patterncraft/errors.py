"""Exceptions raised by the classification engine."""

from __future__ import annotations


class PatternCraftError(Exception):
    """Base class for all package errors."""


class IngestionFailure(PatternCraftError):
    """Raised when the row source cannot be read or parsed.

    Classification aborts when this is raised; no partial result exists.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
        self.source = source


class UnsupportedDatasetError(IngestionFailure):
    """Raised for dataset files whose format the row reader does not handle."""
