"""File storage helpers."""
