"""PatternCraft: classify tabular datasets into mathematical pattern families."""

from .detect import ClassificationResult, PatternType, classify_file, classify_rows
from .errors import IngestionFailure, PatternCraftError

__version__ = "0.1.0"

__all__ = [
    "ClassificationResult",
    "IngestionFailure",
    "PatternCraftError",
    "PatternType",
    "classify_file",
    "classify_rows",
]
