"""Pattern detection: filename hints, sequence detectors and orchestration."""

from .base import (
    CONFIDENCE,
    FALLBACK_CONFIDENCE,
    ClassificationContext,
    Detection,
    PatternClassifier,
    PatternType,
)
from .engine import ClassificationResult, classify_file, classify_rows, default_chain
from .hints import FilenameHintClassifier
from .sequences import (
    ExponentialClassifier,
    FibonacciClassifier,
    OscillationClassifier,
    is_exponential,
    is_fibonacci_like,
    is_oscillating,
)

__all__ = [
    "CONFIDENCE",
    "FALLBACK_CONFIDENCE",
    "ClassificationContext",
    "ClassificationResult",
    "Detection",
    "ExponentialClassifier",
    "FibonacciClassifier",
    "FilenameHintClassifier",
    "OscillationClassifier",
    "PatternClassifier",
    "PatternType",
    "classify_file",
    "classify_rows",
    "default_chain",
    "is_exponential",
    "is_fibonacci_like",
    "is_oscillating",
]
