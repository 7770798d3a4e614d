"""Data-based sequence detectors.

Each detector works on the ordered numeric series of the main column and
answers a yes/no question.  Thresholds are fixed; comparisons are strict
exactly where written.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .base import ClassificationContext, Detection, PatternClassifier, PatternType

logger = logging.getLogger(__name__)

FIBONACCI_REFERENCE = np.array([1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233], dtype=float)
FIBONACCI_MIN_LENGTH = 5
FIBONACCI_WINDOW = 10
FIBONACCI_TOLERANCE = 2.0
FIBONACCI_MIN_MATCHES = 4

OSCILLATION_MIN_LENGTH = 30
OSCILLATION_POINTS_PER_CHANGE = 10

EXPONENTIAL_MIN_LENGTH = 8
EXPONENTIAL_INCREASING_RATIO = 0.7
EXPONENTIAL_GROWING_GAP_RATIO = 0.3


def fibonacci_matches(values: Sequence[float]) -> int:
    """Count leading values lying close to any reference Fibonacci number."""

    head = np.asarray(values[:FIBONACCI_WINDOW], dtype=float)
    if head.size == 0:
        return 0
    close = np.abs(head[:, None] - FIBONACCI_REFERENCE[None, :]) < FIBONACCI_TOLERANCE
    return int(close.any(axis=1).sum())


def is_fibonacci_like(values: Sequence[float]) -> bool:
    if len(values) < FIBONACCI_MIN_LENGTH:
        return False
    return fibonacci_matches(values) >= FIBONACCI_MIN_MATCHES


def direction_changes(values: Sequence[float]) -> int:
    """Count sign flips between consecutive first differences.

    A zero difference has no sign and never takes part in a flip.
    """

    arr = np.asarray(values, dtype=float)
    if arr.size < 3:
        return 0
    diffs = np.diff(arr)
    prev, curr = diffs[:-1], diffs[1:]
    flips = ((prev > 0) & (curr < 0)) | ((prev < 0) & (curr > 0))
    return int(flips.sum())


def is_oscillating(values: Sequence[float]) -> bool:
    n = len(values)
    if n < OSCILLATION_MIN_LENGTH:
        return False
    return direction_changes(values) >= n // OSCILLATION_POINTS_PER_CHANGE


def growth_counts(values: Sequence[float]) -> tuple[int, int]:
    """Return ``(increasing, growing_gaps)`` over the interior points.

    For each index ``i`` in ``1..n-2``: a step is increasing when
    ``v[i] > v[i-1]``; a gap is growing when ``v[i+1]-v[i]`` exceeds a
    strictly positive ``v[i]-v[i-1]``.
    """

    arr = np.asarray(values, dtype=float)
    n = arr.size
    if n < 3:
        return 0, 0
    diffs = np.diff(arr)
    gap1 = diffs[: n - 2]
    gap2 = diffs[1 : n - 1]
    increasing = int((arr[1 : n - 1] > arr[: n - 2]).sum())
    growing = int(((gap2 > gap1) & (gap1 > 0)).sum())
    return increasing, growing


def is_exponential(values: Sequence[float]) -> bool:
    n = len(values)
    if n < EXPONENTIAL_MIN_LENGTH:
        return False
    increasing, growing = growth_counts(values)
    return increasing > n * EXPONENTIAL_INCREASING_RATIO and growing > n * EXPONENTIAL_GROWING_GAP_RATIO


class SequenceClassifier(PatternClassifier):
    """Runs one detector against the main column of the context."""

    pattern_type: PatternType

    def detect(self, values: Sequence[float]) -> bool:
        raise NotImplementedError

    def attempt(self, context: ClassificationContext) -> Optional[Detection]:
        if context.main_column is None:
            return None
        values = context.main_values
        if not self.detect(values):
            return None
        logger.info(
            "%s pattern detected in column %r (%d values)",
            self.pattern_type.value,
            context.main_column,
            len(values),
        )
        return Detection.of(self.pattern_type)


class FibonacciClassifier(SequenceClassifier):
    name = "fibonacci"
    pattern_type = PatternType.FIBONACCI

    def detect(self, values: Sequence[float]) -> bool:
        return is_fibonacci_like(values)


class OscillationClassifier(SequenceClassifier):
    name = "oscillation"
    pattern_type = PatternType.SINE_WAVE

    def detect(self, values: Sequence[float]) -> bool:
        return is_oscillating(values)


class ExponentialClassifier(SequenceClassifier):
    name = "exponential"
    pattern_type = PatternType.EXPONENTIAL

    def detect(self, values: Sequence[float]) -> bool:
        return is_exponential(values)


def default_sequence_classifiers() -> List[SequenceClassifier]:
    return [FibonacciClassifier(), OscillationClassifier(), ExponentialClassifier()]


__all__ = [
    "ExponentialClassifier",
    "FibonacciClassifier",
    "OscillationClassifier",
    "SequenceClassifier",
    "default_sequence_classifiers",
    "direction_changes",
    "fibonacci_matches",
    "growth_counts",
    "is_exponential",
    "is_fibonacci_like",
    "is_oscillating",
]
