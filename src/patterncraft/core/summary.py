"""Min / max / mean summary of a numeric series."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class Summary:
    """Summary statistics; all fields are ``None`` for an empty series."""

    min: Optional[float] = None
    max: Optional[float] = None
    avg: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.min is None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {"min": self.min, "max": self.max, "avg": self.avg}


EMPTY_SUMMARY = Summary()


def compute_summary(values: Sequence[float]) -> Summary:
    """Return min, max and arithmetic mean of ``values``.

    An empty series yields :data:`EMPTY_SUMMARY` rather than infinities or
    a NaN average.
    """

    if len(values) == 0:
        return EMPTY_SUMMARY
    arr = np.asarray(values, dtype=float)
    lo = float(arr.min())
    hi = float(arr.max())
    # The rounded mean of equal values can land one ulp outside [lo, hi].
    avg = float(np.clip(arr.sum() / arr.size, lo, hi))
    return Summary(min=lo, max=hi, avg=avg)


__all__ = ["EMPTY_SUMMARY", "Summary", "compute_summary"]
