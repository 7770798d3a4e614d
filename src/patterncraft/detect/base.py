"""Pattern types and the classifier strategy interface."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import List, NamedTuple, Optional

from ..core.columns import NumericColumns, select_main_column


class PatternType(str, Enum):
    FIBONACCI = "fibonacci"
    SINE_WAVE = "sine_wave"
    EXPONENTIAL = "exponential"
    UNKNOWN = "unknown"


CONFIDENCE = {
    PatternType.FIBONACCI: 0.85,
    PatternType.SINE_WAVE: 0.90,
    PatternType.EXPONENTIAL: 0.88,
}
FALLBACK_CONFIDENCE = 0.5


class Detection(NamedTuple):
    pattern_type: PatternType
    confidence: float

    @classmethod
    def of(cls, pattern_type: PatternType) -> "Detection":
        return cls(pattern_type, CONFIDENCE[pattern_type])


@dataclass
class ClassificationContext:
    """Inputs shared by every classifier of one classification call.

    The main column is selected lazily, so a dataset resolved by its
    filename never goes through column selection.
    """

    source_name: str
    columns: NumericColumns
    _main_column: Optional[str] = field(default=None, init=False, repr=False)
    _main_selected: bool = field(default=False, init=False, repr=False)

    @property
    def source_key(self) -> str:
        """Lower-cased basename of the source."""
        return PurePath(self.source_name.replace("\\", "/")).name.lower()

    @property
    def main_column(self) -> Optional[str]:
        if not self._main_selected:
            self._main_column = select_main_column(self.columns)
            self._main_selected = True
        return self._main_column

    @property
    def main_values(self) -> List[float]:
        return self.columns.values(self.main_column)

    @property
    def main_column_selected(self) -> bool:
        return self._main_selected


class PatternClassifier:
    """Base class for one step of the classification chain."""

    name = "base"

    def attempt(self, context: ClassificationContext) -> Optional[Detection]:
        """Return a detection, or ``None`` to pass to the next classifier."""
        raise NotImplementedError
