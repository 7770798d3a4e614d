"""Light-weight data models for the persistence layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.summary import Summary
from ..detect.engine import ClassificationResult


@dataclass
class PatternRecord:
    """Represents a row in the ``pattern_results`` table."""

    owner_id: str
    filename: str
    original_name: str
    pattern_type: str
    confidence: float
    row_count: int
    numeric_value_count: int
    summary_min: float | None = None
    summary_max: float | None = None
    summary_avg: float | None = None
    main_column: str | None = None
    summary_column: str | None = None
    id: Optional[int] = None
    created_at: str | None = None

    @classmethod
    def from_result(
        cls,
        result: ClassificationResult,
        *,
        owner_id: str,
        filename: str,
        original_name: str,
    ) -> "PatternRecord":
        return cls(
            owner_id=owner_id,
            filename=filename,
            original_name=original_name,
            pattern_type=result.pattern_type.value,
            confidence=result.confidence,
            row_count=result.row_count,
            numeric_value_count=result.numeric_value_count,
            summary_min=result.summary.min,
            summary_max=result.summary.max,
            summary_avg=result.summary.avg,
            main_column=result.main_column,
            summary_column=result.summary_column,
        )

    @property
    def summary(self) -> Summary:
        return Summary(min=self.summary_min, max=self.summary_max, avg=self.summary_avg)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "ownerId": self.owner_id,
            "filename": self.filename,
            "originalName": self.original_name,
            "patternType": self.pattern_type,
            "confidence": self.confidence,
            "dataPoints": self.row_count,
            "numericValueCount": self.numeric_value_count,
            "summary": self.summary.to_dict(),
            "mainColumn": self.main_column,
            "summaryColumn": self.summary_column,
            "createdAt": self.created_at,
        }


__all__ = ["PatternRecord"]
