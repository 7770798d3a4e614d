"""API request/response models (light-weight)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..core.rows import Row

Scalar = Union[str, int, float, bool, None]


@dataclass
class MessageResponse:
    message: str


class PatternBrief(BaseModel):
    """Short description of a classification returned after an upload."""

    id: Optional[int] = None
    type: str
    confidence: str
    dataPoints: int


class UploadResponse(BaseModel):
    message: str
    pattern: PatternBrief


class SummaryModel(BaseModel):
    min: Optional[float] = None
    max: Optional[float] = None
    avg: Optional[float] = None


class ClassificationModel(BaseModel):
    patternType: str
    confidence: float
    rowCount: int
    numericValueCount: int
    summary: SummaryModel
    mainColumn: Optional[str] = None
    summaryColumn: Optional[str] = None


class ClassifyRequest(BaseModel):
    """Rows supplied inline instead of as an uploaded file."""

    source_name: str = Field("", description="Dataset name used for the filename hint")
    rows: List[Dict[str, Scalar]] = Field(default_factory=list)

    def as_rows(self) -> List[Row]:
        out: List[Row] = []
        for record in self.rows:
            out.append({key: str(value) for key, value in record.items() if value is not None})
        return out


def format_confidence(confidence: float) -> str:
    """Render a confidence as a whole percentage, e.g. ``"85%"``."""

    return f"{confidence * 100:.0f}%"


def brief_from_payload(payload: Dict[str, Any]) -> PatternBrief:
    return PatternBrief(
        id=payload.get("id"),
        type=payload["patternType"],
        confidence=format_confidence(payload["confidence"]),
        dataPoints=payload["dataPoints"],
    )


__all__ = [
    "ClassificationModel",
    "ClassifyRequest",
    "MessageResponse",
    "PatternBrief",
    "SummaryModel",
    "UploadResponse",
    "brief_from_payload",
    "format_confidence",
]
