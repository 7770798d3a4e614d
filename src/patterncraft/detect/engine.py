"""Classification orchestrator.

Runs the classifier chain over one dataset and assembles the immutable
:class:`ClassificationResult`.  The chain is an ordered list of
:class:`~patterncraft.detect.base.PatternClassifier`; the first detection
wins and later classifiers are never consulted.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.columns import extract_numeric_columns
from ..core.rows import read_rows
from ..core.summary import EMPTY_SUMMARY, Summary, compute_summary
from ..errors import IngestionFailure
from .base import (
    FALLBACK_CONFIDENCE,
    ClassificationContext,
    Detection,
    PatternClassifier,
    PatternType,
)
from .hints import FilenameHintClassifier
from .sequences import default_sequence_classifiers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    pattern_type: PatternType
    confidence: float
    row_count: int
    numeric_value_count: int
    summary: Summary = field(default=EMPTY_SUMMARY)
    main_column: Optional[str] = None
    summary_column: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patternType": self.pattern_type.value,
            "confidence": self.confidence,
            "rowCount": self.row_count,
            "numericValueCount": self.numeric_value_count,
            "summary": self.summary.to_dict(),
            "mainColumn": self.main_column,
            "summaryColumn": self.summary_column,
        }


def default_chain() -> List[PatternClassifier]:
    """Filename hint first, then the data-based detectors."""

    return [FilenameHintClassifier(), *default_sequence_classifiers()]


def run_chain(
    chain: Sequence[PatternClassifier], context: ClassificationContext
) -> Tuple[Optional[Detection], Optional[str]]:
    """Return the first detection of ``chain`` and the classifier name."""

    for classifier in chain:
        detection = classifier.attempt(context)
        if detection is not None:
            return detection, classifier.name
    return None, None


def _buffer_rows(rows: Iterable[Mapping[str, str]], source_name: str):
    try:
        return extract_numeric_columns(rows)
    except IngestionFailure:
        raise
    except Exception as exc:
        raise IngestionFailure(str(exc), source=source_name) from exc


def classify_rows(
    rows: Iterable[Mapping[str, str]],
    source_name: str,
    chain: Optional[Sequence[PatternClassifier]] = None,
) -> ClassificationResult:
    """Classify a dataset given as a stream of rows.

    Every row is buffered before any classifier runs.  A failure raised by
    the row stream aborts the call with :class:`IngestionFailure`.
    """

    columns = _buffer_rows(rows, source_name)
    logger.debug(
        "Parsed %d rows, numeric columns: %s", columns.row_count, list(columns.series)
    )

    context = ClassificationContext(source_name=source_name, columns=columns)
    detection, matched_by = run_chain(chain if chain is not None else default_chain(), context)
    if detection is None:
        pattern_type, confidence = PatternType.UNKNOWN, FALLBACK_CONFIDENCE
    else:
        pattern_type, confidence = detection

    summary_column = columns.first_column
    summary_values = columns.values(summary_column)
    result = ClassificationResult(
        pattern_type=pattern_type,
        confidence=confidence,
        row_count=columns.row_count,
        numeric_value_count=len(summary_values),
        summary=compute_summary(summary_values),
        main_column=context.main_column if context.main_column_selected else None,
        summary_column=summary_column,
    )
    logger.info(
        "Classified %r as %s (%.0f%% confidence, via %s)",
        source_name,
        result.pattern_type.value,
        result.confidence * 100,
        matched_by or "fallback",
    )
    return result


def classify_file(
    path: str | Path,
    source_name: Optional[str] = None,
    chain: Optional[Sequence[PatternClassifier]] = None,
) -> ClassificationResult:
    """Read a CSV/JSON dataset from disk and classify it.

    ``source_name`` defaults to the file name and feeds the filename hint.
    """

    path = Path(path)
    return classify_rows(read_rows(path), source_name or path.name, chain=chain)


__all__ = [
    "ClassificationResult",
    "classify_file",
    "classify_rows",
    "default_chain",
    "run_chain",
]
