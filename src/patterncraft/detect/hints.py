"""Filename keyword hints."""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .base import ClassificationContext, Detection, PatternClassifier, PatternType

logger = logging.getLogger(__name__)

# Checked in order; the first keyword group contained in the name wins.
HINT_KEYWORDS: Sequence[Tuple[PatternType, Tuple[str, ...]]] = (
    (PatternType.FIBONACCI, ("fibonacci", "spiral")),
    (PatternType.SINE_WAVE, ("tide", "wave", "ocean")),
    (PatternType.EXPONENTIAL, ("viral", "growth", "exponential")),
)


def hint_from_name(name: str) -> Optional[PatternType]:
    """Return the pattern suggested by ``name`` (already lower-cased)."""

    for pattern_type, keywords in HINT_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return pattern_type
    return None


class FilenameHintClassifier(PatternClassifier):
    """Authoritative shortcut based on the dataset's source name."""

    name = "filename_hint"

    def attempt(self, context: ClassificationContext) -> Optional[Detection]:
        pattern_type = hint_from_name(context.source_key)
        if pattern_type is None:
            return None
        logger.info("Filename %r suggests %s", context.source_key, pattern_type.value)
        return Detection.of(pattern_type)
