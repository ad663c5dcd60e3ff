"""Daily learning/practice/review slot patterns."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .models import SessionType

EXAM_APPROACH_RATIO = 0.7

DEFAULT_PATTERN: Tuple[SessionType, ...] = ("learning", "learning", "practice", "review")
EXAM_APPROACH_PATTERN: Tuple[SessionType, ...] = ("review", "practice", "review", "practice")
STYLE_PATTERNS: Dict[str, Tuple[SessionType, ...]] = {
    "visual": ("learning", "practice", "practice", "review"),
    "auditory": ("learning", "review", "learning", "practice"),
    "kinesthetic": ("practice", "practice", "learning", "review"),
    "reading": ("learning", "learning", "review", "practice"),
}


def sequence_for(day: int, days_to_plan: int, learning_style: Optional[str]) -> List[SessionType]:
    """Return the 4-slot cycle for ``day``; slot ``i`` uses ``pattern[i % 4]``."""
    if day > days_to_plan * EXAM_APPROACH_RATIO:
        return list(EXAM_APPROACH_PATTERN)
    return list(STYLE_PATTERNS.get(learning_style or "", DEFAULT_PATTERN))


__all__ = [
    "DEFAULT_PATTERN",
    "EXAM_APPROACH_PATTERN",
    "EXAM_APPROACH_RATIO",
    "STYLE_PATTERNS",
    "sequence_for",
]
