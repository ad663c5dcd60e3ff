"""Day-by-day study plan assembly."""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Mapping, Optional, Sequence

from .models import Difficulty, Priority, StudySession
from .review_scheduler import ReviewScheduler
from .session_rotator import sequence_for
from .topic_bank import build_topic_bank, resources_for

logger = logging.getLogger(__name__)


MAX_PLAN_DAYS = 30
LOW_PRIORITY_RATIO = 0.3
MEDIUM_PRIORITY_RATIO = 0.7

PREFERENCE_HOURS: Dict[str, List[int]] = {
    "morning": [6, 7, 8, 9, 10, 11],
    "afternoon": [12, 13, 14, 15, 16, 17],
    "evening": [18, 19, 20, 21, 22, 23],
    "night": [0, 1, 2, 3, 4, 5],
}
DEFAULT_HOURS: List[int] = [9, 10, 11, 14, 15, 16, 19, 20, 21]


def available_hours(preferences: Optional[Sequence[str]]) -> List[int]:
    """Concatenate preference hours in selection order; overlaps are kept."""
    if not preferences:
        return list(DEFAULT_HOURS)
    hours: List[int] = []
    for preference in preferences:
        hours.extend(PREFERENCE_HOURS.get(preference, []))
    return hours


def priority_for(day: int, total_days_until_exam: int) -> Priority:
    if day <= total_days_until_exam * LOW_PRIORITY_RATIO:
        return "low"
    if day <= total_days_until_exam * MEDIUM_PRIORITY_RATIO:
        return "medium"
    return "high"


def format_hour(hour: int) -> str:
    return f"{hour:02d}:00"


class ScheduleAssembler:
    """Greedy slot filler: rotates subjects, draws topics and queues spaced reviews.

    Each ``generate`` call owns its topic bank and review queues, so one assembler can be
    shared across learners. Pass a seeded ``random.Random`` for reproducible topic draws.
    """

    def __init__(self, *, max_plan_days: int = MAX_PLAN_DAYS, rng: Optional[random.Random] = None) -> None:
        self._max_plan_days = max(max_plan_days, 1)
        self._rng = rng

    def generate(
        self,
        subjects: Sequence[str],
        total_days_until_exam: int,
        study_hours_per_day: int,
        difficulty: Difficulty,
        learning_style: Optional[str] = None,
        time_preferences: Optional[Sequence[str]] = None,
        subject_file_topics: Optional[Mapping[str, Sequence[str]]] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> List[StudySession]:
        if total_days_until_exam <= 0:
            return []

        draw = rng or self._rng or random.Random()
        days_to_plan = min(total_days_until_exam, self._max_plan_days)
        hours = available_hours(time_preferences)
        topic_bank = build_topic_bank(subjects, difficulty, subject_file_topics)
        reviews = ReviewScheduler(subjects)
        slots_per_day = max(min(study_hours_per_day, len(hours)), 0)

        sessions: List[StudySession] = []
        for day in range(1, days_to_plan + 1):
            session_types = sequence_for(day, days_to_plan, learning_style)
            priority = priority_for(day, total_days_until_exam)
            for slot in range(slots_per_day):
                hour = hours[slot % len(hours)]
                subject = subjects[(day + slot - 1) % len(subjects)]
                session_type = session_types[slot % len(session_types)]

                topic = reviews.next_review(subject) if session_type == "review" else None
                if topic is None:
                    topics = topic_bank[subject]
                    topic = topics[draw.randrange(len(topics))]
                    if session_type == "learning":
                        reviews.record_learning(subject, topic, day, days_to_plan)

                sessions.append(
                    StudySession(
                        day=day,
                        time=format_hour(hour),
                        subject=subject,
                        topic=topic,
                        session_type=session_type,
                        priority=priority,
                        resources=resources_for(subject),
                    )
                )

        logger.debug(
            "Assembled %s sessions over %s days (%s slots/day, %s reviews left queued)",
            len(sessions),
            days_to_plan,
            slots_per_day,
            len(reviews),
        )
        return sessions


__all__ = [
    "DEFAULT_HOURS",
    "MAX_PLAN_DAYS",
    "PREFERENCE_HOURS",
    "ScheduleAssembler",
    "available_hours",
    "format_hour",
    "priority_for",
]
