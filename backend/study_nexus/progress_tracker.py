"""Progress analytics derived from a (possibly mutated) session list."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from .models import ScheduleStatistics, StudyProgress, StudySession, SubjectTally

STREAK_LOOKBACK_DAYS = 365


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return _round_half_up(100 * part / whole)


def days_until_exam(exam_date: date, now: datetime) -> int:
    """Whole days from ``now`` to the start of ``exam_date``, rounded up and floored at 0."""
    exam_start = datetime.combine(exam_date, time.min, tzinfo=now.tzinfo)
    remaining = (exam_start - now) / timedelta(days=1)
    return max(0, math.ceil(remaining))


def study_streak(
    sessions: Sequence[StudySession],
    today: date,
    *,
    lookback_days: int = STREAK_LOOKBACK_DAYS,
) -> int:
    # Session day N is anchored to ``today - (N - 1)``, i.e. to the evaluation date.
    completed_dates = {today - timedelta(days=session.day - 1) for session in sessions if session.completed}
    streak = 0
    for offset in range(lookback_days):
        check_date = today - timedelta(days=offset)
        if check_date in completed_dates:
            streak += 1
        elif offset > 0:
            break
    return streak


def subject_progress(sessions: Iterable[StudySession]) -> Dict[str, int]:
    totals: Dict[str, List[int]] = {}
    for session in sessions:
        tally = totals.setdefault(session.subject, [0, 0])
        tally[0] += 1
        if session.completed:
            tally[1] += 1
    return {subject: _percentage(done, total) for subject, (total, done) in totals.items()}


def recompute(
    sessions: Sequence[StudySession],
    exam_date: date,
    now: datetime,
    *,
    lookback_days: int = STREAK_LOOKBACK_DAYS,
) -> StudyProgress:
    completed = [session for session in sessions if session.completed]
    return StudyProgress(
        completion_rate=_percentage(len(completed), len(sessions)),
        study_streak=study_streak(sessions, now.date(), lookback_days=lookback_days),
        total_hours=sum(session.duration for session in completed),
        days_left=days_until_exam(exam_date, now),
        subject_progress=subject_progress(sessions),
    )


def compute_statistics(
    sessions: Sequence[StudySession],
    progress: Optional[StudyProgress] = None,
) -> ScheduleStatistics:
    stats = ScheduleStatistics()
    for session in sessions:
        stats.total_sessions += 1
        stats.session_types[session.session_type] += 1
        tally = stats.subjects.setdefault(session.subject, SubjectTally())
        tally.total += 1
        if session.completed:
            stats.completed_sessions += 1
            tally.completed += 1
    stats.completion_rate = _percentage(stats.completed_sessions, stats.total_sessions)
    stats.subject_count = len(stats.subjects)
    stats.study_streak = progress.study_streak if progress else 0
    return stats


__all__ = [
    "STREAK_LOOKBACK_DAYS",
    "compute_statistics",
    "days_until_exam",
    "recompute",
    "study_streak",
    "subject_progress",
]
