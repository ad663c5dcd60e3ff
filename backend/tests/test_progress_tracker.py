"""Tests for progress recomputation and schedule statistics."""

from __future__ import annotations

from datetime import date, datetime, timezone

from study_nexus.models import StudySession
from study_nexus.progress_tracker import (
    compute_statistics,
    days_until_exam,
    recompute,
    study_streak,
    subject_progress,
)

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def _session(day: int, subject: str = "Physics", *, completed: bool = False, session_type: str = "learning") -> StudySession:
    return StudySession(
        day=day,
        time="09:00",
        subject=subject,
        topic="Classical Mechanics",
        session_type=session_type,
        priority="low",
        completed=completed,
    )


def test_empty_schedule_yields_zeroed_progress() -> None:
    progress = recompute([], date(2026, 3, 6), NOW)
    assert progress.completion_rate == 0
    assert progress.total_hours == 0
    assert progress.study_streak == 0
    assert progress.subject_progress == {}
    assert progress.days_left == 5


def test_days_until_exam_rounds_up_and_floors_at_zero() -> None:
    assert days_until_exam(date(2026, 3, 6), NOW) == 5
    assert days_until_exam(date(2026, 3, 2), NOW) == 1
    assert days_until_exam(date(2026, 3, 1), NOW) == 0
    assert days_until_exam(date(2026, 2, 1), NOW) == 0
    assert days_until_exam(date(2026, 3, 2), datetime(2026, 3, 1, 0, 0, tzinfo=timezone.utc)) == 1


def test_completion_rate_rounds_half_up() -> None:
    sessions = [_session(1, completed=True)] + [_session(day) for day in range(2, 9)]
    progress = recompute(sessions, date(2026, 3, 20), NOW)
    assert progress.completion_rate == 13
    assert progress.total_hours == 1


def test_streak_counts_consecutive_completed_days() -> None:
    today = NOW.date()
    sessions = [_session(1, completed=True), _session(2, completed=True), _session(3), _session(4, completed=True)]
    assert study_streak(sessions, today) == 2


def test_streak_tolerates_missing_first_day_only() -> None:
    today = NOW.date()
    assert study_streak([_session(1), _session(2, completed=True), _session(3, completed=True)], today) == 2
    assert study_streak([_session(1), _session(2), _session(3, completed=True)], today) == 0


def test_streak_respects_lookback_window() -> None:
    sessions = [_session(day, completed=True) for day in range(1, 11)]
    assert study_streak(sessions, NOW.date()) == 10
    assert study_streak(sessions, NOW.date(), lookback_days=4) == 4


def test_subject_progress_per_subject_percentages() -> None:
    sessions = [
        _session(1, "Physics", completed=True),
        _session(1, "Physics"),
        _session(2, "Chemistry", completed=True),
        _session(2, "Chemistry", completed=True),
        _session(3, "Chemistry"),
    ]
    assert subject_progress(sessions) == {"Physics": 50, "Chemistry": 67}


def test_statistics_tally_types_and_subjects() -> None:
    sessions = [
        _session(1, "Physics", completed=True),
        _session(1, "Chemistry", session_type="practice"),
        _session(2, "Physics", session_type="review", completed=True),
        _session(2, "Chemistry", session_type="review"),
    ]
    progress = recompute(sessions, date(2026, 3, 10), NOW)
    stats = compute_statistics(sessions, progress)

    assert stats.total_sessions == 4
    assert stats.completed_sessions == 2
    assert stats.completion_rate == 50
    assert stats.session_types == {"learning": 1, "practice": 1, "review": 2}
    assert stats.subjects["Physics"].total == 2
    assert stats.subjects["Physics"].completed == 2
    assert stats.subjects["Chemistry"].completed == 0
    assert stats.subject_count == 2
    assert stats.study_streak == progress.study_streak == 2
