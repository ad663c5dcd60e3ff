"""Learner-facing planning operations: generation, completion tracking and analytics."""

from __future__ import annotations

import logging
import random
import threading
from datetime import datetime, timezone
from time import perf_counter
from typing import Dict, List, Optional, Tuple

from .config import Settings, get_settings
from .errors import (
    EmptySubjectsError,
    GenerationCancelledError,
    ScheduleNotFoundError,
    SessionNotFoundError,
)
from .learner_store import LearnerStore
from .models import (
    Learner,
    ScheduleStatistics,
    StudyProgress,
    StudyRequest,
    StudySchedule,
    StudySession,
)
from .progress_tracker import compute_statistics, days_until_exam, recompute
from .schedule_assembler import ScheduleAssembler
from .telemetry import emit_event

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def clean_subjects(subjects: List[str]) -> List[str]:
    return [subject.strip() for subject in subjects if subject and subject.strip()]


def clean_file_topics(file_topics: Dict[str, List[str]]) -> Dict[str, List[str]]:
    """Key file topics by the same stripped subject names ``clean_subjects`` produces."""
    return {subject.strip(): topics for subject, topics in file_topics.items() if subject and subject.strip()}


def _locate_session(schedule: StudySchedule, day: int, index: int) -> Tuple[int, StudySession]:
    """Map ``(day, index within day)`` to a position in the creation-ordered session list."""
    seen = 0
    for position, session in enumerate(schedule.sessions):
        if session.day != day:
            continue
        if seen == index:
            return position, session
        seen += 1
    raise SessionNotFoundError(day, index)


class PlannerService:
    """Runs the scheduling engine against an explicit learner store."""

    def __init__(self, store: LearnerStore, settings: Optional[Settings] = None) -> None:
        self._store = store
        self._settings = settings or get_settings()

    @property
    def store(self) -> LearnerStore:
        return self._store

    def _rng(self, rng: Optional[random.Random]) -> random.Random:
        if rng is not None:
            return rng
        if self._settings.random_seed is not None:
            return random.Random(self._settings.random_seed)
        return random.Random()

    def _stage(self, learner_id: str, stage: str, **fields) -> None:
        emit_event("planner_stage", learner_id=learner_id, stage=stage, **fields)

    def _recompute(self, learner: Learner, now: datetime) -> StudyProgress:
        schedule = learner.schedule
        if schedule is None:
            return StudyProgress()
        return recompute(
            schedule.sessions,
            schedule.exam_date,
            now,
            lookback_days=self._settings.streak_lookback_days,
        )

    def generate_schedule_for_learner(
        self,
        learner_id: str,
        request: StudyRequest,
        *,
        now: Optional[datetime] = None,
        rng: Optional[random.Random] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Learner:
        self._store.require(learner_id)
        subjects = clean_subjects(request.subjects)
        if not subjects:
            raise EmptySubjectsError()

        now = now or _now()
        request = StudyRequest.model_validate(
            {
                **request.model_dump(),
                "subjects": subjects,
                "subject_file_topics": clean_file_topics(request.subject_file_topics),
            }
        )

        self._stage(learner_id, "analyzing_requirements", subject_count=len(subjects))
        if any(request.subject_file_topics.get(subject) for subject in subjects):
            self._stage(learner_id, "analyzing_materials")
        self._stage(learner_id, "optimizing_learning_paths")

        if cancel_event is not None and cancel_event.is_set():
            emit_event("schedule_generation", learner_id=learner_id, status="cancelled")
            raise GenerationCancelledError(f"Schedule generation for '{learner_id}' was cancelled.")

        total_days = days_until_exam(request.exam_date, now)
        started_at = perf_counter()
        sessions = ScheduleAssembler(max_plan_days=self._settings.max_plan_days).generate(
            subjects,
            total_days,
            request.study_hours_per_day,
            request.difficulty,
            request.learning_style,
            request.study_preferences,
            request.subject_file_topics,
            rng=self._rng(rng),
        )
        duration_ms = round((perf_counter() - started_at) * 1000.0, 2)

        schedule = StudySchedule(
            generated_at=now,
            exam_date=request.exam_date,
            days_until_exam=total_days,
            days_to_plan=min(total_days, self._settings.max_plan_days),
            sessions=sessions,
        )

        def _replace_schedule(learner: Learner) -> None:
            learner.request = request
            learner.schedule = schedule
            learner.progress = self._recompute(learner, now)

        learner = self._store.update(learner_id, _replace_schedule)

        if not sessions:
            logger.warning(
                "No sessions generated for %s; exam date %s is not in the future",
                learner_id,
                request.exam_date,
            )
        else:
            self._stage(learner_id, "implementing_sessions", session_count=len(sessions))

        emit_event(
            "schedule_generation",
            learner_id=learner_id,
            status="success" if sessions else "empty",
            duration_ms=duration_ms,
            session_count=len(sessions),
            days_until_exam=total_days,
            days_to_plan=schedule.days_to_plan,
            subject_count=len(subjects),
            learning_style=request.learning_style,
        )
        return learner

    def _require_schedule(self, learner: Learner) -> StudySchedule:
        if learner.schedule is None:
            raise ScheduleNotFoundError(learner.learner_id)
        return learner.schedule

    def set_session_completed(
        self,
        learner_id: str,
        day: int,
        index: int,
        completed: Optional[bool] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Learner:
        """Set (or toggle when ``completed`` is None) a session's completion flag."""
        now = now or _now()

        def _mark(learner: Learner) -> None:
            _, session = _locate_session(self._require_schedule(learner), day, index)
            session.completed = (not session.completed) if completed is None else completed
            learner.progress = self._recompute(learner, now)

        learner = self._store.update(learner_id, _mark)
        _, session = _locate_session(self._require_schedule(learner), day, index)
        emit_event(
            "session_completion",
            learner_id=learner_id,
            day=day,
            index=index,
            completed=session.completed,
            completion_rate=learner.progress.completion_rate,
        )
        return learner

    def update_session_notes(self, learner_id: str, day: int, index: int, notes: str) -> Learner:
        def _annotate(learner: Learner) -> None:
            _, session = _locate_session(self._require_schedule(learner), day, index)
            session.notes = notes

        return self._store.update(learner_id, _annotate)

    def get_progress(self, learner_id: str, *, now: Optional[datetime] = None) -> StudyProgress:
        learner = self._store.require(learner_id)
        self._require_schedule(learner)
        return self._recompute(learner, now or _now())

    def get_statistics(self, learner_id: str, *, now: Optional[datetime] = None) -> ScheduleStatistics:
        learner = self._store.require(learner_id)
        schedule = self._require_schedule(learner)
        return compute_statistics(schedule.sessions, self._recompute(learner, now or _now()))


__all__ = ["PlannerService", "clean_file_topics", "clean_subjects"]
