"""Learner, schedule and progress models shared by the engine and the API."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

Difficulty = Literal["beginner", "intermediate", "advanced"]
LearningStyle = Literal["visual", "auditory", "kinesthetic", "reading"]
SessionType = Literal["learning", "practice", "review"]
Priority = Literal["low", "medium", "high"]
TimeOfDayPreference = Literal["morning", "afternoon", "evening", "night"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SessionResource(BaseModel):
    type: str
    title: str
    url: str = "#"


class StudySession(BaseModel):
    """Single one-hour slot of the plan. Only ``completed`` and ``notes`` change after assembly."""

    day: int = Field(..., ge=1)
    time: str
    subject: str
    topic: str
    session_type: SessionType
    priority: Priority
    completed: bool = False
    duration: int = Field(default=1, ge=1)
    notes: str = ""
    resources: List[SessionResource] = Field(default_factory=list)


class StudyRequest(BaseModel):
    """Constraints submitted by the learner; stored as form history on the learner record."""

    exam_date: date
    subjects: List[str] = Field(default_factory=list)
    study_hours_per_day: int = Field(default=4, ge=0)
    difficulty: Difficulty = "intermediate"
    learning_style: Optional[LearningStyle] = None
    study_preferences: List[TimeOfDayPreference] = Field(default_factory=list)
    subject_file_topics: Dict[str, List[str]] = Field(default_factory=dict)
    study_goals: str = ""


class StudySchedule(BaseModel):
    generated_at: datetime = Field(default_factory=_now)
    exam_date: date
    days_until_exam: int = Field(default=0, ge=0)
    days_to_plan: int = Field(default=0, ge=0)
    sessions: List[StudySession] = Field(default_factory=list)


class StudyProgress(BaseModel):
    completion_rate: int = Field(default=0, ge=0, le=100)
    study_streak: int = Field(default=0, ge=0)
    total_hours: int = Field(default=0, ge=0)
    days_left: int = Field(default=0, ge=0)
    subject_progress: Dict[str, int] = Field(default_factory=dict)


class SubjectTally(BaseModel):
    total: int = 0
    completed: int = 0


class ScheduleStatistics(BaseModel):
    """Summary view of a schedule: type distribution and per-subject tallies."""

    total_sessions: int = 0
    completed_sessions: int = 0
    completion_rate: int = 0
    session_types: Dict[SessionType, int] = Field(
        default_factory=lambda: {"learning": 0, "practice": 0, "review": 0}
    )
    subjects: Dict[str, SubjectTally] = Field(default_factory=dict)
    subject_count: int = 0
    study_streak: int = 0


class Learner(BaseModel):
    learner_id: str
    name: str
    avatar_color: str = "#667eea"
    created_at: datetime = Field(default_factory=_now)
    last_updated: datetime = Field(default_factory=_now)
    request: Optional[StudyRequest] = None
    schedule: Optional[StudySchedule] = None
    progress: StudyProgress = Field(default_factory=StudyProgress)


__all__ = [
    "Difficulty",
    "Learner",
    "LearningStyle",
    "Priority",
    "ScheduleStatistics",
    "SessionResource",
    "SessionType",
    "StudyProgress",
    "StudyRequest",
    "StudySchedule",
    "StudySession",
    "SubjectTally",
    "TimeOfDayPreference",
]
