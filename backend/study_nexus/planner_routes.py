"""Learner-centric REST endpoints for schedule generation and progress tracking."""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from .errors import (
    DuplicateLearnerError,
    EmptySubjectsError,
    LearnerNotFoundError,
    ScheduleNotFoundError,
    SessionNotFoundError,
)
from .learner_store import LearnerStore
from .models import Learner, ScheduleStatistics, StudyProgress, StudyRequest, StudySchedule
from .planner_service import PlannerService

router = APIRouter(prefix="/api/learners", tags=["learners"])
logger = logging.getLogger(__name__)

_planner_service: Optional[PlannerService] = None


def get_planner_service() -> PlannerService:
    global _planner_service
    if _planner_service is None:
        _planner_service = PlannerService(LearnerStore())
    return _planner_service


class LearnerCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    avatar_color: Optional[str] = Field(default=None, max_length=32)


class ScheduleGenerateRequest(StudyRequest):
    subjects: List[str] = Field(..., min_length=1)


class SessionUpdateRequest(BaseModel):
    completed: Optional[bool] = None
    toggle: bool = False
    notes: Optional[str] = Field(default=None, max_length=2000)


def _not_found(exc: LookupError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _require_learner(service: PlannerService, learner_id: str) -> Learner:
    learner = service.store.get(learner_id)
    if learner is None:
        raise _not_found(LearnerNotFoundError(learner_id))
    return learner


@router.post("", response_model=Learner, status_code=status.HTTP_201_CREATED)
def create_learner(
    payload: LearnerCreateRequest,
    service: PlannerService = Depends(get_planner_service),
) -> Learner:
    try:
        return service.store.create(payload.name, payload.avatar_color)
    except DuplicateLearnerError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


@router.get("", response_model=List[Learner], status_code=status.HTTP_200_OK)
def list_learners(service: PlannerService = Depends(get_planner_service)) -> List[Learner]:
    return service.store.list()


@router.get("/{learner_id}", response_model=Learner, status_code=status.HTTP_200_OK)
def get_learner(learner_id: str, service: PlannerService = Depends(get_planner_service)) -> Learner:
    return _require_learner(service, learner_id)


@router.delete("/{learner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_learner(learner_id: str, service: PlannerService = Depends(get_planner_service)) -> None:
    if not service.store.delete(learner_id):
        raise _not_found(LearnerNotFoundError(learner_id))


@router.post("/{learner_id}/schedule", response_model=StudySchedule, status_code=status.HTTP_200_OK)
def generate_schedule(
    learner_id: str,
    payload: ScheduleGenerateRequest,
    service: PlannerService = Depends(get_planner_service),
) -> StudySchedule:
    try:
        learner = service.generate_schedule_for_learner(learner_id, payload)
    except LearnerNotFoundError as exc:
        raise _not_found(exc) from exc
    except EmptySubjectsError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return learner.schedule  # type: ignore[return-value]


@router.get("/{learner_id}/schedule", response_model=StudySchedule, status_code=status.HTTP_200_OK)
def get_schedule(
    learner_id: str,
    session_type: Literal["all", "learning", "practice", "review"] = Query(default="all"),
    service: PlannerService = Depends(get_planner_service),
) -> StudySchedule:
    learner = _require_learner(service, learner_id)
    schedule = learner.schedule
    if schedule is None:
        raise _not_found(ScheduleNotFoundError(learner_id))
    if session_type != "all":
        schedule.sessions = [session for session in schedule.sessions if session.session_type == session_type]
    return schedule


@router.patch(
    "/{learner_id}/sessions/{day}/{index}",
    response_model=StudyProgress,
    status_code=status.HTTP_200_OK,
)
def update_session(
    learner_id: str,
    day: int,
    index: int,
    payload: SessionUpdateRequest,
    service: PlannerService = Depends(get_planner_service),
) -> StudyProgress:
    try:
        if payload.notes is not None:
            service.update_session_notes(learner_id, day, index, payload.notes)
        if payload.toggle or payload.completed is not None:
            learner = service.set_session_completed(
                learner_id,
                day,
                index,
                None if payload.toggle else payload.completed,
            )
            return learner.progress
        return service.get_progress(learner_id)
    except (LearnerNotFoundError, ScheduleNotFoundError, SessionNotFoundError) as exc:
        raise _not_found(exc) from exc


@router.get("/{learner_id}/progress", response_model=StudyProgress, status_code=status.HTTP_200_OK)
def get_progress(learner_id: str, service: PlannerService = Depends(get_planner_service)) -> StudyProgress:
    try:
        return service.get_progress(learner_id)
    except (LearnerNotFoundError, ScheduleNotFoundError) as exc:
        raise _not_found(exc) from exc


@router.get(
    "/{learner_id}/statistics",
    response_model=ScheduleStatistics,
    status_code=status.HTTP_200_OK,
)
def get_statistics(
    learner_id: str,
    service: PlannerService = Depends(get_planner_service),
) -> ScheduleStatistics:
    try:
        return service.get_statistics(learner_id)
    except (LearnerNotFoundError, ScheduleNotFoundError) as exc:
        raise _not_found(exc) from exc


__all__ = ["get_planner_service", "router"]
