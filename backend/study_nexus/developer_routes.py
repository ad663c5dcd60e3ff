"""Developer utilities for resetting planner state (enabled by NEXUS_DEBUG_ENDPOINTS)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from .config import Settings, get_settings
from .planner_routes import get_planner_service
from .planner_service import PlannerService
from .telemetry import emit_event

logger = logging.getLogger(__name__)


def _require_debug_endpoints(settings: Settings = Depends(get_settings)) -> None:
    if not settings.debug_endpoints:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


router = APIRouter(
    prefix="/api/developer",
    tags=["developer"],
    dependencies=[Depends(_require_debug_endpoints)],
)


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
def developer_reset(service: PlannerService = Depends(get_planner_service)) -> Response:
    cleared = service.store.clear()
    logger.warning("Developer reset removed %s learners", cleared)
    emit_event("developer_reset", learner_count=cleared)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
