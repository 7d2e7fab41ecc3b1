"""
Schedule API endpoints: weekly optimization and conflict checks.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..schemas import Event, WeeklySchedule, ConflictRequest, ConflictResult, CacheClearResponse
from ..scheduling.constraints.conflict_detection import MISSING_EVENT_REASON
from ..services.scheduler_service import SchedulerService, get_scheduler_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/optimize", response_model=WeeklySchedule)
def optimize_schedule(
    events: List[Event],
    service: SchedulerService = Depends(get_scheduler_service),
):
    """
    Lay out the given events over Monday-Friday.
    Fixed events keep their slot; flexible ones are placed to minimize travel.
    """
    logger.info(f"Optimizing schedule for {len(events)} events")
    return service.build_schedule(events)


@router.post("/conflict", response_model=ConflictResult, response_model_exclude_none=True)
def check_events_conflict(
    payload: ConflictRequest,
    service: SchedulerService = Depends(get_scheduler_service),
):
    """Check whether two events conflict, including travel time between them."""
    if payload.first is None or payload.second is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"conflict": False, "reason": MISSING_EVENT_REASON},
        )
    return service.check_conflict(payload.first, payload.second)


@router.delete("/travel-cache", response_model=CacheClearResponse)
def clear_travel_cache(service: SchedulerService = Depends(get_scheduler_service)):
    """Drop all memoized travel times."""
    cleared = service.clear_travel_cache()
    return CacheClearResponse(message="Travel time cache cleared", entries_cleared=cleared)
