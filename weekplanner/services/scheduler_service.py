"""
Scheduler service that wires the scheduling core to a shared travel time service.
"""

import logging
from datetime import date
from typing import List, Optional
from fastapi import Request

from ..schemas import Event, WeeklySchedule, ConflictResult
from ..scheduling import WeeklyScheduler, check_conflict
from .travel_time import TravelTimeService

logger = logging.getLogger(__name__)


class SchedulerService:
    """Entry point for schedule optimization and conflict checks."""

    def __init__(self, travel_time_service: Optional[TravelTimeService] = None):
        self.travel_time_service = travel_time_service or TravelTimeService()

    def build_schedule(self, events: List[Event], today: Optional[date] = None) -> WeeklySchedule:
        """Build a fresh weekly schedule; nothing is kept between calls."""
        scheduler = WeeklyScheduler(self.travel_time_service, today=today)
        return scheduler.build_schedule(events)

    def check_conflict(self, first: Optional[Event], second: Optional[Event]) -> ConflictResult:
        return check_conflict(first, second, self.travel_time_service)

    def clear_travel_cache(self) -> int:
        cleared = self.travel_time_service.clear_cache()
        logger.info(f"Cleared {cleared} cached travel times")
        return cleared


def get_scheduler_service(request: Request) -> SchedulerService:
    """FastAPI dependency: the service created at app startup."""
    return request.app.state.scheduler_service
