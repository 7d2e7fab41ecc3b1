"""
Pairwise conflict checks between two events, taking travel time into account.
"""

import logging
from typing import Optional
from ...schemas import Event, ConflictResult
from ...services.travel_time import TravelTimeError

logger = logging.getLogger(__name__)

MISSING_EVENT_REASON = "Missing event data"
TIME_OVERLAP_REASON = "Time overlap detected"
TRAVEL_LOOKUP_FAILED_REASON = "Could not calculate travel time, assuming conflict"


def time_range_overlap(first: Event, second: Event) -> bool:
    """Half-open overlap test; events without full start/end never overlap."""
    if (first.start_time is None or first.end_time is None or
            second.start_time is None or second.end_time is None):
        return False
    return first.start_time < second.end_time and second.start_time < first.end_time


def check_conflict(first: Optional[Event], second: Optional[Event], travel_time_service) -> ConflictResult:
    """
    Decide whether two events conflict.

    Events that do not overlap in time never conflict. Overlapping events
    conflict unless the gap between them covers the travel time from the
    first address to the second. Missing addresses and failed lookups are
    treated as conflicts.
    """
    if first is None or second is None:
        return ConflictResult(conflict=False, reason=MISSING_EVENT_REASON)

    logger.info(f"Checking conflict between '{first.title}' and '{second.title}'")

    if not time_range_overlap(first, second):
        return ConflictResult(conflict=False)

    if not first.address or not second.address:
        logger.warning("Missing address for one or both events, assuming conflict")
        return ConflictResult(conflict=True, reason=TIME_OVERLAP_REASON)

    try:
        travel_minutes = travel_time_service.get_travel_time_minutes(first.address, second.address)
    except TravelTimeError as e:
        logger.error(f"Error calculating travel time: {e}")
        return ConflictResult(conflict=True, reason=TRAVEL_LOOKUP_FAILED_REASON)

    gap_minutes = second.start_time - first.end_time
    if gap_minutes < travel_minutes:
        logger.info(f"Conflict detected: need {travel_minutes} min travel, only {gap_minutes} min gap")
        return ConflictResult(
            conflict=True,
            reason=f"Need {travel_minutes} min travel time, only {gap_minutes} min available",
        )

    logger.info(f"No conflict: {gap_minutes} min gap is enough for {travel_minutes} min travel")
    return ConflictResult(conflict=False)
