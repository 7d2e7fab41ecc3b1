"""
Travel-based scoring for placing an event into a free slot.
"""

import logging
from typing import List, Optional, Tuple
from ...schemas import Event
from ...services.travel_time import TravelTimeError
from ..core.time_slot import TimeSlot
from ..core.constants import NO_ADDRESS_SCORE, TRAVEL_FALLBACK_PENALTY

logger = logging.getLogger(__name__)


def find_neighbors(day_events: List[Event], slot: TimeSlot) -> Tuple[Optional[Event], Optional[Event]]:
    """
    Return the events surrounding a slot: the one ending last at or before
    slot.start, and the one starting first at or after slot.end.
    """
    before = None
    after = None
    for event in day_events:
        if event.end_time <= slot.start and (before is None or event.end_time > before.end_time):
            before = event
        if event.start_time >= slot.end and (after is None or event.start_time < after.start_time):
            after = event
    return before, after


def calculate_distance_score(day_events: List[Event], candidate: Event, slot: TimeSlot, travel_time_service) -> float:
    """
    Score a candidate placement by the travel it adds (lower is better).

    Travel from the previous event's address and to the next event's address
    is summed. Candidates without an address all get NO_ADDRESS_SCORE.
    If either lookup fails, both legs are replaced by TRAVEL_FALLBACK_PENALTY.
    """
    if not candidate.address:
        return NO_ADDRESS_SCORE

    total_distance = 0.0
    before, after = find_neighbors(day_events, slot)

    try:
        travel = 0
        if before is not None and before.address is not None:
            travel += travel_time_service.get_travel_time_minutes(before.address, candidate.address)
        if after is not None and after.address is not None:
            travel += travel_time_service.get_travel_time_minutes(candidate.address, after.address)
        total_distance += travel
    except TravelTimeError as e:
        logger.warning(f"Could not calculate distance for placement: {e}")
        total_distance += TRAVEL_FALLBACK_PENALTY

    return total_distance
