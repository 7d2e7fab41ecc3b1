"""
Free-slot discovery for a single day's schedule.
"""

import logging
from typing import List
from ...schemas import Event
from ..core.time_slot import TimeSlot
from ..core.constants import DAY_START, DAY_END, MIN_SLOT_DURATION

logger = logging.getLogger(__name__)


def find_available_slots(day_events: List[Event]) -> List[TimeSlot]:
    """
    Find the gaps in a day that are long enough to host an event.

    day_events must be sorted by start_time and non-overlapping. Slots come
    back in order: leading gap, gaps between events, trailing gap.
    """
    if not day_events:
        return [TimeSlot(DAY_START, DAY_END)]

    slots = []

    first_start = day_events[0].start_time
    if first_start - DAY_START >= MIN_SLOT_DURATION:
        slots.append(TimeSlot(DAY_START, first_start))

    for current, next_event in zip(day_events, day_events[1:]):
        gap_start = current.end_time
        gap_end = next_event.start_time
        if gap_start > gap_end:
            logger.warning(
                f"Overlapping events '{current.title}' and '{next_event.title}' "
                f"({gap_start} > {gap_end}); free slots may overlap them"
            )
        if gap_end - gap_start >= MIN_SLOT_DURATION:
            slots.append(TimeSlot(gap_start, gap_end))

    last_end = day_events[-1].end_time
    if DAY_END - last_end >= MIN_SLOT_DURATION:
        slots.append(TimeSlot(last_end, DAY_END))

    return slots
