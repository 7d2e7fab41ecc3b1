"""
Weekly scheduler that places flexible events around fixed ones.
"""

import logging
from datetime import date
from typing import List, Optional, NamedTuple
from ...schemas import Event, WeeklySchedule
from .constants import WEEKDAYS
from .time_slot import TimeSlot
from ..scoring.slot_scoring import calculate_distance_score
from ..utils.slot_utils import find_available_slots
from ..utils.date_utils import weekday_of, next_occurrence_of, current_date
from ..utils.time_utils import format_minutes

logger = logging.getLogger(__name__)


class PlacementOption(NamedTuple):
    day: str
    event: Event
    distance_score: float


def _by_start_time(event: Event) -> int:
    return event.start_time


# ================================
# INITIALIZATION & SETUP
# ================================

class WeeklyScheduler:
    """
    Builds a Monday-Friday schedule in a single greedy pass.

    Fixed (time-sensitive) events keep their date and time. Each flexible
    event, in input order, is dropped into the free slot that adds the least
    travel. Earlier placements are never revisited, so input order matters.
    """
    def __init__(self, travel_time_service, today: Optional[date] = None):
        self.travel_time_service = travel_time_service
        self.today = today

    def _empty_schedule(self) -> WeeklySchedule:
        return {day: [] for day in WEEKDAYS}

# ================================
# CORE SCHEDULING LOGIC
# ================================

    def build_schedule(self, events: List[Event]) -> WeeklySchedule:
        """Build the weekly schedule for the given events."""
        schedule = self._empty_schedule()
        today = self.today or current_date()

        time_sensitive = [
            e for e in events
            if e.time_sensitive and e.start_time is not None and e.end_time is not None
        ]
        flexible = [e for e in events if not e.time_sensitive]

        logger.info(f"Scheduling {len(time_sensitive)} time-sensitive events and {len(flexible)} flexible events")

        self._load_fixed_events(schedule, time_sensitive)

        for flex_event in flexible:
            best_option = self._find_best_placement(schedule, flex_event, today)
            if best_option is None:
                logger.warning(f"Could not find placement for flexible event: {flex_event.title}")
                continue

            day_events = schedule[best_option.day]
            day_events.append(best_option.event)
            day_events.sort(key=_by_start_time)
            logger.info(
                f"Placed flexible event '{flex_event.title}' on {best_option.day} at "
                f"{format_minutes(best_option.event.start_time)}-{format_minutes(best_option.event.end_time)}"
            )

        return schedule

    def _load_fixed_events(self, schedule: WeeklySchedule, time_sensitive: List[Event]):
        """Bucket fixed events by weekday; weekend and unparseable dates are dropped."""
        for event in time_sensitive:
            day = weekday_of(event.date)
            if day is None:
                logger.warning(f"Dropping time-sensitive event '{event.title}': {event.date} is not a weekday")
                continue
            schedule[day].append(event)

        for day_events in schedule.values():
            day_events.sort(key=_by_start_time)

# ================================
# SLOT FINDING & OPTIMIZATION
# ================================

    def _find_best_placement(self, schedule: WeeklySchedule, flex_event: Event, today: date) -> Optional[PlacementOption]:
        """
        Score every free slot of every weekday and return the cheapest option.
        Ties go to the first option seen (Monday first, then slot order).
        """
        best_option = None

        for day in WEEKDAYS:
            day_events = schedule[day]
            day_date = next_occurrence_of(day, today)

            for slot in find_available_slots(day_events):
                distance_score = calculate_distance_score(day_events, flex_event, slot, self.travel_time_service)
                placed_event = self._place_in_slot(flex_event, slot, day_date)

                if best_option is None or distance_score < best_option.distance_score:
                    best_option = PlacementOption(day, placed_event, distance_score)

        return best_option

    def _place_in_slot(self, flex_event: Event, slot: TimeSlot, day_date) -> Event:
        """Copy a flexible event into a slot; it fills the whole slot."""
        return Event(
            title=flex_event.title,
            address=flex_event.address,
            description=flex_event.description,
            url=flex_event.url,
            time_sensitive=True,
            start_time=slot.start,
            end_time=slot.end,
            date=list(day_date),
        )

    def __repr__(self):
        return f"WeeklyScheduler(days={len(WEEKDAYS)}, today={self.today})"
