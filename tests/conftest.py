"""
Pytest fixtures for weekly scheduling tests.
"""

import pytest
from datetime import date
from typing import Dict, List, Optional, Set, Tuple

from weekplanner.schemas import Event
from weekplanner.services.travel_time import TravelTimeError


# ============================================================================
# Fakes & Helper Functions for Testing
# ============================================================================

class FakeTravelTimeService:
    """
    In-memory stand-in for TravelTimeService.

    Same address -> 0 minutes, pairs listed in `table` -> their value,
    anything else -> `default`. Addresses in `failing` raise TravelTimeError.
    Every lookup is recorded in `calls`.
    """

    def __init__(
        self,
        table: Optional[Dict[Tuple[str, str], int]] = None,
        default: int = 20,
        failing: Optional[Set[str]] = None,
    ):
        self.table = table or {}
        self.default = default
        self.failing = failing or set()
        self.calls: List[Tuple[str, str]] = []
        self.cleared = 0

    def get_travel_time_minutes(self, origin, destination) -> int:
        self.calls.append((origin, destination))
        if not origin or not destination:
            raise TravelTimeError("Addresses cannot be empty")
        if origin in self.failing or destination in self.failing:
            raise TravelTimeError(f"Route not found: {origin} -> {destination}")
        if origin == destination:
            return 0
        return self.table.get((origin, destination), self.default)

    def clear_cache(self) -> int:
        cleared = len(self.calls)
        self.calls = []
        self.cleared += 1
        return cleared


def make_event(
    title: str = "Event",
    start: Optional[int] = None,
    end: Optional[int] = None,
    address: Optional[str] = None,
    event_date: Optional[List[int]] = None,
    time_sensitive: Optional[bool] = None,
    **extra,
) -> Event:
    """Build an Event with snake_case fields."""
    return Event(
        title=title,
        start_time=start,
        end_time=end,
        address=address,
        date=event_date,
        time_sensitive=time_sensitive,
        **extra,
    )


def make_fixed(title: str, event_date: List[int], start: int, end: int, address: Optional[str] = None) -> Event:
    """Build a time-sensitive event."""
    return make_event(title, start, end, address, event_date, time_sensitive=True)


def make_flexible(title: str, address: Optional[str] = None, **extra) -> Event:
    """Build a flexible event with no date or time."""
    return make_event(title, address=address, time_sensitive=False, **extra)


# Week of Monday 2026-10-19
MONDAY = [10, 19, 2026]
TUESDAY = [10, 20, 2026]
WEDNESDAY = [10, 21, 2026]
THURSDAY = [10, 22, 2026]
FRIDAY = [10, 23, 2026]
SATURDAY = [10, 24, 2026]
SUNDAY = [10, 25, 2026]

WEEK_DATES = {
    "Monday": MONDAY,
    "Tuesday": TUESDAY,
    "Wednesday": WEDNESDAY,
    "Thursday": THURSDAY,
    "Friday": FRIDAY,
}


@pytest.fixture
def today():
    """Saturday 2026-10-17; the following week starts Monday 2026-10-19."""
    return date(2026, 10, 17)


@pytest.fixture
def travel():
    """FakeTravelTimeService with a 20 minute default."""
    return FakeTravelTimeService()
