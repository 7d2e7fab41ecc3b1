"""
Time slot representation for the scheduling system.
"""

from ..utils.time_utils import format_minutes


class TimeSlot:
    """
    A free, half-open interval [start, end) inside one day's working window.
    Both bounds are minutes since midnight.
    """
    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end

    def duration(self) -> int:
        return self.end - self.start

    def __eq__(self, other):
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __lt__(self, other):
        return self.start < other.start

    def __repr__(self):
        return f"TimeSlot({format_minutes(self.start)} - {format_minutes(self.end)})"
