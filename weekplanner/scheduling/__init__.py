"""
Weekly Scheduling System

Greedy placement of flexible events into the gaps of a fixed Monday-Friday
schedule, scored by travel time, plus pairwise conflict detection.
"""

from .core.scheduler import WeeklyScheduler, PlacementOption
from .core.time_slot import TimeSlot
from .core.constants import WEEKDAYS, DAY_START, DAY_END, MIN_SLOT_DURATION
from .constraints.conflict_detection import check_conflict, time_range_overlap
from .scoring.slot_scoring import calculate_distance_score
from .utils.slot_utils import find_available_slots
from .utils.date_utils import weekday_of, next_occurrence_of

__version__ = "1.0.0"
