"""
Shared constants for the weekly scheduling system.
"""

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

# Working window, in minutes since midnight (08:00 - 22:00)
DAY_START = 8 * 60
DAY_END = 22 * 60
MIN_SLOT_DURATION = 60

# Placement scoring
NO_ADDRESS_SCORE = 1000
TRAVEL_FALLBACK_PENALTY = 15
