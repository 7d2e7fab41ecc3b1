"""
Helpers for minute-of-day values.
"""

from typing import Optional


def format_minutes(minutes: Optional[int]) -> str:
    """Format minutes since midnight as HH:MM (e.g. 810 -> "13:30")."""
    if minutes is None or minutes <= 0:
        return ""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"
