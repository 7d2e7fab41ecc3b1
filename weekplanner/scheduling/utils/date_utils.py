"""
Weekday resolution for [month, day, year] date triples.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence, Tuple
import pytz

from ... import config
from ..core.constants import WEEKDAYS

logger = logging.getLogger(__name__)


def current_date() -> date:
    """Today's date in the configured scheduler timezone."""
    tz = pytz.timezone(config.SCHEDULER_TIMEZONE)
    return datetime.now(tz).date()


def weekday_of(date_parts: Optional[Sequence[int]]) -> Optional[str]:
    """
    Map a [month, day, year] triple to its weekday name.
    Returns None for weekends, malformed triples and impossible dates.
    """
    if date_parts is None or len(date_parts) != 3:
        return None

    try:
        month, day, year = date_parts
        calendar_date = date(year, month, day)
    except (TypeError, ValueError, OverflowError) as e:
        logger.error(f"Failed to parse date {list(date_parts)}: {e}")
        return None

    weekday_index = calendar_date.weekday()  # Monday=0 ... Sunday=6
    if weekday_index >= len(WEEKDAYS):
        return None
    return WEEKDAYS[weekday_index]


def next_occurrence_of(weekday: str, today: Optional[date] = None) -> Tuple[int, int, int]:
    """
    Date of the next given weekday strictly after today, as (month, day, year).
    If today already is that weekday, next week's date is returned.
    """
    if weekday not in WEEKDAYS:
        raise ValueError(f"Unknown weekday: {weekday}")

    if today is None:
        today = current_date()

    days_ahead = (WEEKDAYS.index(weekday) - today.weekday()) % 7
    if days_ahead == 0:
        days_ahead = 7

    target = today + timedelta(days=days_ahead)
    return (target.month, target.day, target.year)
