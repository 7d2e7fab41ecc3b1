"""
Tests for weekday resolution and next-occurrence date arithmetic.
"""

import pytest
from datetime import date, timedelta

from weekplanner.scheduling import WEEKDAYS, weekday_of, next_occurrence_of
from weekplanner.scheduling.utils.time_utils import format_minutes


class TestWeekdayOf:

    def test_saturday_is_not_a_weekday(self):
        assert weekday_of((7, 4, 2026)) is None

    def test_sunday_is_not_a_weekday(self):
        assert weekday_of((7, 5, 2026)) is None

    def test_monday(self):
        assert weekday_of((7, 6, 2026)) == "Monday"

    def test_whole_week(self):
        names = [weekday_of([7, day, 2026]) for day in range(6, 11)]
        assert names == WEEKDAYS

    def test_leap_day_resolves(self):
        assert weekday_of([2, 29, 2024]) == "Thursday"

    @pytest.mark.parametrize("date_parts", [
        [2, 29, 2026],   # not a leap year
        [2, 30, 2024],
        [13, 1, 2026],
        [0, 10, 2026],
        [4, 31, 2026],
        [1, 1, 10**20],  # year too large for the calendar
    ])
    def test_impossible_dates_return_none(self, date_parts):
        assert weekday_of(date_parts) is None

    @pytest.mark.parametrize("date_parts", [None, [], [7, 6], [7, 6, 2026, 1]])
    def test_malformed_dates_return_none(self, date_parts):
        assert weekday_of(date_parts) is None


class TestNextOccurrenceOf:

    def test_from_saturday(self):
        assert next_occurrence_of("Monday", today=date(2026, 10, 17)) == (10, 19, 2026)
        assert next_occurrence_of("Friday", today=date(2026, 10, 17)) == (10, 23, 2026)

    def test_same_weekday_rolls_to_next_week(self):
        assert next_occurrence_of("Friday", today=date(2026, 10, 16)) == (10, 23, 2026)

    def test_later_in_same_week(self):
        assert next_occurrence_of("Wednesday", today=date(2026, 10, 19)) == (10, 21, 2026)

    def test_crosses_year_boundary(self):
        # 2026-12-31 is a Thursday
        assert next_occurrence_of("Monday", today=date(2026, 12, 31)) == (1, 4, 2027)

    def test_always_within_the_next_seven_days(self):
        start = date(2026, 10, 12)
        for offset in range(7):
            today = start + timedelta(days=offset)
            for weekday in WEEKDAYS:
                month, day, year = next_occurrence_of(weekday, today=today)
                delta = (date(year, month, day) - today).days
                assert 1 <= delta <= 7
                assert weekday_of([month, day, year]) == weekday

    def test_unknown_weekday_raises(self):
        with pytest.raises(ValueError):
            next_occurrence_of("Saturday", today=date(2026, 10, 17))

    def test_defaults_to_current_date(self):
        month, day, year = next_occurrence_of("Monday")
        assert date(year, month, day) > date.today() - timedelta(days=1)


class TestFormatMinutes:

    def test_afternoon(self):
        assert format_minutes(810) == "13:30"

    def test_padding(self):
        assert format_minutes(65) == "01:05"

    @pytest.mark.parametrize("minutes", [None, 0, -5])
    def test_missing_values_are_blank(self, minutes):
        assert format_minutes(minutes) == ""
