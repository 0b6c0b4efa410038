"""
tests/calendar/test_rules.py

Covers:
  - Gregorian leap-year rule
  - Month and year lengths
  - Range limits derived from the century-key table
  - Weekday key formula, checked against datetime over the whole range
"""

import calendar
import datetime

import pytest

from datekit.calendar import (
    BASE_YEAR,
    MAX_DAY_COUNT,
    MAX_YEAR,
    WEEKDAY_NAMES,
    InvalidArgumentError,
    OutOfRangeError,
    days_in_month,
    days_in_year,
    is_leap_year,
    weekday_index,
)
from datekit.calendar.rules import CENTURY_KEYS


# ── Leap years ────────────────────────────────────────────────────────────────

class TestLeapYear:

    @pytest.mark.parametrize("year", [1904, 1996, 2000, 2004, 2024, 2400])
    def test_leap(self, year):
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 1901, 1999, 2100, 2200, 2300, 2499])
    def test_not_leap(self, year):
        assert not is_leap_year(year)

    def test_matches_calendar_module_over_range(self):
        for year in range(BASE_YEAR, MAX_YEAR + 1):
            assert is_leap_year(year) == calendar.isleap(year), year

    def test_leap_years_in_range(self):
        leaps = [y for y in range(BASE_YEAR, MAX_YEAR + 1) if is_leap_year(y)]
        assert len(leaps) == 146


# ── Month and year lengths ────────────────────────────────────────────────────

class TestLengths:

    def test_thirty_one_day_months(self):
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(month, 2001) == 31

    def test_thirty_day_months(self):
        for month in (4, 6, 9, 11):
            assert days_in_month(month, 2001) == 30

    def test_february_common_year(self):
        assert days_in_month(2, 1900) == 28
        assert days_in_month(2, 2001) == 28

    def test_february_leap_year(self):
        assert days_in_month(2, 2000) == 29
        assert days_in_month(2, 2400) == 29

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month_raises(self, month):
        with pytest.raises(InvalidArgumentError):
            days_in_month(month, 2000)

    def test_year_lengths(self):
        assert days_in_year(1900) == 365
        assert days_in_year(2000) == 366

    def test_months_sum_to_year(self):
        for year in (1900, 2000, 2001, 2100, 2400):
            assert sum(days_in_month(m, year) for m in range(1, 13)) == days_in_year(year)


# ── Range limits ──────────────────────────────────────────────────────────────

class TestLimits:

    def test_year_range(self):
        assert BASE_YEAR == 1900
        assert MAX_YEAR == 2499

    def test_max_day_count(self):
        assert MAX_DAY_COUNT == 219146

    def test_one_century_key_per_century(self):
        assert len(CENTURY_KEYS) == (MAX_YEAR + 1 - BASE_YEAR) // 100


# ── Weekday formula ───────────────────────────────────────────────────────────

class TestWeekdayIndex:

    def test_names_start_on_sunday(self):
        assert WEEKDAY_NAMES[0] == "Sunday"
        assert WEEKDAY_NAMES[6] == "Saturday"
        assert len(WEEKDAY_NAMES) == 7

    @pytest.mark.parametrize(
        "day, month, year, expected",
        [
            (1, 1, 1900, "Monday"),
            (1, 1, 2000, "Saturday"),
            (29, 2, 2000, "Tuesday"),
            (1, 3, 2000, "Wednesday"),
            (1, 10, 2014, "Wednesday"),
            (4, 7, 1976, "Sunday"),
            (1, 1, 2400, "Saturday"),
        ],
    )
    def test_known_dates(self, day, month, year, expected):
        assert WEEKDAY_NAMES[weekday_index(day, month, year)] == expected

    def test_every_date_in_range_matches_datetime(self):
        one_day = datetime.timedelta(days=1)
        current = datetime.date(BASE_YEAR, 1, 1)
        last = datetime.date(MAX_YEAR, 12, 31)
        while current <= last:
            expected = current.isoweekday() % 7
            got = weekday_index(current.day, current.month, current.year)
            assert got == expected, current
            current += one_day

    @pytest.mark.parametrize("year", [1899, 2500])
    def test_year_outside_range_raises(self, year):
        with pytest.raises(OutOfRangeError):
            weekday_index(1, 1, year)

    def test_invalid_month_raises(self):
        with pytest.raises(InvalidArgumentError):
            weekday_index(1, 13, 2000)
