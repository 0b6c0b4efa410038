"""
Gregorian calendar rules and the static tables shared by the day-count engine
and the weekday formula.

The supported range starts on 1 January of ``BASE_YEAR`` (day count 1).  Its
upper end is tied to ``CENTURY_KEYS``: one key per century, so widening the
range means growing that table.
"""

from __future__ import annotations

from ._exceptions import InvalidArgumentError, OutOfRangeError

BASE_YEAR: int = 1900

# Weekday keys for the 20th..25th centuries (years 1900-1999 .. 2400-2499).
CENTURY_KEYS: tuple[int, ...] = (0, 6, 4, 2, 0, 6)

MAX_YEAR: int = BASE_YEAR + 100 * len(CENTURY_KEYS) - 1

# Index 0 is January; February holds its leap-year length.
MONTH_DAYS: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_KEYS: tuple[int, ...] = (0, 3, 3, 6, 1, 4, 6, 2, 5, 0, 3, 5)

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"Month must be between 1 and 12; got {month}.")
    days = MONTH_DAYS[month - 1]
    if month == 2 and not is_leap_year(year):
        days -= 1
    return days


def weekday_index(day: int, month: int, year: int) -> int:
    """
    Day of the week for a date in range, Sunday = 0 .. Saturday = 6.

    Closed-form key formula::

        N = (D + M + A + A // 4 + S) mod 7

    with D the day, M the month key, A the last two digits of the year and S
    the century key.  January and February of a leap year fall before the
    leap day, so their key is one less.
    """
    if year < BASE_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"Year must be between {BASE_YEAR} and {MAX_YEAR}; got {year}."
        )
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"Month must be between 1 and 12; got {month}.")
    century_key = CENTURY_KEYS[year // 100 - BASE_YEAR // 100]
    year_key = year % 100
    month_key = MONTH_KEYS[month - 1]
    if month <= 2 and is_leap_year(year):
        month_key -= 1
    return (day + month_key + year_key + year_key // 4 + century_key) % 7


MAX_DAY_COUNT: int = sum(days_in_year(y) for y in range(BASE_YEAR, MAX_YEAR + 1))
