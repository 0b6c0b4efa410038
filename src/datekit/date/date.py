import logging
import numbers
from functools import total_ordering
from typing import Any, Optional

from datekit.calendar import (
    BASE_YEAR,
    MAX_DAY_COUNT,
    MAX_YEAR,
    WEEKDAY_NAMES,
    InvalidArgumentError,
    OutOfRangeError,
    check_date,
    days_in_month,
    days_in_year,
    from_day_count,
    is_leap_year,
    to_day_count,
    weekday_index,
)
from datekit.calendar.daycount import as_integer

logger = logging.getLogger(__name__)

# Any offset beyond the width of the supported range cannot land inside it.
_MAX_YEAR_OFFSET: int = MAX_YEAR - BASE_YEAR + 1
_MAX_MONTH_OFFSET: int = 12 * _MAX_YEAR_OFFSET


@total_ordering
class DateValue:
    """
    Immutable calendar date between 01/01/1900 and 31/12/2499.

    The date is held as its day count since the epoch (1 January 1900 is
    day 1), computed once at construction.  Arithmetic returns new
    instances; ordering, equality and hashing follow the day count.
    """

    __slots__ = ("_day", "_month", "_year", "_day_count")

    def __init__(self, day: int, month: int, year: int) -> None:
        day, month, year = check_date(day, month, year)
        self._day: int = day
        self._month: int = month
        self._year: int = year
        self._day_count: int = to_day_count(day, month, year)

    @classmethod
    def _from_day_count(cls, count: int) -> "DateValue":
        day, month, year = from_day_count(count)
        date = cls.__new__(cls)
        date._day = day
        date._month = month
        date._year = year
        date._day_count = int(count)
        return date

    # ── arithmetic ───────────────────────────────────────────────────────

    def _shift(self, days: int) -> "DateValue":
        count = self._day_count + days
        if count < 1 or count > MAX_DAY_COUNT:
            logger.debug(
                "Shift of %s by %d days gives day count %d, outside [1, %d].",
                self, days, count, MAX_DAY_COUNT,
            )
            raise OutOfRangeError(
                f"{self} shifted by {days} days falls outside the supported range."
            )
        return DateValue._from_day_count(count)

    def add_days(self, days: int) -> "DateValue":
        return self._shift(as_integer("Days", days))

    def add_months(self, months: int) -> "DateValue":
        """
        Advance month by month, adding the length of each month reached.

        The total is added as a plain day offset, so the day of the month is
        only kept when the month reached is as long as the starting one:
        31/01/2001 plus one month is 28/02/2001, 30/01/2001 plus one month
        is 27/02/2001 and 01/03/2005 plus one month is 31/03/2005.

        A negative count walks backwards, subtracting the length of each
        month left.  Stepping back from the month a forward walk reached
        subtracts exactly what that walk added.
        """
        months = as_integer("Months", months)
        if abs(months) > _MAX_MONTH_OFFSET:
            raise OutOfRangeError(
                f"{self} shifted by {months} months falls outside the supported range."
            )

        total = 0
        month, year = self._month, self._year
        if months >= 0:
            for _ in range(months):
                if month == 12:
                    month = 1
                    year += 1
                else:
                    month += 1
                total += days_in_month(month, year)
        else:
            for _ in range(-months):
                total -= days_in_month(month, year)
                if month == 1:
                    month = 12
                    year -= 1
                else:
                    month -= 1
        return self._shift(total)

    def add_years(self, years: int) -> "DateValue":
        """
        Add the lengths of the ``years`` following years as a day offset.

        A negative count subtracts the lengths of the current year and the
        ones before it.
        """
        years = as_integer("Years", years)
        if abs(years) > _MAX_YEAR_OFFSET:
            raise OutOfRangeError(
                f"{self} shifted by {years} years falls outside the supported range."
            )

        if years >= 0:
            total = sum(days_in_year(self._year + i) for i in range(1, years + 1))
        else:
            total = -sum(days_in_year(self._year - i) for i in range(-years))
        return self._shift(total)

    # ── comparison ───────────────────────────────────────────────────────

    @staticmethod
    def _require(other: Optional["DateValue"]) -> "DateValue":
        if other is None:
            raise InvalidArgumentError("A date to compare with is required; got None.")
        if not isinstance(other, DateValue):
            raise InvalidArgumentError(
                f"Expected a DateValue; got {type(other).__name__}."
            )
        return other

    def compare(self, other: Optional["DateValue"]) -> int:
        """Return -1, 0 or 1 as this date is before, on or after ``other``."""
        other = self._require(other)
        return (self._day_count > other._day_count) - (self._day_count < other._day_count)

    def difference(self, other: Optional["DateValue"]) -> int:
        """Number of days between the two dates, regardless of order."""
        other = self._require(other)
        return abs(self._day_count - other._day_count)

    # ── calendar queries ─────────────────────────────────────────────────

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def weekday_index(self) -> int:
        """Sunday = 0 .. Saturday = 6."""
        return weekday_index(self._day, self._month, self._year)

    def weekday(self) -> str:
        return WEEKDAY_NAMES[self.weekday_index]

    # ── properties ───────────────────────────────────────────────────────

    @property
    def day(self) -> int:
        return self._day

    @property
    def month(self) -> int:
        return self._month

    @property
    def year(self) -> int:
        return self._year

    @property
    def day_count(self) -> int:
        return self._day_count

    # ── operators ────────────────────────────────────────────────────────

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._day_count == other._day_count

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._day_count < other._day_count

    def __hash__(self) -> int:
        return hash(self._day_count)

    def __add__(self, days: Any) -> "DateValue":
        if isinstance(days, bool) or not isinstance(days, numbers.Integral):
            return NotImplemented
        return self.add_days(days)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, DateValue):
            return self._day_count - other._day_count
        if isinstance(other, bool) or not isinstance(other, numbers.Integral):
            return NotImplemented
        return self.add_days(-other)

    def __reduce__(self) -> tuple:
        return (DateValue, (self._day, self._month, self._year))

    # ── repr ─────────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self._day:02d}/{self._month:02d}/{self._year}"

    def __repr__(self) -> str:
        return (
            f"DateValue(day={self._day}, "
            f"month={self._month}, "
            f"year={self._year})"
        )
