import numbers
from typing import Tuple, Union

import numpy as np
import numpy.typing as npt

from ._exceptions import InvalidArgumentError, OutOfRangeError
from .rules import (
    BASE_YEAR,
    MAX_DAY_COUNT,
    MAX_YEAR,
    MONTH_DAYS,
    days_in_month,
    days_in_year,
)

IntArrayLike = Union[int, npt.ArrayLike]


def _build_year_prefix() -> np.ndarray:
    # prefix[i] = days elapsed before 1 January of BASE_YEAR + i
    years = np.arange(BASE_YEAR, MAX_YEAR + 1, dtype=np.int64)
    lengths = np.where(_leap_mask(years), 366, 365)
    prefix = np.zeros(len(years) + 1, dtype=np.int64)
    np.cumsum(lengths, out=prefix[1:])
    prefix.flags.writeable = False
    return prefix


def _build_month_tables() -> Tuple[np.ndarray, np.ndarray]:
    # Row 0: common year, row 1: leap year.
    lengths = np.array([MONTH_DAYS, MONTH_DAYS], dtype=np.int64)
    lengths[0, 1] -= 1
    prefix = np.zeros((2, 13), dtype=np.int64)
    np.cumsum(lengths, axis=1, out=prefix[:, 1:])
    lengths.flags.writeable = False
    prefix.flags.writeable = False
    return lengths, prefix


def _leap_mask(years: np.ndarray) -> np.ndarray:
    return ((years % 4 == 0) & (years % 100 != 0)) | (years % 400 == 0)


_YEAR_PREFIX = _build_year_prefix()
_MONTH_LENGTHS, _MONTH_PREFIX = _build_month_tables()


# ── scalar engine ────────────────────────────────────────────────────────

def as_integer(name: str, value: object) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer; got {value!r}.")
    return int(value)


def check_date(day: int, month: int, year: int) -> Tuple[int, int, int]:
    """
    Validate a ``(day, month, year)`` triple and return it as plain ints.

    The year is checked first (``OutOfRangeError``), then the month and the
    day (``InvalidArgumentError``).
    """
    day = as_integer("Day", day)
    month = as_integer("Month", month)
    year = as_integer("Year", year)

    if year < BASE_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"Year must be between {BASE_YEAR} and {MAX_YEAR}; got {year}."
        )
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"Month must be between 1 and 12; got {month}.")
    limit = days_in_month(month, year)
    if day < 1 or day > limit:
        raise InvalidArgumentError(
            f"Day must be between 1 and {limit} for {month:02d}/{year}; got {day}."
        )
    return day, month, year


def check_day_count(count: int) -> int:
    count = as_integer("Day count", count)
    if count < 1 or count > MAX_DAY_COUNT:
        raise OutOfRangeError(
            f"Day count must be between 1 and {MAX_DAY_COUNT}; got {count}."
        )
    return count


def to_day_count(day: int, month: int, year: int) -> int:
    """Days elapsed since the epoch, counting 1 January 1900 as day 1."""
    day, month, year = check_date(day, month, year)

    count = day
    for m in range(1, month):
        count += days_in_month(m, year)
    for y in range(BASE_YEAR, year):
        count += days_in_year(y)
    return count


def from_day_count(count: int) -> Tuple[int, int, int]:
    """Inverse of :func:`to_day_count`; returns ``(day, month, year)``."""
    count = check_day_count(count)

    year = BASE_YEAR
    year_days = days_in_year(year)
    while count > year_days:
        count -= year_days
        year += 1
        year_days = days_in_year(year)

    month = 1
    month_days = days_in_month(month, year)
    while count > month_days:
        count -= month_days
        month += 1
        month_days = days_in_month(month, year)

    return count, month, year


# ── vectorized engine ────────────────────────────────────────────────────

def _as_int_array(name: str, value: IntArrayLike) -> np.ndarray:
    arr = np.asarray(value)
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise InvalidArgumentError(
            f"{name} must be integers; got array of dtype {arr.dtype}."
        )
    return arr.astype(np.int64, copy=False)


def _first(arr: np.ndarray, mask: np.ndarray) -> int:
    return int(arr[mask].flat[0])


def to_day_counts(
    days: IntArrayLike,
    months: IntArrayLike,
    years: IntArrayLike,
) -> Union[int, np.ndarray]:
    """
    Vectorized :func:`to_day_count`.

    Inputs are broadcast together; scalar inputs return an ``int``.  Every
    element is validated with the same error kinds as the scalar path.
    """
    scalar = np.ndim(days) == 0 and np.ndim(months) == 0 and np.ndim(years) == 0
    d, m, y = np.broadcast_arrays(
        _as_int_array("Days", days),
        _as_int_array("Months", months),
        _as_int_array("Years", years),
    )
    shape = d.shape
    d = np.atleast_1d(d).ravel()
    m = np.atleast_1d(m).ravel()
    y = np.atleast_1d(y).ravel()

    bad = (y < BASE_YEAR) | (y > MAX_YEAR)
    if bad.any():
        raise OutOfRangeError(
            f"Year must be between {BASE_YEAR} and {MAX_YEAR}; got {_first(y, bad)}."
        )
    bad = (m < 1) | (m > 12)
    if bad.any():
        raise InvalidArgumentError(
            f"Month must be between 1 and 12; got {_first(m, bad)}."
        )

    leap = _leap_mask(y).astype(np.intp)
    limit = _MONTH_LENGTHS[leap, m - 1]
    bad = (d < 1) | (d > limit)
    if bad.any():
        raise InvalidArgumentError(
            f"Day must be between 1 and the length of its month; got {_first(d, bad)}."
        )

    counts = _YEAR_PREFIX[y - BASE_YEAR] + _MONTH_PREFIX[leap, m - 1] + d
    return int(counts[0]) if scalar else counts.reshape(shape)


def from_day_counts(
    counts: IntArrayLike,
) -> Union[Tuple[int, int, int], Tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """
    Vectorized :func:`from_day_count`; returns ``(days, months, years)``.

    Year and month are located with ``np.searchsorted`` on the cumulative
    day tables instead of walking forward.
    """
    scalar = np.ndim(counts) == 0
    n = _as_int_array("Day counts", counts)
    shape = n.shape
    n = np.atleast_1d(n).ravel()

    bad = (n < 1) | (n > MAX_DAY_COUNT)
    if bad.any():
        raise OutOfRangeError(
            f"Day count must be between 1 and {MAX_DAY_COUNT}; got {_first(n, bad)}."
        )

    yi = np.searchsorted(_YEAR_PREFIX, n, side="left") - 1
    rem = n - _YEAR_PREFIX[yi]
    years = yi + BASE_YEAR

    leap = _leap_mask(years).astype(np.intp)
    prefix = _MONTH_PREFIX[leap]
    mi = (prefix[..., 1:12] < rem[..., np.newaxis]).sum(axis=-1)
    days = rem - _MONTH_PREFIX[leap, mi]
    months = mi + 1

    if scalar:
        return int(days[0]), int(months[0]), int(years[0])
    return (
        days.reshape(shape),
        months.astype(np.int64).reshape(shape),
        years.astype(np.int64).reshape(shape),
    )
