"""
datekit.calendar
~~~~~~~~~~~~~~~~

Proleptic Gregorian calendar rules and the day-count engine behind
:class:`datekit.date.DateValue`.  Dates between 1 January 1900 and
31 December 2499 are numbered consecutively from 1.

Basic usage::

    from datekit.calendar import to_day_count, from_day_count

    n = to_day_count(1, 10, 2014)        # → 41912
    from_day_count(n)                    # → (1, 10, 2014)

NumPy arrays are accepted by the vectorized variants::

    import numpy as np
    from datekit.calendar import to_day_counts, from_day_counts

    counts = to_day_counts([1, 29], [1, 2], [1900, 2000])
    days, months, years = from_day_counts(counts)

Public API
----------
to_day_count / from_day_count     Scalar conversion.
to_day_counts / from_day_counts   Vectorized conversion.
is_leap_year, days_in_month, days_in_year, weekday_index
DateError                         Base exception for all date-related errors.
InvalidArgumentError, OutOfRangeError
"""

from __future__ import annotations

from datekit.calendar._exceptions import (
    DateError,
    InvalidArgumentError,
    OutOfRangeError,
)
from datekit.calendar.daycount import (
    check_date,
    from_day_count,
    from_day_counts,
    to_day_count,
    to_day_counts,
)
from datekit.calendar.rules import (
    BASE_YEAR,
    MAX_DAY_COUNT,
    MAX_YEAR,
    WEEKDAY_NAMES,
    days_in_month,
    days_in_year,
    is_leap_year,
    weekday_index,
)

__all__ = [
    "BASE_YEAR",
    "MAX_DAY_COUNT",
    "MAX_YEAR",
    "WEEKDAY_NAMES",
    "DateError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "check_date",
    "days_in_month",
    "days_in_year",
    "from_day_count",
    "from_day_counts",
    "is_leap_year",
    "to_day_count",
    "to_day_counts",
    "weekday_index",
]
