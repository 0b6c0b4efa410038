"""
datekit.date
~~~~~~~~~~~~

Immutable calendar date value for 01/01/1900 .. 31/12/2499.

Basic usage::

    from datekit.date import DateValue

    d = DateValue(1, 3, 2005)
    d.add_days(60)                        # → DateValue(day=30, month=4, year=2005)
    d.add_years(1)                        # → DateValue(day=1, month=3, year=2006)
    d.compare(DateValue(25, 4, 2010))     # → -1
    DateValue(1, 10, 2014).weekday()      # → 'Wednesday'
    str(d)                                # → '01/03/2005'

Public API
----------
DateValue             The date value.
DateError             Base exception for all date-related errors.
InvalidArgumentError  Bad month, day or date argument.
OutOfRangeError       Year or computed date outside the supported range.
"""

from __future__ import annotations

from datekit.calendar import DateError, InvalidArgumentError, OutOfRangeError
from datekit.date.date import DateValue

__all__ = [
    "DateError",
    "DateValue",
    "InvalidArgumentError",
    "OutOfRangeError",
]
