# src/datetools/calendar/__init__.py
"""
datetools.calendar
~~~~~~~~~~~~~~~~~~

Month and week boundaries, day-of-week search and time-of-day mutation on
Gregorian timestamps.  Days of the week count from Sunday = 0.

Basic usage::

    from datetime import datetime
    from datetools.calendar import DayOfWeek, last_day_of_month, next_day_of_week

    last_day_of_month(datetime(2024, 2, 15))                # → 2024-02-29 00:00
    next_day_of_week(datetime(2024, 2, 15), DayOfWeek.MONDAY)  # → 2024-02-19

NumPy datetime64 arrays are accepted everywhere a scalar is::

    import numpy as np
    days = np.array(["2024-02-15", "2023-02-15"], dtype="datetime64[us]")
    last_day_of_month(days)   # → ['2024-02-29', '2023-02-28']

Public API
----------
DayOfWeek                   Sunday-based day-of-week enum.
day_of_week                 Day of week of a timestamp.
days_in_month               Number of days in a month, leap-year aware.
first_day_of_month          Midnight of day 1 of the month.
last_day_of_month           Midnight of the last day of the month.
last_day_of_week            Previous given weekday, strictly before the date.
next_day_of_week            Next given weekday, strictly after the date.
last_day_of_week_of_month   Last given weekday within the month.
first_day_of_week_of_month  First given weekday within the month.
set_time                    Replace the time of day.
CalendarError               Base exception for all datetools errors.
"""

from __future__ import annotations

from datetools._exceptions import (
    CalendarError,
    InvalidDayOfWeek,
    InvalidTimeComponent,
    TickResolutionError,
    ZeroIntervalError,
)
from datetools.calendar.calendar import (
    DayOfWeek,
    day_of_week,
    days_in_month,
    first_day_of_month,
    first_day_of_week_of_month,
    last_day_of_month,
    last_day_of_week,
    last_day_of_week_of_month,
    next_day_of_week,
    set_time,
)

__all__ = [
    "CalendarError",
    "DayOfWeek",
    "InvalidDayOfWeek",
    "InvalidTimeComponent",
    "TickResolutionError",
    "ZeroIntervalError",
    "day_of_week",
    "days_in_month",
    "first_day_of_month",
    "first_day_of_week_of_month",
    "last_day_of_month",
    "last_day_of_week",
    "last_day_of_week_of_month",
    "next_day_of_week",
    "set_time",
]
