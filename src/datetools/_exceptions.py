from __future__ import annotations


class CalendarError(Exception):
    """Base class for all datetools errors."""


class InvalidTimeComponent(CalendarError, ValueError):
    """Hour, minute, second or millisecond outside its valid range."""


class InvalidDayOfWeek(CalendarError, ValueError):
    """Day of week outside 0 (Sunday) .. 6 (Saturday)."""


class ZeroIntervalError(CalendarError, ZeroDivisionError):
    """Snapping interval with a tick count of zero."""


class TickResolutionError(CalendarError, ValueError):
    """Interval or timestamp finer than one tick (one microsecond)."""
