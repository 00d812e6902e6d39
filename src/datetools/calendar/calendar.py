from __future__ import annotations

import calendar
from datetime import date as _date
from datetime import datetime, time, timedelta
from enum import IntEnum
from typing import Any, Union

import numpy as np

from datetools._arrays import as_datetime64, is_vector, unwrap
from datetools._exceptions import InvalidDayOfWeek, InvalidTimeComponent

DateLike = Union[_date, np.datetime64, np.ndarray]

_ONE_DAY = np.timedelta64(1, "D")
# 1970-01-01, day 0 of datetime64[D], was a Thursday.
_EPOCH_DOW = 4


class DayOfWeek(IntEnum):
    """Day of week, counted from Sunday as 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def _check_dow(dow: Any) -> DayOfWeek:
    try:
        return DayOfWeek(int(dow))
    except (TypeError, ValueError) as exc:
        raise InvalidDayOfWeek(
            f"Day of week must be in 0 (Sunday) .. 6 (Saturday); got {dow!r}."
        ) from exc


def _midnight(date: _date, day: int) -> datetime:
    return datetime(date.year, date.month, day, tzinfo=getattr(date, "tzinfo", None))


# ── day of week ──────────────────────────────────────────────────────────────

def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def day_of_week(date: DateLike) -> DayOfWeek | np.ndarray:
    if is_vector(date):
        days = as_datetime64(date).astype("datetime64[D]").astype(np.int64)
        return unwrap((days + _EPOCH_DOW) % 7)
    # weekday() counts from Monday.
    return DayOfWeek((date.weekday() + 1) % 7)


# ── month boundaries ─────────────────────────────────────────────────────────

def first_day_of_month(date: DateLike) -> datetime | np.ndarray:
    """Midnight of day 1 of the month containing ``date``."""
    if is_vector(date):
        months = as_datetime64(date).astype("datetime64[M]")
        return unwrap(months.astype("datetime64[us]"))
    return _midnight(date, 1)


def last_day_of_month(date: DateLike) -> datetime | np.ndarray:
    """Midnight of the last day (28..31) of the month containing ``date``."""
    if is_vector(date):
        months = as_datetime64(date).astype("datetime64[M]")
        last = (months + 1).astype("datetime64[D]") - _ONE_DAY
        return unwrap(last.astype("datetime64[us]"))
    return _midnight(date, days_in_month(date.year, date.month))


# ── week search ──────────────────────────────────────────────────────────────

def last_day_of_week(date: DateLike, dow: int) -> DateLike:
    """
    Most recent ``dow`` strictly before ``date``, keeping its time of day.

    If ``date`` already falls on ``dow`` the result is seven days earlier, never
    ``date`` itself.
    """
    dow = _check_dow(dow)
    if is_vector(date):
        arr = as_datetime64(date)
        back = (day_of_week(arr) - dow) % 7
        back = np.where(back == 0, 7, back)
        return unwrap(arr - back.astype("timedelta64[D]"))
    back = (day_of_week(date) - dow) % 7 or 7
    return date - timedelta(days=back)


def next_day_of_week(date: DateLike, dow: int) -> DateLike:
    """
    Next ``dow`` strictly after ``date``, keeping its time of day.

    If ``date`` already falls on ``dow`` the result is seven days later.
    """
    dow = _check_dow(dow)
    if is_vector(date):
        arr = as_datetime64(date)
        ahead = (dow - day_of_week(arr)) % 7
        ahead = np.where(ahead == 0, 7, ahead)
        return unwrap(arr + ahead.astype("timedelta64[D]"))
    ahead = (dow - day_of_week(date)) % 7 or 7
    return date + timedelta(days=ahead)


def last_day_of_week_of_month(date: DateLike, dow: int) -> datetime | np.ndarray:
    """Last ``dow`` of the month, which may be the last day of the month itself."""
    dow = _check_dow(dow)
    last = last_day_of_month(date)
    if is_vector(last):
        hit = np.asarray(day_of_week(last)) == dow
        return unwrap(np.where(hit, last, last_day_of_week(last, dow)))
    if day_of_week(last) == dow:
        return last
    return last_day_of_week(last, dow)


def first_day_of_week_of_month(date: DateLike, dow: int) -> datetime | np.ndarray:
    """First ``dow`` of the month, which may be day 1 itself."""
    dow = _check_dow(dow)
    first = first_day_of_month(date)
    if is_vector(first):
        hit = np.asarray(day_of_week(first)) == dow
        return unwrap(np.where(hit, first, next_day_of_week(first, dow)))
    if day_of_week(first) == dow:
        return first
    return next_day_of_week(first, dow)


# ── time of day ──────────────────────────────────────────────────────────────

def set_time(
    date: DateLike,
    hour: int,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime | np.ndarray:
    """
    Same calendar day as ``date`` at the given time of day.

    Fields left out default to zero; out-of-range fields raise
    InvalidTimeComponent.
    """
    try:
        tod = time(hour, minute, second, millisecond * 1000)
    except (TypeError, ValueError) as exc:
        raise InvalidTimeComponent(
            f"Invalid time {hour}:{minute}:{second}.{millisecond}: {exc}"
        ) from exc

    if is_vector(date):
        days = as_datetime64(date).astype("datetime64[D]").astype("datetime64[us]")
        offset = np.timedelta64(
            timedelta(hours=hour, minutes=minute, seconds=second, milliseconds=millisecond)
        ).astype("timedelta64[us]")
        return unwrap(days + offset)
    return datetime.combine(date, tod, tzinfo=getattr(date, "tzinfo", None))
