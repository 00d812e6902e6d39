from __future__ import annotations

import logging
from datetime import date as _date
from datetime import datetime, timedelta
from typing import Union

import numpy as np

from datetools._arrays import as_datetime64, is_vector, unwrap
from datetools._exceptions import TickResolutionError, ZeroIntervalError

logger = logging.getLogger(__name__)

TICKS_PER_SECOND: int = 1_000_000
TICK: timedelta = timedelta(microseconds=1)
TICK_EPOCH: datetime = datetime.min

_EPOCH64 = np.datetime64(TICK_EPOCH, "us")

Timestamp = Union[datetime, np.datetime64, np.ndarray]
Interval = Union[timedelta, np.timedelta64]


# ── ticks ────────────────────────────────────────────────────────────────────

def _as_datetime(ts: _date) -> datetime:
    # Plain dates count as midnight.
    if isinstance(ts, datetime):
        return ts
    return datetime(ts.year, ts.month, ts.day)


def to_ticks(ts: Timestamp) -> int | np.ndarray:
    """Microseconds elapsed since 0001-01-01T00:00:00, wall clock."""
    if is_vector(ts):
        return unwrap((as_datetime64(ts) - _EPOCH64).astype(np.int64))
    ts = _as_datetime(ts)
    days = ts.toordinal() - 1
    seconds = days * 86_400 + ts.hour * 3_600 + ts.minute * 60 + ts.second
    return seconds * TICKS_PER_SECOND + ts.microsecond


def from_ticks(ticks: int) -> datetime:
    return TICK_EPOCH + timedelta(microseconds=ticks)


def interval_ticks(interval: Interval) -> int:
    if isinstance(interval, np.timedelta64):
        ticks = interval.astype("timedelta64[us]")
        if ticks != interval:
            raise TickResolutionError(
                f"Interval must be a whole number of microseconds; got {interval!r}."
            )
        return int(ticks.astype(np.int64))
    return interval // TICK


def _mod(ticks: int | np.ndarray, step: int) -> int | np.ndarray:
    # Remainder takes the sign of the dividend, as in C.
    if isinstance(ticks, (np.ndarray, np.generic)):
        return np.fmod(ticks, step)
    rem = abs(ticks) % abs(step)
    return -rem if ticks < 0 else rem


def _step(interval: Interval) -> int:
    step = interval_ticks(interval)
    if step == 0:
        logger.debug("Rejected zero-length snapping interval %r", interval)
        raise ZeroIntervalError(f"Interval must not be zero; got {interval!r}.")
    return step


def _shift(ts: Timestamp, delta: int | np.ndarray) -> Timestamp:
    if is_vector(ts):
        arr = as_datetime64(ts)
        return unwrap(arr + np.asarray(delta, dtype=np.int64).astype("timedelta64[us]"))
    return _as_datetime(ts) + timedelta(microseconds=int(delta))


# ── snapping ─────────────────────────────────────────────────────────────────

def floor(ts: Timestamp, interval: Interval) -> Timestamp:
    """
    Floor ``ts`` to a whole multiple of ``interval`` counted from the tick epoch,
    e.g. 10:09 floored by 10 minutes is 10:00.
    """
    step = _step(interval)
    return _shift(ts, -_mod(to_ticks(ts), step))


def ceiling(ts: Timestamp, interval: Interval) -> Timestamp:
    """
    Ceiling ``ts`` by ``interval``, e.g. 10:01 ceilinged by 10 minutes is 10:10.

    A timestamp that is already a whole multiple still moves up by one full
    interval.
    """
    step = _step(interval)
    rem = _mod(to_ticks(ts), step)
    if logger.isEnabledFor(logging.DEBUG) and np.any(rem == 0):
        logger.debug("ceiling() of aligned timestamp %r moves a full %r", ts, interval)
    return _shift(ts, step - rem)


def round(ts: Timestamp, interval: Interval) -> Timestamp:
    """
    Round ``ts`` to the nearest multiple of ``interval``, e.g. 10:09 rounded by
    10 minutes is 10:10. Exact halves go up.
    """
    step = _step(interval)
    half = (step + 1) >> 1
    return _shift(ts, half - _mod(to_ticks(ts) + half, step))
