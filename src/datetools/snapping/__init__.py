# src/datetools/snapping/__init__.py
"""
datetools.snapping
~~~~~~~~~~~~~~~~~~

Snap timestamps to a grid of fixed intervals counted from the tick epoch
(0001-01-01T00:00:00, one tick = one microsecond).

Basic usage::

    from datetime import datetime, timedelta
    from datetools import snapping

    ten = timedelta(minutes=10)
    snapping.floor(datetime(2024, 1, 1, 10, 9), ten)     # → 10:00
    snapping.ceiling(datetime(2024, 1, 1, 10, 1), ten)   # → 10:10
    snapping.round(datetime(2024, 1, 1, 10, 9), ten)     # → 10:10
"""

from datetools.snapping.snapping import (
    TICK,
    TICK_EPOCH,
    TICKS_PER_SECOND,
    ceiling,
    floor,
    from_ticks,
    interval_ticks,
    round,
    to_ticks,
)

__all__ = [
    "TICK",
    "TICK_EPOCH",
    "TICKS_PER_SECOND",
    "ceiling",
    "floor",
    "from_ticks",
    "interval_ticks",
    "round",
    "to_ticks",
]
