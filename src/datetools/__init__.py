# src/datetools/__init__.py
"""
datetools
~~~~~~~~~

Pure calendar and time arithmetic on ``datetime`` values and NumPy
``datetime64`` arrays.

Subpackages
-----------
calendar   Month/week boundaries, day-of-week search, set_time.
snapping   floor / ceiling / round to a fixed interval.
ranges     Overlap, equality, intersection and containment of time ranges.
"""

import logging

from datetools import calendar, ranges, snapping
from datetools._exceptions import CalendarError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarError",
    "calendar",
    "ranges",
    "snapping",
]
