# src/datetools/ranges/__init__.py
"""
datetools.ranges
~~~~~~~~~~~~~~~~

Predicates over pairs of time ranges given as (start, end) bounds.

=====================  ===========================================
is_overlapped_with     half-open, a shared boundary is not enough
is_the_same_as         both endpoints equal
is_intersect_with      closed, touching boundaries count
is_inside_in           closed, equal ranges count as inside
=====================  ===========================================
"""

from datetools.ranges.ranges import (
    TimeRange,
    is_inside_in,
    is_intersect_with,
    is_overlapped_with,
    is_the_same_as,
)

__all__ = [
    "TimeRange",
    "is_inside_in",
    "is_intersect_with",
    "is_overlapped_with",
    "is_the_same_as",
]
