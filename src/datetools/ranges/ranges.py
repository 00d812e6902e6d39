from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
from typing import Any, Union

import numpy as np

Bound = Union[_date, np.datetime64, np.ndarray]

# The formulas use & rather than `and` so that numpy inputs broadcast
# element-wise; for plain datetimes the result is still a bool.


def is_overlapped_with(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound) -> Any:
    """
    True if [a_start, a_end) and [b_start, b_end) share more than a boundary.

    Ranges are half-open: A ending exactly where B starts does not overlap.
    """
    return (a_start < b_end) & (b_start < a_end)


def is_the_same_as(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound) -> Any:
    """True if both endpoints of A and B are equal."""
    return (a_start == b_start) & (a_end == b_end)


def is_intersect_with(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound) -> Any:
    """
    True if the closed ranges [a_start, a_end] and [b_start, b_end] meet.

    Unlike is_overlapped_with, touching at a single boundary counts.
    """
    return (a_start <= b_end) & (b_start <= a_end)


def is_inside_in(a_start: Bound, a_end: Bound, b_start: Bound, b_end: Bound) -> Any:
    """True if A lies within B, endpoints included; equal ranges count as inside."""
    return (a_start >= b_start) & (a_end <= b_end)


@dataclass(frozen=True, slots=True)
class TimeRange:
    """
    A (start, end) pair for the range predicates.

    start <= end is not enforced; reversed ranges are evaluated by the same
    formulas as the free functions.
    """

    start: Bound
    end: Bound

    def overlaps(self, other: TimeRange) -> Any:
        return is_overlapped_with(self.start, self.end, other.start, other.end)

    def same_as(self, other: TimeRange) -> Any:
        return is_the_same_as(self.start, self.end, other.start, other.end)

    def intersects(self, other: TimeRange) -> Any:
        return is_intersect_with(self.start, self.end, other.start, other.end)

    def inside(self, other: TimeRange) -> Any:
        return is_inside_in(self.start, self.end, other.start, other.end)
