from __future__ import annotations

from datetime import datetime
from typing import Any

import numpy as np

from datetools._exceptions import TickResolutionError

# Every vectorised path works on microsecond datetimes, the resolution of datetime.datetime.
DATETIME64 = "datetime64[us]"


def is_vector(value: Any) -> bool:
    """True for numpy datetime64 scalars and anything with at least one dimension."""
    return isinstance(value, (np.datetime64, np.ndarray)) or np.ndim(value) > 0


def _wall_clock(value: Any) -> Any:
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def as_datetime64(value: Any) -> np.ndarray:
    """
    Microsecond datetime64 array of ``value``.

    Aware datetimes keep their wall-clock time, as on the scalar path; numpy
    would otherwise convert them to UTC. Values finer than a microsecond raise
    TickResolutionError instead of being truncated.
    """
    arr = np.asarray(value)
    if arr.dtype == object:
        value = np.vectorize(_wall_clock, otypes=[object])(arr)
    result = np.asarray(value, dtype=DATETIME64)
    if arr.dtype.kind == "M":
        lost = (result != arr) & ~np.isnat(arr)
        if np.any(lost):
            raise TickResolutionError(
                f"Timestamps must be whole microseconds; got {arr[lost].ravel()[0]!r}."
            )
    return result


def unwrap(result: np.ndarray) -> np.ndarray | np.generic:
    # 0-d arrays come back as numpy scalars, like ufuncs do.
    return result[()] if result.ndim == 0 else result
