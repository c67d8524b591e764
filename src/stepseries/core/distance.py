"""Distance between consecutive values, used to suppress near-duplicates."""

from __future__ import annotations

from datetime import timedelta
from functools import singledispatch
from typing import Any

import numpy as np


@singledispatch
def l1_distance(a: Any, b: Any) -> float:
    """Absolute difference between two values.

    Extra value types can be supported with ``l1_distance.register``.
    """
    if isinstance(b, np.ndarray):
        # Dispatch only sees the first argument
        return l1_distance(b, a)
    return float(abs(a - b))


@l1_distance.register
def _(a: np.ndarray, b: Any) -> float:
    return float(np.abs(a - np.asarray(b)).sum())


@l1_distance.register
def _(a: timedelta, b: Any) -> float:
    # pandas.Timedelta subclasses timedelta
    return abs(a - b).total_seconds()


__all__ = ["l1_distance"]
