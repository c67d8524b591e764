"""Half-open intervals over an ordered axis."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Generic

from stepseries.core.types import D, SupportsTrueDiv


@dataclass(frozen=True)
class Interval(Generic[D]):
    """``[lower, upper)``."""

    lower: D
    upper: D

    def overlaps(self, other: Interval[D]) -> bool:
        return not (other.upper <= self.lower or other.lower >= self.upper)

    def intersection(self, other: Interval[D]) -> Interval[D]:
        """Overlap of two intervals. Only meaningful when they overlap."""
        lower = other.lower if other.lower > self.lower else self.lower
        upper = other.upper if other.upper < self.upper else self.upper
        return Interval(lower, upper)

    def contains(self, point: D) -> bool:
        return self.lower <= point < self.upper

    @property
    def length(self) -> SupportsTrueDiv:
        return self.upper - self.lower


def intervals_between(points: Sequence[D]) -> Iterator[Interval[D]]:
    """Consecutive intervals ``[points[k], points[k + 1])``."""
    for lower, upper in pairwise(points):
        yield Interval(lower, upper)


def enclosing_interval(points: Sequence[D], point: D) -> Interval[D] | None:
    """First interval between ``points`` that contains ``point``, if any."""
    for interval in intervals_between(points):
        if interval.contains(point):
            return interval
    return None


def is_strictly_increasing(points: Sequence[Any]) -> bool:
    return all(a < b for a, b in pairwise(points))


__all__ = [
    "Interval",
    "intervals_between",
    "enclosing_interval",
    "is_strictly_increasing",
]
