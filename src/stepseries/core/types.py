"""Shared type definitions for stepseries.

The resampling engine only relies on a handful of operators. They are spelled
out here as protocols so the requirements on index and value types are
visible in signatures.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Index points: strict and non-strict comparison."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...


class SupportsSub(SupportsOrdering, Protocol):
    """Index points whose difference is an interval length."""

    def __sub__(self, other: Any, /) -> Any: ...


class SupportsTrueDiv(Protocol):
    """Interval lengths whose ratio is a dimensionless fraction."""

    def __truediv__(self, other: Any, /) -> float: ...


class SupportsScale(Protocol):
    """Values that can be scaled by a fraction and summed."""

    def __mul__(self, other: float, /) -> Any: ...

    def __add__(self, other: Any, /) -> Any: ...


I = TypeVar("I", bound=SupportsOrdering)
V = TypeVar("V")

# Narrower variables for code that does arithmetic on the axis and values
D = TypeVar("D", bound=SupportsSub)
S = TypeVar("S", bound=SupportsScale)

__all__ = [
    "SupportsOrdering",
    "SupportsSub",
    "SupportsTrueDiv",
    "SupportsScale",
    "I",
    "V",
    "D",
    "S",
]
