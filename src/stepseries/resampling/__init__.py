"""Resampling of step series onto new breakpoints."""

from .intervals import Interval, enclosing_interval, intervals_between
from .projection import project

__all__ = [
    "project",
    "Interval",
    "intervals_between",
    "enclosing_interval",
]
