"""stepseries - step-function series and interval-overlap resampling.

A ``StepSeries`` holds strictly increasing index points; each value applies
from its point up to the next one. ``project`` re-expresses a series on new
breakpoints, splitting countable quantities by source coverage and blending
non-countable quantities by destination coverage.

Basic usage:
    >>> from stepseries import StepSeries, project
    >>> s = StepSeries.from_pairs([(1, 2.0), (3, 3.0), (5, 7.0), (10, 0.0)])
    >>> list(project(s, [1, 2, 3, 4, 5], "countable"))
    [(1, 1.0), (2, 1.0), (3, 1.5), (4, 1.5), (5, 7.0)]

Lookups:
    >>> s.at(4)
    3.0
    >>> s.set_access_policy("return_closest")
    >>> s.at(0)
    2.0
"""

__version__ = "0.3.0"

# Core API
from stepseries.core.config import ProjectionConfig
from stepseries.core.distance import l1_distance
from stepseries.core.errors import (
    EContractViolation,
    EUnsupportedOperands,
    StepSeriesError,
)
from stepseries.core.policy import AccessPolicy, ValueKind

# Discovery
from stepseries.discovery import describe

# Resampling
from stepseries.resampling import project

# Container
from stepseries.series import StepSeries, from_frame, to_frame

__all__ = [
    "__version__",
    # Container
    "StepSeries",
    "AccessPolicy",
    "l1_distance",
    # Resampling
    "project",
    "ValueKind",
    "ProjectionConfig",
    # Interop
    "from_frame",
    "to_frame",
    # Discovery
    "describe",
    # Errors
    "StepSeriesError",
    "EContractViolation",
    "EUnsupportedOperands",
]
