"""Core module - policies, configuration, errors and numeric protocols."""

from stepseries.core.config import ProjectionConfig
from stepseries.core.distance import l1_distance
from stepseries.core.errors import (
    EContractViolation,
    EUnsupportedOperands,
    StepSeriesError,
)
from stepseries.core.policy import AccessPolicy, ValueKind

__all__ = [
    # Config
    "ProjectionConfig",
    # Policies
    "AccessPolicy",
    "ValueKind",
    # Distance
    "l1_distance",
    # Errors
    "StepSeriesError",
    "EContractViolation",
    "EUnsupportedOperands",
]
