"""Series module for stepseries.

Provides the step-function container and its DataFrame interop.
"""

from .frame import from_frame, to_frame
from .step_series import SequenceView, StepSeries

__all__ = [
    # Container
    "StepSeries",
    "SequenceView",
    # Interop
    "from_frame",
    "to_frame",
]
