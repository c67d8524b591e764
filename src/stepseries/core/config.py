"""Configuration for projections.

The value kind is not part of the config: it describes the data being
projected and is passed with every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ProjectionConfig:
    """Options for ``project``.

    Args:
        method: ``"overlap"`` compares every new interval with every old one;
            ``"sweep"`` walks both sorted axes once. Both return the same series.
        check_breakpoints: Raise ``EContractViolation`` when breakpoints are not
            strictly increasing. When disabled, unordered breakpoints give an
            unspecified result.
        drop_trailing: Treat the last breakpoint purely as the closing bound of
            the previous interval instead of opening one more interval that
            runs to the end of the enclosing source interval.
    """

    method: Literal["overlap", "sweep"] = "overlap"
    check_breakpoints: bool = True
    drop_trailing: bool = False

    def __post_init__(self) -> None:
        if self.method not in ("overlap", "sweep"):
            raise ValueError(f"method must be 'overlap' or 'sweep', got {self.method!r}")

    @classmethod
    def reference(cls) -> ProjectionConfig:
        """Brute-force double loop with breakpoint checks."""
        return cls(method="overlap", check_breakpoints=True)

    @classmethod
    def fast(cls) -> ProjectionConfig:
        """Linear sweep for long series and dense breakpoint grids."""
        return cls(method="sweep", check_breakpoints=True)

    @classmethod
    def closed(cls, method: Literal["overlap", "sweep"] = "overlap") -> ProjectionConfig:
        """Last breakpoint closes the grid; no open-ended trailing interval."""
        return cls(method=method, drop_trailing=True)
