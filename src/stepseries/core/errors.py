"""Core error types with rich context.

Only misuse with a clear contract raises. Routine outcomes such as an
out-of-order ``push`` or a lookup miss are reported through return values.
"""

from __future__ import annotations

from typing import Any


class StepSeriesError(Exception):
    """Base exception with rich context.

    Subclasses set ``error_code`` and a default ``fix_hint`` instead of
    adding their own constructor arguments.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EContractViolation(StepSeriesError):
    """Caller broke a documented precondition."""

    error_code = "E_CONTRACT_VIOLATION"
    fix_hint = "Index points and breakpoints must be strictly increasing; tolerances non-negative"


class EUnsupportedOperands(StepSeriesError):
    """Index or value type lacks the arithmetic projection needs."""

    error_code = "E_UNSUPPORTED_OPERANDS"
    fix_hint = (
        "Index must support subtraction and interval division; "
        "values must support addition and multiplication by a float"
    )


ERROR_REGISTRY: dict[str, type[StepSeriesError]] = {
    "E_CONTRACT_VIOLATION": EContractViolation,
    "E_UNSUPPORTED_OPERANDS": EUnsupportedOperands,
}


def get_error_class(error_code: str) -> type[StepSeriesError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, StepSeriesError)
