"""API discovery and introspection for stepseries.

Provides ``describe()`` which returns a machine-readable schema of the
library's public surface: version, stable APIs, error codes with fix hints,
value kinds, access policies and projection methods.

Usage:
    >>> from stepseries import describe
    >>> info = describe()
    >>> info["value_kinds"]
    ['countable', 'non_countable']
"""

from __future__ import annotations

from typing import Any

from stepseries.core.policy import AccessPolicy, ValueKind


def describe() -> dict[str, Any]:
    """Return a machine-readable API schema for stepseries.

    Returns a dictionary with:
      - ``version``: library version string
      - ``apis``: mapping of task names to public functions
      - ``error_codes``: mapping of error codes to class/description/fix_hint
      - ``value_kinds``: accepted ``ValueKind`` values
      - ``access_policies``: accepted ``AccessPolicy`` values
      - ``projection_methods``: accepted ``ProjectionConfig.method`` values
    """
    import stepseries

    return {
        "version": stepseries.__version__,
        "apis": _get_apis(),
        "error_codes": _get_error_codes(),
        "value_kinds": [k.value for k in ValueKind],
        "access_policies": [p.value for p in AccessPolicy],
        "projection_methods": ["overlap", "sweep"],
    }


def _get_apis() -> dict[str, dict[str, str]]:
    """Return stable API surface."""
    return {
        "push": {
            "function": "StepSeries.push",
            "description": "Append a point strictly after the last one",
        },
        "push_if_different": {
            "function": "StepSeries.push_if_different",
            "description": "Append unless the value is within tolerance of the last value",
        },
        "at": {
            "function": "StepSeries.at",
            "description": "Point lookup governed by the access policy",
        },
        "as_arrays": {
            "function": "StepSeries.as_arrays",
            "description": "Read-only views of index and values",
        },
        "project": {
            "function": "project",
            "description": "Resample onto new breakpoints (countable or non-countable)",
        },
        "from_frame": {
            "function": "from_frame",
            "description": "Build a StepSeries from DataFrame columns",
        },
        "to_frame": {
            "function": "to_frame",
            "description": "Export a StepSeries as a DataFrame",
        },
    }


def _get_error_codes() -> dict[str, dict[str, str]]:
    """Return all error codes with descriptions and fix hints."""
    from stepseries.core.errors import ERROR_REGISTRY

    result: dict[str, dict[str, str]] = {}
    for code, cls in ERROR_REGISTRY.items():
        result[code] = {
            "class": cls.__name__,
            "description": cls.__doc__ or "",
            "fix_hint": cls.fix_hint,
        }
    return result


__all__ = ["describe"]
