"""Enumerations steering lookups and projections."""

from __future__ import annotations

from enum import StrEnum

from stepseries.core.errors import EContractViolation


class AccessPolicy(StrEnum):
    """How ``StepSeries.at`` resolves queries outside the covered domain."""

    RETURN_NONE = "return_none"
    """Report absence with ``None``."""

    RETURN_CLOSEST = "return_closest"
    """Return the first or last value, whichever end the query falls beyond."""


class ValueKind(StrEnum):
    """How the values of a series scale when an interval is split."""

    COUNTABLE = "countable"
    """Extensive quantity (a count, a total): split by share of the source interval."""

    NON_COUNTABLE = "non_countable"
    """Intensive quantity (a rate, a density): weighted by share of the destination interval."""


def coerce_policy(policy: AccessPolicy | str) -> AccessPolicy:
    """Accept an ``AccessPolicy`` or its string value."""
    try:
        return AccessPolicy(policy)
    except ValueError as exc:
        raise EContractViolation(
            f"Unknown access policy: {policy!r}",
            context={"allowed": [p.value for p in AccessPolicy]},
        ) from exc


def coerce_kind(kind: ValueKind | str) -> ValueKind:
    """Accept a ``ValueKind`` or its string value."""
    try:
        return ValueKind(kind)
    except ValueError as exc:
        raise EContractViolation(
            f"Unknown value kind: {kind!r}",
            context={"allowed": [k.value for k in ValueKind]},
        ) from exc


__all__ = ["AccessPolicy", "ValueKind", "coerce_policy", "coerce_kind"]
