"""Projection of a step series onto new breakpoints.

Each new interval receives the sum of contributions from every source
interval it overlaps. A contribution is the source value scaled by the
overlap length divided by a reference length:

- ``COUNTABLE`` values (counts, totals) use the source interval length, so a
  source value is split across the new intervals in proportion to coverage
  and the total is conserved.
- ``NON_COUNTABLE`` values (rates, densities) use the new interval length, so
  a new interval inside one source interval inherits its value unchanged and
  a new interval straddling several gets a length-weighted mean.

The last breakpoint opens one more interval, closed at the upper bound of the
source interval that contains it. When no source interval contains it, that
trailing interval is dropped. New intervals that overlap nothing produce no
point in the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any

from stepseries.core.config import ProjectionConfig
from stepseries.core.errors import EContractViolation, EUnsupportedOperands
from stepseries.core.policy import ValueKind, coerce_kind
from stepseries.core.types import D, S
from stepseries.resampling.intervals import (
    Interval,
    enclosing_interval,
    intervals_between,
    is_strictly_increasing,
)
from stepseries.series.step_series import StepSeries

logger = logging.getLogger(__name__)


def project(
    series: StepSeries[D, S],
    breakpoints: Iterable[D],
    kind: ValueKind | str,
    config: ProjectionConfig | None = None,
) -> StepSeries[D, S]:
    """Re-express ``series`` on ``breakpoints``.

    Args:
        series: Source series. May be empty, giving an empty result.
        breakpoints: Strictly increasing new index points.
        kind: Whether the values are countable or non-countable.
        config: Strategy and checks; defaults to ``ProjectionConfig()``.

    Returns:
        New series indexed by the breakpoints that received a value, with the
        access policy of ``series``.

    Raises:
        EContractViolation: If breakpoints are not strictly increasing and
            ``config.check_breakpoints`` is set.
        EUnsupportedOperands: If index or value types lack the needed arithmetic.

    Example:
        >>> s = StepSeries.from_pairs([(1, 2.0), (3, 3.0), (5, 7.0), (10, 0.0)])
        >>> list(project(s, [1, 5, 6], "non_countable"))
        [(1, 2.5), (5, 7.0), (6, 7.0)]
    """
    config = config or ProjectionConfig()
    kind = coerce_kind(kind)
    points = list(breakpoints)

    if config.check_breakpoints and not is_strictly_increasing(points):
        raise EContractViolation(
            "Breakpoints must be strictly increasing",
            context={"n_breakpoints": len(points)},
        )

    index, values = series.as_arrays()
    targets = _target_intervals(index, points, drop_trailing=config.drop_trailing)
    sources = list(intervals_between(index))

    if config.method == "sweep":
        totals = _accumulate_sweep(sources, values, targets, kind)
    else:
        totals = _accumulate_overlap(sources, values, targets, kind)

    new_index = [targets[j].lower for j in totals]
    new_values = list(totals.values())
    logger.debug(
        "Projected %d points onto %d breakpoints (%s, %s): %d points out",
        len(index),
        len(points),
        kind.value,
        config.method,
        len(new_index),
    )
    return StepSeries._unchecked(
        new_index,
        new_values,
        access_policy=series.access_policy,
        distance=series.distance,
    )


def _target_intervals(
    index: Sequence[D],
    points: list[D],
    drop_trailing: bool,
) -> list[Interval[D]]:
    """New intervals, including the trailing one when it can be closed."""
    targets = [Interval(lower, upper) for lower, upper in pairwise(points)]
    if points and not drop_trailing:
        enclosing = enclosing_interval(index, points[-1])
        if enclosing is not None:
            targets.append(Interval(points[-1], enclosing.upper))
    return targets


def _accumulate_overlap(
    sources: list[Interval[D]],
    values: Sequence[S],
    targets: list[Interval[D]],
    kind: ValueKind,
) -> dict[int, S]:
    totals: dict[int, S] = {}
    for j, target in enumerate(targets):
        for i, source in enumerate(sources):
            if not source.overlaps(target):
                continue
            _add_contribution(totals, j, values[i], source, target, kind)
    return totals


def _accumulate_sweep(
    sources: list[Interval[D]],
    values: Sequence[S],
    targets: list[Interval[D]],
    kind: ValueKind,
) -> dict[int, S]:
    # Visits the same (target, source) pairs in the same order as the double
    # loop, so sums are bit-for-bit identical.
    totals: dict[int, S] = {}
    first = 0
    for j, target in enumerate(targets):
        while first < len(sources) and sources[first].upper <= target.lower:
            first += 1
        i = first
        while i < len(sources) and sources[i].lower < target.upper:
            _add_contribution(totals, j, values[i], sources[i], target, kind)
            i += 1
    return totals


def _add_contribution(
    totals: dict[int, Any],
    j: int,
    value: Any,
    source: Interval[Any],
    target: Interval[Any],
    kind: ValueKind,
) -> None:
    overlap = source.intersection(target)
    reference = source if kind is ValueKind.COUNTABLE else target
    try:
        contribution = value * (overlap.length / reference.length)
        totals[j] = totals[j] + contribution if j in totals else contribution
    except TypeError as exc:
        raise EUnsupportedOperands(
            f"Cannot project value of type {type(value).__name__} "
            f"over index of type {type(source.lower).__name__}",
            context={"interval": (source.lower, source.upper)},
        ) from exc


__all__ = ["project"]
