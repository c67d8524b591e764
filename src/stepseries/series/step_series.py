"""Append-only step-function series.

A series of ``n`` points is read as ``n - 1`` half-open intervals
``[index[k], index[k + 1])`` carrying ``values[k]``, plus the last point
``index[n - 1]`` carrying ``values[n - 1]``.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Generic, overload

import numpy as np

from stepseries.core.distance import l1_distance
from stepseries.core.errors import EContractViolation
from stepseries.core.policy import AccessPolicy, ValueKind, coerce_policy
from stepseries.core.types import I, V

if TYPE_CHECKING:
    from stepseries.core.config import ProjectionConfig

logger = logging.getLogger(__name__)

DistanceFn = Callable[[Any, Any], float]


def _items_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    # Element-wise so array-valued entries compare without ambiguity
    return len(a) == len(b) and all(np.array_equal(x, y) for x, y in zip(a, b))


class SequenceView(Sequence[Any]):
    """Read-only window onto a list owned by a ``StepSeries``."""

    __slots__ = ("_data",)

    def __init__(self, data: list[Any]) -> None:
        self._data = data

    @overload
    def __getitem__(self, i: int) -> Any: ...

    @overload
    def __getitem__(self, i: slice) -> tuple[Any, ...]: ...

    def __getitem__(self, i: int | slice) -> Any:
        if isinstance(i, slice):
            return tuple(self._data[i])
        return self._data[i]

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SequenceView):
            return _items_equal(self._data, other._data)
        if isinstance(other, (list, tuple)):
            return _items_equal(self._data, other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SequenceView({self._data!r})"


class StepSeries(Generic[I, V]):
    """Strictly increasing index points with the value held between them.

    Args:
        access_policy: Behaviour of ``at`` outside ``[index[0], index[-1]]``.
        distance: Magnitude of the difference between two values, used by
            ``push_if_different``. Defaults to ``l1_distance``.

    Example:
        >>> s = StepSeries()
        >>> s.push(1, 2.0), s.push(3, 5.0), s.push(2, 9.0)
        (True, True, False)
        >>> s.at(2)
        2.0
    """

    def __init__(
        self,
        access_policy: AccessPolicy | str = AccessPolicy.RETURN_NONE,
        distance: DistanceFn = l1_distance,
    ) -> None:
        self._index: list[I] = []
        self._values: list[V] = []
        self._access_policy = coerce_policy(access_policy)
        self._distance = distance

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[I, V]],
        access_policy: AccessPolicy | str = AccessPolicy.RETURN_NONE,
        distance: DistanceFn = l1_distance,
    ) -> StepSeries[I, V]:
        """Build a series from ``(index, value)`` pairs in increasing order.

        Raises:
            EContractViolation: If a pair does not strictly follow the previous one.
        """
        series: StepSeries[I, V] = cls(access_policy=access_policy, distance=distance)
        for position, (idx, value) in enumerate(pairs):
            if not series.push(idx, value):
                raise EContractViolation(
                    "Index points must be strictly increasing",
                    context={"position": position, "index": idx, "previous": series._index[-1]},
                )
        return series

    @classmethod
    def _unchecked(
        cls,
        index: list[I],
        values: list[V],
        access_policy: AccessPolicy,
        distance: DistanceFn,
    ) -> StepSeries[I, V]:
        """Wrap lists the caller guarantees to be well formed."""
        assert len(index) == len(values)
        series: StepSeries[I, V] = cls(access_policy=access_policy, distance=distance)
        series._index = index
        series._values = values
        return series

    @property
    def access_policy(self) -> AccessPolicy:
        return self._access_policy

    @property
    def distance(self) -> DistanceFn:
        return self._distance

    def set_access_policy(self, policy: AccessPolicy | str) -> None:
        """Replace the lookup policy; applies to subsequent ``at`` calls."""
        self._access_policy = coerce_policy(policy)

    def push(self, index: I, value: V) -> bool:
        """Append a point if it lies strictly after the current last one.

        Returns:
            True if the point was appended. A rejected push changes nothing.
        """
        if self._index and not self._index[-1] < index:
            logger.debug("Rejected push at %r: not after last index %r", index, self._index[-1])
            return False
        self._index.append(index)
        self._values.append(value)
        return True

    def push_if_different(self, index: I, value: V, tolerance: float) -> bool:
        """Append unless ``value`` is within ``tolerance`` of the last value.

        The comparison is strict: a distance equal to ``tolerance`` is pushed.
        An empty series always attempts the push.

        Raises:
            EContractViolation: If ``tolerance`` is negative.
        """
        if tolerance < 0:
            raise EContractViolation(
                "tolerance must be non-negative",
                context={"tolerance": tolerance},
            )
        if self._values:
            delta = self._distance(value, self._values[-1])
            if abs(delta) < tolerance:
                logger.debug("Suppressed push at %r: distance %g < %g", index, delta, tolerance)
                return False
        return self.push(index, value)

    def as_arrays(self) -> tuple[SequenceView, SequenceView]:
        """Read-only views of the index and values, without copying."""
        return SequenceView(self._index), SequenceView(self._values)

    def at(self, query: I) -> V | None:
        """Value of the step function at ``query``.

        Inside the domain this is the value of the interval containing
        ``query`` (or the last value at the last point). Outside it, the
        access policy decides between ``None`` and the nearest end value.
        """
        assert len(self._index) == len(self._values)
        n = len(self._index)
        if n == 0:
            return None

        k = bisect_right(self._index, query) - 1
        if 0 <= k < n - 1:
            return self._values[k]
        if k == n - 1 and query == self._index[-1]:
            return self._values[-1]

        if self._access_policy is AccessPolicy.RETURN_CLOSEST:
            if query > self._index[-1]:
                return self._values[-1]
            if query < self._index[0]:
                return self._values[0]
        return None

    def project(
        self,
        breakpoints: Iterable[I],
        kind: ValueKind | str,
        config: ProjectionConfig | None = None,
    ) -> StepSeries[I, V]:
        """Re-express this series on ``breakpoints``; see ``stepseries.resampling.project``."""
        from stepseries.resampling.projection import project

        return project(self, breakpoints, kind, config=config)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[tuple[I, V]]:
        return zip(self._index, self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepSeries):
            return NotImplemented
        return (
            _items_equal(self._index, other._index)
            and _items_equal(self._values, other._values)
            and self._access_policy is other._access_policy
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(list(zip(self._index, self._values)))

    def __repr__(self) -> str:
        return f"StepSeries({list(zip(self._index, self._values))!r}, access_policy={self._access_policy.value!r})"
