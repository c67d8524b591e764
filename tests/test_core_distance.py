"""Tests for core/distance.py."""

from __future__ import annotations

from datetime import timedelta
from functools import singledispatch

import numpy as np
import pandas as pd
import pytest

from stepseries import l1_distance


class TestL1Distance:
    """Test the default distance function."""

    @pytest.mark.parametrize("a,b", [(1.0, 3.5), (-2, 2), (0.25, 0.25)])
    def test_scalars_symmetric(self, a, b):
        """Distance is symmetric and non-negative."""
        assert l1_distance(a, b) == l1_distance(b, a)
        assert l1_distance(a, b) >= 0
        assert l1_distance(a, a) == 0

    def test_scalar_value(self):
        assert l1_distance(5.9, 5.0) == pytest.approx(0.9)
        assert isinstance(l1_distance(3, 1), float)

    def test_numpy_scalars(self):
        """numpy scalars fall through to the generic rule."""
        assert l1_distance(np.float32(1.5), np.float32(1.0)) == pytest.approx(0.5)

    def test_arrays(self):
        """Arrays sum the absolute element differences."""
        assert l1_distance(np.array([1.0, 2.0]), np.array([0.0, 4.0])) == pytest.approx(3.0)
        assert l1_distance(np.array([1.0, 2.0]), [1.0, 2.0]) == 0.0

    def test_scalar_against_array(self):
        """Argument order does not matter when one side is an array."""
        arr = np.array([1.0, 3.0])
        assert l1_distance(2.0, arr) == pytest.approx(2.0)
        assert l1_distance(2.0, arr) == l1_distance(arr, 2.0)

    def test_timedeltas(self):
        """Durations compare in seconds."""
        assert l1_distance(timedelta(minutes=1), timedelta(seconds=30)) == 30.0
        assert l1_distance(pd.Timedelta(hours=1), pd.Timedelta(hours=2)) == 3600.0

    def test_register(self):
        """Extra types can be registered on a dispatcher built from the default rule."""

        class Level:
            def __init__(self, n: int) -> None:
                self.n = n

        distance = singledispatch(l1_distance.dispatch(object))

        @distance.register(Level)
        def _(a, b) -> float:
            return float(abs(a.n - b.n))

        assert distance(Level(1), Level(4)) == 3.0
        assert distance(2.0, 0.5) == 1.5
        assert Level not in l1_distance.registry
