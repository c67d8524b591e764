from __future__ import annotations

import pandas as pd
import pytest

from stepseries import StepSeries


@pytest.fixture
def two_point_series() -> StepSeries:
    """Series with one interval [1, 3) -> 2.0 and the end point 3 -> 5.0."""
    series = StepSeries()
    assert series.push(1, 2.0)
    assert series.push(3, 5.0)
    return series


@pytest.fixture
def sample_series() -> StepSeries:
    """Series [1, 3, 5, 10] -> [2, 3, 7, 0] on a float axis."""
    return StepSeries.from_pairs([(1.0, 2.0), (3.0, 3.0), (5.0, 7.0), (10.0, 0.0)])


@pytest.fixture
def sample_frame() -> pd.DataFrame:
    """Daily step series as a DataFrame."""
    return pd.DataFrame(
        {
            "ds": pd.to_datetime(["2024-01-01", "2024-01-03", "2024-01-05", "2024-01-10"]),
            "y": [2.0, 3.0, 7.0, 0.0],
        }
    )
