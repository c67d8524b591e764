"""Conversion between ``StepSeries`` and pandas DataFrames."""

from __future__ import annotations

import pandas as pd

from stepseries.core.errors import EContractViolation
from stepseries.core.policy import AccessPolicy
from stepseries.series.step_series import StepSeries


def from_frame(
    df: pd.DataFrame,
    time_col: str = "ds",
    target_col: str = "y",
    access_policy: AccessPolicy | str = AccessPolicy.RETURN_NONE,
) -> StepSeries:
    """Build a series from two columns of a DataFrame.

    Rows are taken in their existing order; they are not sorted.

    Args:
        df: DataFrame holding the series
        time_col: Column with index points (default: "ds")
        target_col: Column with values (default: "y")
        access_policy: Lookup policy of the new series

    Returns:
        StepSeries with one point per row

    Raises:
        EContractViolation: If a column is missing or index points are not
            strictly increasing
    """
    missing = [c for c in (time_col, target_col) if c not in df.columns]
    if missing:
        raise EContractViolation(
            f"Missing required columns: {missing}",
            context={"columns": list(df.columns)},
        )

    return StepSeries.from_pairs(
        zip(df[time_col].tolist(), df[target_col].tolist()),
        access_policy=access_policy,
    )


def to_frame(
    series: StepSeries,
    time_col: str = "ds",
    target_col: str = "y",
) -> pd.DataFrame:
    """Return the series as a two-column DataFrame."""
    index, values = series.as_arrays()
    return pd.DataFrame({time_col: list(index), target_col: list(values)})


__all__ = ["from_frame", "to_frame"]
