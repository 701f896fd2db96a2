"""Window-style computations over ordered, partitioned frames.

These helpers replace the database window operators the reports rely on
(``DATETRUNC``, ``SUM() OVER``, ``LAG() OVER``, ``ROUND``). Sequential
helpers assume the input is already sorted by partition key and then by the
ordering key; they scan it once, carrying the previous value.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from sales_analytics.config import ROUND_DECIMALS


def truncate_to_month(dates: pd.Series) -> pd.Series:
    """Map each timestamp to the first day of its month (NaT stays NaT)."""
    return dates.dt.to_period("M").dt.to_timestamp()


def running_total(values: pd.Series) -> pd.Series:
    """Cumulative sum in the current row order.

    Null values contribute zero once a non-null value has been seen; rows
    before the first non-null value stay null.
    """
    seen = values.notna().cumsum() > 0
    return values.fillna(0).cumsum().where(seen)


def partition_starts(keys: pd.Series) -> pd.Series:
    """Flag the first row of each run of equal keys.

    Null keys are treated as equal to each other, so consecutive nulls form a
    single partition.

    Args:
        keys: Partition key, already sorted so that equal keys are adjacent.

    Returns:
        Boolean Series aligned with ``keys``.

    """
    prev = keys.shift()
    both_null = keys.isna() & prev.isna()
    starts = keys.ne(prev) & ~both_null
    if len(starts):
        starts.iloc[0] = True
    return starts


def lag_within_partition(values: pd.Series, keys: pd.Series) -> pd.Series:
    """Return the previous row's value within each partition.

    The first row of every partition gets NaN.

    Examples:
        >>> keys = pd.Series(["A", "A", "B"])
        >>> lag_within_partition(pd.Series([1.0, 2.0, 3.0]), keys).tolist()
        [nan, 1.0, nan]

    """
    starts = partition_starts(keys)
    return values.shift(1).where(~starts)


def partition_mean(values: pd.Series, keys: pd.Series) -> pd.Series:
    """Broadcast the mean of ``values`` over each partition of sorted ``keys``."""
    partition_ids = partition_starts(keys).cumsum()
    return values.groupby(partition_ids).transform("mean")


def compare_label(
    left: pd.Series,
    right: pd.Series,
    above: str,
    below: str,
    equal: str,
) -> pd.Series:
    """Label each row by comparing ``left`` against ``right``.

    Comparisons involving a null fall through to ``equal``.
    """
    labels = np.select([left > right, left < right], [above, below], default=equal)
    return pd.Series(labels, index=left.index, dtype=object)


def round_half_away(values: pd.Series, decimals: int = ROUND_DECIMALS) -> pd.Series:
    """Round half away from zero, the rounding policy for all reports.

    Values are first snapped to 9 decimals of the scaled value so binary
    representation error (e.g. 2.675 stored as 2.67499...) does not push a
    tie downwards.

    Examples:
        >>> round_half_away(pd.Series([2.675, -0.125, 1.004])).tolist()
        [2.68, -0.13, 1.0]

    """
    factor = 10**decimals
    scaled = values.astype(float) * factor
    magnitude = np.floor(np.abs(scaled).round(9) + 0.5)
    # + 0.0 turns -0.0 into 0.0
    return np.sign(scaled) * magnitude / factor + 0.0


def safe_divide(numerator: pd.Series, denominator: pd.Series) -> pd.Series:
    """Divide elementwise, yielding NaN where the denominator is zero or null."""
    denominator = denominator.astype(float)
    return numerator.astype(float) / denominator.where(denominator != 0)
