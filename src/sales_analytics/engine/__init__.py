"""Computation primitives shared by the reports."""

from sales_analytics.engine.joins import JOIN_MODES, JoinMode, join_dimension
from sales_analytics.engine.windows import (
    compare_label,
    lag_within_partition,
    partition_mean,
    partition_starts,
    round_half_away,
    running_total,
    safe_divide,
    truncate_to_month,
)

__all__ = [
    "JOIN_MODES",
    "JoinMode",
    "compare_label",
    "join_dimension",
    "lag_within_partition",
    "partition_mean",
    "partition_starts",
    "round_half_away",
    "running_total",
    "safe_divide",
    "truncate_to_month",
]
