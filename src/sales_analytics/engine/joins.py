"""Fact-to-dimension join primitive shared by every report.

A single function handles both join modes so the reports cannot drift apart
in how they treat unmatched keys:

- ``"left"``: every fact is kept; facts whose key has no dimension row get
  null attributes.
- ``"inner"``: facts whose key has no dimension row are dropped.

Null fact keys never match, in either mode.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal

import pandas as pd

from sales_analytics.exceptions import DataQualityError
from sales_analytics.schema import prepare_dimension

logger = logging.getLogger(__name__)

JoinMode = Literal["left", "inner"]
JOIN_MODES = ("left", "inner")


def join_dimension(
    facts: pd.DataFrame,
    dimension: pd.DataFrame,
    key: str,
    columns: Sequence[str],
    how: JoinMode = "left",
    table: str = "dimension",
) -> pd.DataFrame:
    """Attach dimension attributes to facts by equality on ``key``.

    Args:
        facts: Prepared fact rows (see ``schema.prepare_facts``). Must contain ``key``.
        dimension: Dimension table with a unique, non-null ``key``.
        key: Join column present in both tables.
        columns: Dimension attributes to bring over.
        how: Join mode, "left" or "inner".
        table: Dimension name used in logs and error messages.

    Returns:
        New DataFrame with the fact columns followed by ``columns``.

    Raises:
        ValueError: If ``how`` is not a supported join mode.
        DataQualityError: If the dimension is invalid or the key types are incompatible.

    """
    if how not in JOIN_MODES:
        raise ValueError(f"Invalid join mode '{how}'. Must be 'left' or 'inner'.")

    dim = prepare_dimension(dimension, key, columns, table)

    unmatched = int((~facts[key].isin(dim[key])).sum())
    if unmatched:
        action = "dropped" if how == "inner" else "kept with null attributes"
        logger.info(
            "%s of %s fact rows have no matching %s.%s (%s)",
            unmatched,
            len(facts),
            table,
            key,
            action,
        )

    try:
        return facts.merge(dim, on=key, how=how, validate="many_to_one")
    except ValueError as e:
        raise DataQualityError(f"Cannot join fact_sales to {table} on '{key}': {e}") from e
