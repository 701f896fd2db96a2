"""Gold report: sales by region."""

from __future__ import annotations

import logging

import pandas as pd

from sales_analytics.engine.joins import join_dimension
from sales_analytics.schema import (
    ORDER_ID,
    REGION_KEY,
    REGION_NAME,
    SALES_AMOUNT,
    prepare_facts,
)

logger = logging.getLogger(__name__)


def regional_sales(facts: pd.DataFrame, regions: pd.DataFrame) -> pd.DataFrame:
    """Total sales, distinct orders and average line value per region.

    Facts are inner-joined to regions, then grouped by region_name (regions
    sharing a name are combined). avg_order_value is the mean sales_amount
    per transaction line, not per order.

    Args:
        facts: fact_sales table.
        regions: dim_region table.

    Returns:
        DataFrame with columns region_name, total_sales, total_orders and
        avg_order_value, ordered by total_sales descending.

    """
    logger.info("Computing regional sales for %s fact rows", len(facts))
    df = prepare_facts(facts, [ORDER_ID, REGION_KEY, SALES_AMOUNT])
    df = join_dimension(df, regions, REGION_KEY, [REGION_NAME], how="inner", table="dim_region")

    grouped = df.groupby(REGION_NAME, dropna=False)
    result = pd.DataFrame(
        {
            "total_sales": grouped[SALES_AMOUNT].sum(min_count=1),
            "total_orders": grouped[ORDER_ID].nunique(),
            "avg_order_value": grouped[SALES_AMOUNT].mean(),
        }
    ).reset_index()

    return result.sort_values("total_sales", ascending=False, kind="mergesort").reset_index(
        drop=True
    )
