"""Gold reports: customer revenue ranking and new vs. returning classification.

Note the two reports count orders differently:

- top_customers_by_revenue counts distinct order_id values (orders).
- customer_classification counts order_id rows (transaction lines), so a
  single order with two lines makes a "Returning Customer".
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from sales_analytics.config import NEW_CUSTOMER, RETURNING_CUSTOMER, TOP_CUSTOMERS_LIMIT
from sales_analytics.engine.joins import join_dimension
from sales_analytics.exceptions import ConfigError
from sales_analytics.schema import (
    CUSTOMER_KEY,
    ORDER_DATE,
    ORDER_ID,
    SALES_AMOUNT,
    prepare_facts,
)

logger = logging.getLogger(__name__)


def top_customers_by_revenue(
    facts: pd.DataFrame,
    customers: pd.DataFrame,
    limit: int = TOP_CUSTOMERS_LIMIT,
) -> pd.DataFrame:
    """Customers with the highest total revenue.

    Facts are inner-joined to customers; sales by unknown customers are
    dropped. Ties on total_revenue keep ascending customer_key order.

    Args:
        facts: fact_sales table.
        customers: dim_customers table.
        limit: Maximum number of customers to return (default: 10).

    Returns:
        DataFrame with columns customer_key, total_revenue and total_orders
        (distinct order_id count), at most ``limit`` rows ordered by
        total_revenue descending.

    Raises:
        ConfigError: If limit is not a positive integer.

    """
    if isinstance(limit, bool) or not isinstance(limit, (int, np.integer)) or limit < 1:
        raise ConfigError(f"Invalid limit {limit!r}. Must be a positive integer.")

    logger.info("Computing top %s customers by revenue for %s fact rows", limit, len(facts))
    df = prepare_facts(facts, [ORDER_ID, CUSTOMER_KEY, SALES_AMOUNT])
    df = join_dimension(df, customers, CUSTOMER_KEY, [], how="inner", table="dim_customers")

    grouped = df.groupby(CUSTOMER_KEY, sort=True)
    result = pd.DataFrame(
        {
            "total_revenue": grouped[SALES_AMOUNT].sum(min_count=1),
            "total_orders": grouped[ORDER_ID].nunique(),
        }
    ).reset_index()

    result = result.sort_values("total_revenue", ascending=False, kind="mergesort")
    return result.head(int(limit)).reset_index(drop=True)


def customer_classification(facts: pd.DataFrame) -> pd.DataFrame:
    """Classify each customer as new or returning from their order lines.

    No dimension join: every customer_key in the facts is reported, and null
    customer keys are grouped together. total_orders counts non-null order_id
    rows; a count of exactly 1 is a "New Customer", anything else a
    "Returning Customer".

    Returns:
        DataFrame with columns customer_key, first_order_date (date),
        total_orders and customer_type, ordered by total_orders descending.

    """
    logger.info("Computing customer classification for %s fact rows", len(facts))
    df = prepare_facts(facts, [ORDER_ID, ORDER_DATE, CUSTOMER_KEY])

    grouped = df.groupby(CUSTOMER_KEY, sort=True, dropna=False)
    result = pd.DataFrame(
        {
            "first_order_date": grouped[ORDER_DATE].min(),
            "total_orders": grouped[ORDER_ID].count(),
        }
    ).reset_index()

    result["first_order_date"] = result["first_order_date"].dt.date
    result["customer_type"] = np.where(
        result["total_orders"] == 1, NEW_CUSTOMER, RETURNING_CUSTOMER
    )

    return result.sort_values("total_orders", ascending=False, kind="mergesort").reset_index(
        drop=True
    )
