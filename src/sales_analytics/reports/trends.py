"""Gold reports: sales trend over time.

Both reports are keyed by calendar month (``order_date`` truncated to the
first day of its month). Facts with a null ``order_date`` are excluded.
"""

from __future__ import annotations

import logging

import pandas as pd

from sales_analytics.engine.windows import running_total, truncate_to_month
from sales_analytics.schema import (
    CUSTOMER_KEY,
    ORDER_DATE,
    QUANTITY,
    SALES_AMOUNT,
    exclude_undated,
    prepare_facts,
)

logger = logging.getLogger(__name__)

SALES_MONTH = "sales_month"


def _monthly_groups(facts: pd.DataFrame, required: list[str]):
    df = exclude_undated(prepare_facts(facts, required))
    df = df.assign(**{SALES_MONTH: truncate_to_month(df[ORDER_DATE])})
    return df.groupby(SALES_MONTH, sort=True)


def change_over_time(facts: pd.DataFrame) -> pd.DataFrame:
    """Monthly sales, distinct customers and units sold.

    Args:
        facts: fact_sales table.

    Returns:
        DataFrame with columns sales_month (date), total_sales, total_customers
        and total_quantity, one row per month in ascending order.

    Examples:
        >>> facts = pd.DataFrame({
        ...     "order_date": ["2023-01-15"], "customer_key": [1],
        ...     "sales_amount": [100], "quantity": [2],
        ... })
        >>> change_over_time(facts).iloc[0].to_dict()  # doctest: +SKIP
        {'sales_month': datetime.date(2023, 1, 1), 'total_sales': 100, 'total_customers': 1, 'total_quantity': 2}

    """
    logger.info("Computing change over time for %s fact rows", len(facts))
    grouped = _monthly_groups(facts, [ORDER_DATE, CUSTOMER_KEY, SALES_AMOUNT, QUANTITY])

    result = pd.DataFrame(
        {
            "total_sales": grouped[SALES_AMOUNT].sum(min_count=1),
            "total_customers": grouped[CUSTOMER_KEY].nunique(),
            "total_quantity": grouped[QUANTITY].sum(min_count=1),
        }
    ).reset_index()
    result[SALES_MONTH] = result[SALES_MONTH].dt.date

    return result


def cumulative_sales(facts: pd.DataFrame) -> pd.DataFrame:
    """Monthly sales with the running total from the earliest month.

    The month column is named sales_month rather than order_date, to match
    the other monthly reports. A month whose sales are all null has a null
    total_sales and leaves the running total unchanged; the running total is
    null until the first month with non-null sales.

    Returns:
        DataFrame with columns sales_month (date), total_sales and running_total,
        one row per month in ascending order.

    """
    logger.info("Computing cumulative sales for %s fact rows", len(facts))
    grouped = _monthly_groups(facts, [ORDER_DATE, SALES_AMOUNT])

    result = grouped[SALES_AMOUNT].sum(min_count=1).reset_index(name="total_sales")
    result["running_total"] = running_total(result["total_sales"])
    result[SALES_MONTH] = result[SALES_MONTH].dt.date

    return result
