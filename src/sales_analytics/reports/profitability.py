"""Gold report: monthly average order value and profit margin.

Ratios are computed per month. A month whose ratio has a zero (or null)
denominator gets NaN for that value instead of failing the whole report:

- avg_order_value is NaN when the month has no non-null order_id.
- profit_margin_percentage is NaN when the month's total sales are zero.
"""

from __future__ import annotations

import logging

import pandas as pd

from sales_analytics.engine.windows import round_half_away, safe_divide, truncate_to_month
from sales_analytics.schema import (
    ORDER_DATE,
    ORDER_ID,
    PROFIT,
    SALES_AMOUNT,
    exclude_undated,
    prepare_facts,
)

logger = logging.getLogger(__name__)


def profitability(facts: pd.DataFrame) -> pd.DataFrame:
    """Average order value, total profit and profit margin per month.

    - avg_order_value = sum(sales_amount) / count(distinct order_id)
    - profit_margin_percentage = round(sum(profit) / sum(sales_amount) * 100, 2),
      rounded half away from zero

    Facts with a null order_date are excluded.

    Args:
        facts: fact_sales table including the ``profit`` column.

    Returns:
        DataFrame with columns sales_month (date), avg_order_value,
        total_profit and profit_margin_percentage, ordered by month.

    """
    logger.info("Computing profitability for %s fact rows", len(facts))
    df = exclude_undated(prepare_facts(facts, [ORDER_ID, ORDER_DATE, SALES_AMOUNT, PROFIT]))
    df = df.assign(sales_month=truncate_to_month(df[ORDER_DATE]))

    grouped = df.groupby("sales_month", sort=True)
    total_sales = grouped[SALES_AMOUNT].sum(min_count=1)
    distinct_orders = grouped[ORDER_ID].nunique()
    total_profit = grouped[PROFIT].sum(min_count=1)

    result = pd.DataFrame(
        {
            "avg_order_value": safe_divide(total_sales, distinct_orders),
            "total_profit": total_profit,
            "profit_margin_percentage": round_half_away(
                safe_divide(total_profit, total_sales) * 100
            ),
        }
    ).reset_index()

    degenerate = int(result["avg_order_value"].isna().sum())
    if degenerate:
        logger.debug("%s month(s) have no distinct orders; avg_order_value is NaN", degenerate)
    zero_sales = int((total_sales == 0).sum())
    if zero_sales:
        logger.debug("%s month(s) have zero total sales; profit margin is NaN", zero_sales)

    result["sales_month"] = result["sales_month"].dt.date
    return result
