"""Gold reports: product and category performance."""

from __future__ import annotations

import logging

import pandas as pd

from sales_analytics.config import (
    ABOVE_AVG,
    BELOW_AVG,
    DECREASE,
    INCREASE,
    NO_CHANGE,
    ON_AVG,
)
from sales_analytics.engine.joins import join_dimension
from sales_analytics.engine.windows import (
    compare_label,
    lag_within_partition,
    partition_mean,
    round_half_away,
)
from sales_analytics.schema import (
    CATEGORY,
    ORDER_DATE,
    PRODUCT_KEY,
    PRODUCT_NAME,
    QUANTITY,
    SALES_AMOUNT,
    exclude_undated,
    prepare_facts,
)

logger = logging.getLogger(__name__)

PRODUCT_PERFORMANCE_COLUMNS = [
    "order_year",
    PRODUCT_NAME,
    "current_sales",
    "avg_sales",
    "diff_from_avg",
    "avg_comparison",
    "prev_sales",
    "diff_from_prev",
    "year_over_year_change",
]


def product_performance(facts: pd.DataFrame, products: pd.DataFrame) -> pd.DataFrame:
    """Yearly sales per product compared to its average and to its previous year.

    Facts are left-joined to products, so sales whose product_key has no
    dimension row are reported under a null product_name. Facts with a null
    order_date are excluded before the join.

    For each (order_year, product_name) row:

    - avg_sales: mean of current_sales over all of the product's years
    - prev_sales: current_sales of the product's preceding row in year order,
      which is not necessarily the previous calendar year; null for the
      product's first year
    - avg_comparison: "Above Avg", "Below Avg" or "On Avg"
    - year_over_year_change: "Increase", "Decrease" or "No Change" (also used
      when prev_sales is null)

    Args:
        facts: fact_sales table.
        products: dim_products table.

    Returns:
        DataFrame ordered by product_name (nulls first) then order_year.

    """
    logger.info("Computing product performance for %s fact rows", len(facts))
    df = exclude_undated(prepare_facts(facts, [ORDER_DATE, PRODUCT_KEY, SALES_AMOUNT]))
    df = join_dimension(
        df, products, PRODUCT_KEY, [PRODUCT_NAME], how="left", table="dim_products"
    )
    df["order_year"] = df[ORDER_DATE].dt.year

    yearly = (
        df.groupby(["order_year", PRODUCT_NAME], dropna=False)[SALES_AMOUNT]
        .sum(min_count=1)
        .reset_index(name="current_sales")
        .sort_values([PRODUCT_NAME, "order_year"], na_position="first", kind="mergesort")
        .reset_index(drop=True)
    )

    names = yearly[PRODUCT_NAME]
    current = yearly["current_sales"]

    yearly["avg_sales"] = partition_mean(current, names)
    yearly["diff_from_avg"] = current - yearly["avg_sales"]
    yearly["avg_comparison"] = compare_label(
        current, yearly["avg_sales"], ABOVE_AVG, BELOW_AVG, ON_AVG
    )
    yearly["prev_sales"] = lag_within_partition(current, names)
    yearly["diff_from_prev"] = current - yearly["prev_sales"]
    yearly["year_over_year_change"] = compare_label(
        current, yearly["prev_sales"], INCREASE, DECREASE, NO_CHANGE
    )

    return yearly[PRODUCT_PERFORMANCE_COLUMNS]


def category_performance(facts: pd.DataFrame, products: pd.DataFrame) -> pd.DataFrame:
    """Revenue, units sold and average line value per product category.

    Facts are inner-joined to products; facts without a matching product are
    dropped. avg_sale_value is rounded half away from zero to 2 decimals.

    Returns:
        DataFrame with columns category, total_revenue, total_units_sold and
        avg_sale_value, ordered by total_revenue descending.

    """
    logger.info("Computing category performance for %s fact rows", len(facts))
    df = prepare_facts(facts, [PRODUCT_KEY, SALES_AMOUNT, QUANTITY])
    df = join_dimension(df, products, PRODUCT_KEY, [CATEGORY], how="inner", table="dim_products")

    grouped = df.groupby(CATEGORY, dropna=False)
    result = pd.DataFrame(
        {
            "total_revenue": grouped[SALES_AMOUNT].sum(min_count=1),
            "total_units_sold": grouped[QUANTITY].sum(min_count=1),
            "avg_sale_value": round_half_away(grouped[SALES_AMOUNT].mean()),
        }
    ).reset_index()

    return result.sort_values("total_revenue", ascending=False, kind="mergesort").reset_index(
        drop=True
    )
