"""Public API for running reports by name.

This module lets callers (and the CLI) run any report against a
SalesDataset without knowing which tables each report needs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd

from sales_analytics.config import TOP_CUSTOMERS_LIMIT
from sales_analytics.reports.customers import customer_classification, top_customers_by_revenue
from sales_analytics.reports.products import category_performance, product_performance
from sales_analytics.reports.profitability import profitability
from sales_analytics.reports.regions import regional_sales
from sales_analytics.reports.trends import change_over_time, cumulative_sales
from sales_analytics.warehouse.dataset import SalesDataset

logger = logging.getLogger(__name__)

# Report name -> display title, in presentation order
REPORTS = {
    "change_over_time": "Change Over Time",
    "cumulative_sales": "Cumulative Sales",
    "product_performance": "Product Performance",
    "top_customers": "Top Customers by Revenue",
    "customer_classification": "New vs Returning Customers",
    "regional_sales": "Regional Sales",
    "category_performance": "Product Category Performance",
    "profitability": "Average Order Value & Profitability",
}

REPORT_NAMES = tuple(REPORTS)


def run_report(
    dataset: SalesDataset,
    name: str,
    *,
    limit: int = TOP_CUSTOMERS_LIMIT,
) -> pd.DataFrame:
    """Run a single report against the dataset.

    Args:
        dataset: Gold tables to report on.
        name: One of REPORT_NAMES.
        limit: Row limit for the top_customers report (ignored by the others).

    Returns:
        The report DataFrame.

    Raises:
        ValueError: If name is not a known report.

    """
    if name not in REPORTS:
        raise ValueError(f"Unknown report '{name}'. Must be one of: {', '.join(REPORT_NAMES)}")

    logger.debug("Running report %s", name)

    if name == "change_over_time":
        return change_over_time(dataset.facts)
    elif name == "cumulative_sales":
        return cumulative_sales(dataset.facts)
    elif name == "product_performance":
        return product_performance(dataset.facts, dataset.products)
    elif name == "top_customers":
        return top_customers_by_revenue(dataset.facts, dataset.customers, limit=limit)
    elif name == "customer_classification":
        return customer_classification(dataset.facts)
    elif name == "regional_sales":
        return regional_sales(dataset.facts, dataset.regions)
    elif name == "category_performance":
        return category_performance(dataset.facts, dataset.products)
    else:  # profitability
        return profitability(dataset.facts)


def run_all_reports(
    dataset: SalesDataset,
    names: Iterable[str] | None = None,
    *,
    limit: int = TOP_CUSTOMERS_LIMIT,
) -> dict[str, pd.DataFrame]:
    """Run several reports, returning them keyed by name in the order requested.

    Args:
        dataset: Gold tables to report on.
        names: Reports to run. If None, runs every report in REPORT_NAMES order.
        limit: Row limit for the top_customers report.

    Returns:
        Dictionary mapping report name to its DataFrame.

    Raises:
        ValueError: If any name is not a known report.

    """
    selected = list(REPORT_NAMES if names is None else names)
    unknown = [name for name in selected if name not in REPORTS]
    if unknown:
        raise ValueError(f"Unknown report(s) {unknown}. Must be among: {', '.join(REPORT_NAMES)}")

    logger.info("Running %s report(s)", len(selected))
    return {name: run_report(dataset, name, limit=limit) for name in selected}
