"""Sales Analytics - gold-layer sales reports over a star schema.

This package reproduces a fixed set of analytical reports over a sales
fact table and its customer, product and region dimensions, using pandas
instead of a warehouse query engine.

Module Structure:
    sales_analytics.reports: One function per report, plus run_report/run_all_reports
    sales_analytics.engine: Join and window primitives shared by the reports
    sales_analytics.warehouse: CSV loaders and the SalesDataset snapshot
    sales_analytics.schema: Column contracts and input validation
    sales_analytics.config: WarehousePaths and report constants

Quick Start:
    >>> from sales_analytics import WarehousePaths, load_dataset
    >>> from sales_analytics.reports import change_over_time, run_all_reports
    >>>
    >>> paths = WarehousePaths.from_root("data")
    >>> dataset = load_dataset(paths)
    >>>
    >>> monthly = change_over_time(dataset.facts)
    >>> reports = run_all_reports(dataset)
    >>> print(reports["top_customers"])

Grain Reference:
    fact_sales: one row per transaction line (order_id repeats across lines)
    dim_customers / dim_products / dim_region: one row per surrogate key
"""

__version__ = "0.1.0"

from sales_analytics.config import WarehousePaths
from sales_analytics.exceptions import ConfigError, DataQualityError, SalesAnalyticsError
from sales_analytics.warehouse import SalesDataset, load_dataset

__all__ = [
    "ConfigError",
    "DataQualityError",
    "SalesAnalyticsError",
    "SalesDataset",
    "WarehousePaths",
    "__version__",
    "load_dataset",
]
