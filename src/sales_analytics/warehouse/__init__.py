"""Read-only access to the gold-layer star schema.

Example:
    >>> from sales_analytics import WarehousePaths
    >>> from sales_analytics.warehouse import load_dataset
    >>>
    >>> paths = WarehousePaths.from_root("data")
    >>> dataset = load_dataset(paths)
    >>> dataset.facts.head()

"""

from sales_analytics.warehouse.dataset import SalesDataset
from sales_analytics.warehouse.loaders import (
    load_dataset,
    load_dim_customers,
    load_dim_products,
    load_dim_region,
    load_fact_sales,
)

__all__ = [
    "SalesDataset",
    "load_dataset",
    "load_dim_customers",
    "load_dim_products",
    "load_dim_region",
    "load_fact_sales",
]
