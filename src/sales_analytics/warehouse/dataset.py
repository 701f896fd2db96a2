"""In-memory view of the gold-layer star schema."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True, eq=False)
class SalesDataset:
    """The four gold tables every report reads from.

    The dataset is a read-only snapshot: reports copy the columns they need
    and never modify these frames, so one dataset can serve any number of
    report calls.

    Attributes:
        facts: fact_sales, one row per transaction line.
        customers: dim_customers, keyed by customer_key.
        products: dim_products, keyed by product_key.
        regions: dim_region, keyed by region_key.
    """

    facts: pd.DataFrame
    customers: pd.DataFrame
    products: pd.DataFrame
    regions: pd.DataFrame

    def summary(self) -> dict:
        """Row counts per table."""
        return {
            "fact_sales": len(self.facts),
            "dim_customers": len(self.customers),
            "dim_products": len(self.products),
            "dim_region": len(self.regions),
        }
