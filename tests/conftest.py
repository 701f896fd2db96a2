"""Shared fixtures: a small star schema with known report results.

fact_sales rows (order_id, order_date, customer, product, region, sales, qty, profit):

    SO1  2022-01-05  10  1    100   100  1   20
    SO1  2022-01-05  10  2    100    50  2   10
    SO2  2022-01-20  11  2    101    30  1    6
    SO3  2022-02-10  10  1    100   200  2   50
    SO4  2023-03-01  12  3    101    40  1   -5
    SO5  2023-03-15  11  1    999   120  1   30   <- unknown region
    SO6  2023-05-10  13  9    100    60  3   12   <- unknown product
    SO7  2023-04-02  99  2    101    80  1   16   <- unknown customer
    SO8  (null)      12  3    100    25  1    5   <- undated
"""

from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from sales_analytics import SalesDataset


@pytest.fixture
def facts() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "order_id": ["SO1", "SO1", "SO2", "SO3", "SO4", "SO5", "SO6", "SO7", "SO8"],
            "order_date": [
                "2022-01-05",
                "2022-01-05",
                "2022-01-20",
                "2022-02-10",
                "2023-03-01",
                "2023-03-15",
                "2023-05-10",
                "2023-04-02",
                None,
            ],
            "customer_key": [10, 10, 11, 10, 12, 11, 13, 99, 12],
            "product_key": [1, 2, 2, 1, 3, 1, 9, 2, 3],
            "region_key": [100, 100, 101, 100, 101, 999, 100, 101, 100],
            "sales_amount": [100, 50, 30, 200, 40, 120, 60, 80, 25],
            "quantity": [1, 2, 1, 2, 1, 1, 3, 1, 1],
            "profit": [20, 10, 6, 50, -5, 30, 12, 16, 5],
        }
    )


@pytest.fixture
def customers() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "customer_key": [10, 11, 12, 13],
            "first_name": ["Ana", "Ben", "Cruz", "Dee"],
            "country": ["Spain", "Germany", "Mexico", "Canada"],
        }
    )


@pytest.fixture
def products() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "product_key": [1, 2, 3],
            "product_name": ["Bike A", "Helmet", "Jersey"],
            "category": ["Bikes", "Accessories", "Clothing"],
        }
    )


@pytest.fixture
def regions() -> pd.DataFrame:
    return pd.DataFrame({"region_key": [100, 101], "region_name": ["North", "South"]})


@pytest.fixture
def dataset(
    facts: pd.DataFrame,
    customers: pd.DataFrame,
    products: pd.DataFrame,
    regions: pd.DataFrame,
) -> SalesDataset:
    return SalesDataset(facts=facts, customers=customers, products=products, regions=regions)


@pytest.fixture
def write_gold(dataset: SalesDataset) -> Callable[[Path], Path]:
    """Return a helper that writes the fixture tables as gold CSVs under a root."""

    def _write(data_root: Path) -> Path:
        gold = data_root / "gold"
        gold.mkdir(parents=True, exist_ok=True)
        dataset.facts.to_csv(gold / "fact_sales.csv", index=False)
        dataset.customers.to_csv(gold / "dim_customers.csv", index=False)
        dataset.products.to_csv(gold / "dim_products.csv", index=False)
        dataset.regions.to_csv(gold / "dim_region.csv", index=False)
        return data_root

    return _write
