"""Load the gold-layer star schema from CSV extracts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from sales_analytics.config import WarehousePaths

from sales_analytics.schema import ORDER_DATE, coerce_dates
from sales_analytics.warehouse.dataset import SalesDataset

logger = logging.getLogger(__name__)


def _read_table(path: Path, table: str) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"{table} not found at {path}")

    df = pd.read_csv(path, encoding="utf-8")
    logger.info("Loaded %s: %s rows from %s", table, len(df), path)
    return df


def load_fact_sales(paths: WarehousePaths) -> pd.DataFrame:
    """Load fact_sales with ``order_date`` parsed to datetime.

    Raises:
        FileNotFoundError: If fact_sales.csv is missing.
        DataQualityError: If order_date holds numbers or unparseable values.

    """
    df = _read_table(paths.fact_sales, "fact_sales")
    if ORDER_DATE in df.columns:
        df[ORDER_DATE] = coerce_dates(df[ORDER_DATE], str(paths.fact_sales))
    return df


def load_dim_customers(paths: WarehousePaths) -> pd.DataFrame:
    return _read_table(paths.dim_customers, "dim_customers")


def load_dim_products(paths: WarehousePaths) -> pd.DataFrame:
    return _read_table(paths.dim_products, "dim_products")


def load_dim_region(paths: WarehousePaths) -> pd.DataFrame:
    return _read_table(paths.dim_region, "dim_region")


def load_dataset(paths: WarehousePaths) -> SalesDataset:
    """Load all four gold tables into a SalesDataset.

    Args:
        paths: WarehousePaths configuration.

    Returns:
        SalesDataset snapshot.

    Raises:
        FileNotFoundError: If any of the table files is missing.

    Examples:
        >>> from sales_analytics import WarehousePaths
        >>> dataset = load_dataset(WarehousePaths.from_root("data"))  # doctest: +SKIP
        >>> dataset.summary()  # doctest: +SKIP
        {'fact_sales': 60398, 'dim_customers': 18484, 'dim_products': 295, 'dim_region': 6}

    """
    dataset = SalesDataset(
        facts=load_fact_sales(paths),
        customers=load_dim_customers(paths),
        products=load_dim_products(paths),
        regions=load_dim_region(paths),
    )
    logger.debug("Dataset loaded: %s", dataset.summary())
    return dataset
