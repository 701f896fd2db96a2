"""Configuration for sales analytics.

This module provides the WarehousePaths class for locating the gold-layer
star schema on disk, plus the constants shared by the reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Number of rows returned by the top customers report
TOP_CUSTOMERS_LIMIT = 10

# Decimal places for rounded averages and percentages
ROUND_DECIMALS = 2

# Environment variable consulted by the CLI for the default data root
DATA_ROOT_ENV = "SALES_ANALYTICS_DATA_ROOT"

# Labels
ABOVE_AVG = "Above Avg"
BELOW_AVG = "Below Avg"
ON_AVG = "On Avg"

INCREASE = "Increase"
DECREASE = "Decrease"
NO_CHANGE = "No Change"

NEW_CUSTOMER = "New Customer"
RETURNING_CUSTOMER = "Returning Customer"


@dataclass
class WarehousePaths:
    """All filesystem paths used to read the star schema and write reports.

    Attributes:
        data_root: Root directory holding the gold tables and report output.

    Directory Structure:
        data_root/
        ├── gold/
        │   ├── fact_sales.csv
        │   ├── dim_customers.csv
        │   ├── dim_products.csv
        │   └── dim_region.csv
        └── reports/         # one CSV per report when exported

    """

    data_root: Path

    @classmethod
    def from_root(cls, data_root: str | Path) -> WarehousePaths:
        """Create WarehousePaths from a root directory.

        Args:
            data_root: Root directory for the warehouse extract.

        Returns:
            WarehousePaths instance.

        Examples:
            >>> paths = WarehousePaths.from_root("data")
            >>> paths.fact_sales
            PosixPath('data/gold/fact_sales.csv')

        """
        if isinstance(data_root, str):
            data_root = Path(data_root)

        return cls(data_root=data_root)

    @property
    def gold(self) -> Path:
        """Gold layer: modeled fact and dimension tables."""
        return self.data_root / "gold"

    @property
    def fact_sales(self) -> Path:
        return self.gold / "fact_sales.csv"

    @property
    def dim_customers(self) -> Path:
        return self.gold / "dim_customers.csv"

    @property
    def dim_products(self) -> Path:
        return self.gold / "dim_products.csv"

    @property
    def dim_region(self) -> Path:
        return self.gold / "dim_region.csv"

    @property
    def reports(self) -> Path:
        """Output directory for exported report CSVs."""
        return self.data_root / "reports"

    def ensure_dirs(self) -> None:
        """Create the report output directory."""
        self.reports.mkdir(parents=True, exist_ok=True)
