"""Example: run the sales reports on a gold-layer extract

This example loads the star schema from disk once and runs several reports
against the same in-memory dataset.

Prerequisites:
- data/gold/ holds fact_sales.csv, dim_customers.csv, dim_products.csv and
  dim_region.csv (or modify data_root below)
"""

from pathlib import Path

from sales_analytics import WarehousePaths, load_dataset
from sales_analytics.reports import (
    cumulative_sales,
    product_performance,
    run_report,
)

data_root = Path("data")  # MODIFY AS NEEDED

paths = WarehousePaths.from_root(data_root)
dataset = load_dataset(paths)
print(f"Loaded: {dataset.summary()}")

# Monthly growth
cumulative = cumulative_sales(dataset.facts)
print("\nCumulative sales (last 6 months):")
print(cumulative.tail(6))

# Year-over-year per product
yoy = product_performance(dataset.facts, dataset.products)
decreasing = yoy[yoy["year_over_year_change"] == "Decrease"]
print(f"\nProduct-years with decreasing sales: {len(decreasing)} of {len(yoy)}")
print(decreasing.head())

# Top 5 customers through the report registry
top = run_report(dataset, "top_customers", limit=5)
print("\nTop 5 customers by revenue:")
print(top)

# Export everything
paths.ensure_dirs()
for name in ("regional_sales", "category_performance", "profitability"):
    df = run_report(dataset, name)
    out_path = paths.reports / f"{name}.csv"
    df.to_csv(out_path, index=False)
    print(f"Wrote {out_path} ({len(df)} rows)")
