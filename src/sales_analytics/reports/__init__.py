"""Gold-layer sales reports.

Each report is a pure function over the fact table (and the dimension tables
it needs) that returns an ordered DataFrame:

- **change_over_time**: monthly sales, customers and quantity
- **cumulative_sales**: monthly sales with running total
- **product_performance**: yearly product sales vs. average and previous year
- **top_customers_by_revenue**: top 10 customers by revenue
- **customer_classification**: new vs. returning customers
- **regional_sales**: sales per region
- **category_performance**: revenue and units per product category
- **profitability**: monthly average order value and profit margin

Example:
    >>> from sales_analytics.reports import change_over_time, run_report
    >>>
    >>> monthly = change_over_time(dataset.facts)
    >>> top = run_report(dataset, "top_customers", limit=5)

"""

from sales_analytics.reports.api import REPORT_NAMES, REPORTS, run_all_reports, run_report
from sales_analytics.reports.customers import customer_classification, top_customers_by_revenue
from sales_analytics.reports.products import category_performance, product_performance
from sales_analytics.reports.profitability import profitability
from sales_analytics.reports.regions import regional_sales
from sales_analytics.reports.trends import change_over_time, cumulative_sales

__all__ = [
    "REPORTS",
    "REPORT_NAMES",
    "category_performance",
    "change_over_time",
    "cumulative_sales",
    "customer_classification",
    "product_performance",
    "profitability",
    "regional_sales",
    "run_all_reports",
    "run_report",
    "top_customers_by_revenue",
]
