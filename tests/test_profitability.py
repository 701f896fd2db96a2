"""Tests for the monthly profitability report."""

import math
from datetime import date

import pandas as pd

from sales_analytics.formatters.console import format_report_for_console
from sales_analytics.reports.profitability import profitability


def test_monthly_profitability(facts: pd.DataFrame) -> None:
    result = profitability(facts)

    assert list(result.columns) == [
        "sales_month",
        "avg_order_value",
        "total_profit",
        "profit_margin_percentage",
    ]
    assert result["sales_month"].tolist() == [
        date(2022, 1, 1),
        date(2022, 2, 1),
        date(2023, 3, 1),
        date(2023, 4, 1),
        date(2023, 5, 1),
    ]
    assert result["avg_order_value"].tolist() == [90.0, 200.0, 80.0, 80.0, 60.0]
    assert result["total_profit"].tolist() == [36, 50, 25, 16, 12]
    # 25 / 160 * 100 = 15.625 rounds half away from zero
    assert result["profit_margin_percentage"].tolist() == [20.0, 25.0, 15.63, 20.0, 20.0]


def test_zero_sales_month_yields_null_margin() -> None:
    facts = pd.DataFrame(
        {
            "order_id": ["A", "B"],
            "order_date": ["2024-01-10", "2024-02-10"],
            "sales_amount": [0.0, 50.0],
            "profit": [0.0, 10.0],
        }
    )

    result = profitability(facts)

    assert math.isnan(result["profit_margin_percentage"].iloc[0])
    assert result["avg_order_value"].iloc[0] == 0.0
    assert result["profit_margin_percentage"].iloc[1] == 20.0


def test_month_without_orders_yields_null_avg_order_value() -> None:
    facts = pd.DataFrame(
        {
            "order_id": [None, "B"],
            "order_date": ["2024-01-10", "2024-02-10"],
            "sales_amount": [10.0, 50.0],
            "profit": [1.0, 10.0],
        }
    )

    result = profitability(facts)

    assert math.isnan(result["avg_order_value"].iloc[0])
    assert result["profit_margin_percentage"].iloc[0] == 10.0
    assert result["avg_order_value"].iloc[1] == 50.0


def test_negative_profit_margin() -> None:
    facts = pd.DataFrame(
        {
            "order_id": ["A"],
            "order_date": ["2024-03-03"],
            "sales_amount": [80.0],
            "profit": [-10.0],
        }
    )

    result = profitability(facts)

    assert result["profit_margin_percentage"].tolist() == [-12.5]


def test_tiny_loss_margin_rounds_to_positive_zero() -> None:
    facts = pd.DataFrame(
        {
            "order_id": ["A"],
            "order_date": ["2024-03-03"],
            "sales_amount": [1000.0],
            "profit": [-0.01],
        }
    )

    result = profitability(facts)

    margin = result["profit_margin_percentage"].iloc[0]
    assert margin == 0.0
    assert math.copysign(1.0, margin) == 1.0
    assert "-0.00" not in format_report_for_console("profitability", result)
