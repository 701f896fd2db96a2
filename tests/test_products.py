"""Tests for product performance and category performance reports."""

import math

import pandas as pd
import pytest

from sales_analytics.reports.products import category_performance, product_performance


class TestProductPerformance:
    """Yearly product sales compared to the product average and previous year."""

    @pytest.fixture
    def result(self, facts: pd.DataFrame, products: pd.DataFrame) -> pd.DataFrame:
        return product_performance(facts, products)

    def test_columns_and_order(self, result: pd.DataFrame) -> None:
        assert list(result.columns) == [
            "order_year",
            "product_name",
            "current_sales",
            "avg_sales",
            "diff_from_avg",
            "avg_comparison",
            "prev_sales",
            "diff_from_prev",
            "year_over_year_change",
        ]
        # Unknown product (left join) sorts first under a null name
        assert pd.isna(result["product_name"].iloc[0])
        assert result["product_name"].iloc[1:].tolist() == [
            "Bike A",
            "Bike A",
            "Helmet",
            "Helmet",
            "Jersey",
        ]
        assert result["order_year"].tolist() == [2023, 2022, 2023, 2022, 2023, 2023]

    def test_unmatched_products_are_kept(self, result: pd.DataFrame) -> None:
        unknown = result[result["product_name"].isna()].iloc[0]

        assert unknown["current_sales"] == 60
        assert unknown["avg_comparison"] == "On Avg"
        assert unknown["year_over_year_change"] == "No Change"

    def test_average_comparison(self, result: pd.DataFrame) -> None:
        bike = result[result["product_name"] == "Bike A"]

        assert bike["current_sales"].tolist() == [300, 120]
        assert bike["avg_sales"].tolist() == [210.0, 210.0]
        assert bike["diff_from_avg"].tolist() == [90.0, -90.0]
        assert bike["avg_comparison"].tolist() == ["Above Avg", "Below Avg"]

    def test_previous_year_comparison(self, result: pd.DataFrame) -> None:
        bike = result[result["product_name"] == "Bike A"]

        assert math.isnan(bike["prev_sales"].iloc[0])
        assert math.isnan(bike["diff_from_prev"].iloc[0])
        assert bike["year_over_year_change"].iloc[0] == "No Change"
        assert bike["prev_sales"].iloc[1] == 300
        assert bike["diff_from_prev"].iloc[1] == -180
        assert bike["year_over_year_change"].iloc[1] == "Decrease"

    def test_equal_years_are_no_change(self, result: pd.DataFrame) -> None:
        helmet = result[result["product_name"] == "Helmet"]

        assert helmet["current_sales"].tolist() == [80, 80]
        assert helmet["avg_comparison"].tolist() == ["On Avg", "On Avg"]
        assert helmet["diff_from_prev"].iloc[1] == 0
        assert helmet["year_over_year_change"].iloc[1] == "No Change"

    def test_increase_example(self) -> None:
        facts = pd.DataFrame(
            {
                "order_date": ["2022-05-01", "2023-05-01"],
                "product_key": [1, 1],
                "sales_amount": [50, 80],
            }
        )
        products = pd.DataFrame({"product_key": [1], "product_name": ["A"]})

        result = product_performance(facts, products)
        row_2023 = result[result["order_year"] == 2023].iloc[0]

        assert row_2023["prev_sales"] == 50
        assert row_2023["diff_from_prev"] == 30
        assert row_2023["year_over_year_change"] == "Increase"

    def test_previous_row_is_not_previous_calendar_year(self) -> None:
        """A gap year still compares against the product's preceding row."""
        facts = pd.DataFrame(
            {
                "order_date": ["2020-01-01", "2023-01-01"],
                "product_key": [1, 1],
                "sales_amount": [10, 5],
            }
        )
        products = pd.DataFrame({"product_key": [1], "product_name": ["A"]})

        result = product_performance(facts, products)

        assert result["prev_sales"].iloc[1] == 10
        assert result["year_over_year_change"].iloc[1] == "Decrease"

    def test_years_strictly_ascending_per_product(self, result: pd.DataFrame) -> None:
        for _, group in result.groupby("product_name", dropna=False):
            years = group["order_year"].tolist()
            assert years == sorted(set(years))
            assert math.isnan(group["prev_sales"].iloc[0])

    def test_undated_facts_are_excluded(self, result: pd.DataFrame) -> None:
        """SO8 (Jersey, 25.0) has no order_date and must not count."""
        jersey = result[result["product_name"] == "Jersey"]

        assert jersey["current_sales"].tolist() == [40]


class TestCategoryPerformance:
    """Revenue per category over an inner join to products."""

    def test_category_totals(self, facts: pd.DataFrame, products: pd.DataFrame) -> None:
        result = category_performance(facts, products)

        assert list(result.columns) == [
            "category",
            "total_revenue",
            "total_units_sold",
            "avg_sale_value",
        ]
        assert result["category"].tolist() == ["Bikes", "Accessories", "Clothing"]
        assert result["total_revenue"].tolist() == [420, 160, 65]
        assert result["total_units_sold"].tolist() == [4, 4, 2]
        assert result["avg_sale_value"].tolist() == [140.0, 53.33, 32.5]

    def test_unknown_products_are_dropped(
        self, facts: pd.DataFrame, products: pd.DataFrame
    ) -> None:
        result = category_performance(facts, products)

        # SO6 (60.0) references product 9 which is not in dim_products
        assert result["total_revenue"].sum() == facts["sales_amount"].sum() - 60

    def test_average_rounds_half_away_from_zero(self) -> None:
        facts = pd.DataFrame(
            {"product_key": [1, 1], "sales_amount": [0.125, 0.125], "quantity": [1, 1]}
        )
        products = pd.DataFrame({"product_key": [1], "category": ["Bikes"]})

        result = category_performance(facts, products)

        assert result["avg_sale_value"].tolist() == [0.13]
