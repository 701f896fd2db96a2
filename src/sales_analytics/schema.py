"""Column contracts and input validation for the star schema.

Every report validates and coerces its inputs here before aggregating, so a
malformed table fails fast with a DataQualityError instead of producing a
partially computed report. Validation works on copies: caller frames are
never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from sales_analytics.exceptions import DataQualityError

logger = logging.getLogger(__name__)

ORDER_ID = "order_id"
ORDER_DATE = "order_date"
CUSTOMER_KEY = "customer_key"
PRODUCT_KEY = "product_key"
REGION_KEY = "region_key"
SALES_AMOUNT = "sales_amount"
QUANTITY = "quantity"
PROFIT = "profit"

FACT_COLUMNS = [
    ORDER_ID,
    ORDER_DATE,
    CUSTOMER_KEY,
    PRODUCT_KEY,
    REGION_KEY,
    SALES_AMOUNT,
    QUANTITY,
    PROFIT,
]
DATE_COLUMNS = [ORDER_DATE]
MEASURE_COLUMNS = [SALES_AMOUNT, QUANTITY, PROFIT]
NON_NEGATIVE_COLUMNS = [SALES_AMOUNT, QUANTITY]
INTEGER_COLUMNS = [QUANTITY]

PRODUCT_NAME = "product_name"
CATEGORY = "category"
REGION_NAME = "region_name"

CUSTOMER_COLUMNS = [CUSTOMER_KEY]
PRODUCT_COLUMNS = [PRODUCT_KEY, PRODUCT_NAME, CATEGORY]
REGION_COLUMNS = [REGION_KEY, REGION_NAME]


def _require_columns(df: pd.DataFrame, required: Sequence[str], table: str) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise DataQualityError(
            f"Missing required columns in {table}: {missing}. Required: {list(required)}"
        )


def coerce_dates(values: pd.Series, table: str) -> pd.Series:
    """Parse a date column to datetime64, keeping nulls as NaT.

    Numbers and booleans are rejected rather than read as epoch offsets.

    Raises:
        DataQualityError: If the column is numeric or holds unparseable values.

    """
    if pd.api.types.is_datetime64_any_dtype(values):
        return values

    is_number = pd.api.types.is_numeric_dtype(values) or pd.api.types.is_bool_dtype(values)
    if is_number and values.notna().any():
        raise DataQualityError(
            f"Column '{values.name}' in {table} must hold dates, got {values.dtype}"
        )

    try:
        return pd.to_datetime(values)
    except (ValueError, TypeError) as e:
        raise DataQualityError(
            f"Column '{values.name}' in {table} is not a valid date: {e}"
        ) from e


def prepare_facts(facts: pd.DataFrame, required: Sequence[str]) -> pd.DataFrame:
    """Validate the sales fact table and coerce the required columns.

    Args:
        facts: Raw fact_sales table (one row per transaction line).
        required: Fact columns the calling report reads. Only these columns
            are kept in the returned frame.

    Returns:
        A new DataFrame with ``order_date`` as datetime64 (NaT for nulls) and
        measures as numeric dtypes.

    Raises:
        DataQualityError: If a required column is missing or a date/measure
            column holds values that cannot be coerced, order_date holds
            numbers, or quantity holds fractional values.

    """
    if not isinstance(facts, pd.DataFrame):
        raise DataQualityError(f"fact_sales must be a DataFrame, got {type(facts).__name__}")

    _require_columns(facts, required, "fact_sales")
    df = facts.loc[:, list(required)].copy()

    for col in DATE_COLUMNS:
        if col in df.columns:
            df[col] = coerce_dates(df[col], "fact_sales")

    for col in MEASURE_COLUMNS:
        if col not in df.columns:
            continue
        if pd.api.types.is_bool_dtype(df[col]):
            raise DataQualityError(f"Column '{col}' in fact_sales must be numeric, got bool")
        if pd.api.types.is_numeric_dtype(df[col]):
            continue
        try:
            df[col] = pd.to_numeric(df[col])
        except (ValueError, TypeError) as e:
            raise DataQualityError(f"Column '{col}' in fact_sales is not numeric: {e}") from e

    for col in INTEGER_COLUMNS:
        if col not in df.columns:
            continue
        values = df[col].dropna()
        fractional = int((values % 1 != 0).sum())
        if fractional:
            raise DataQualityError(
                f"Column '{col}' in fact_sales must hold whole numbers, "
                f"found {fractional} fractional values"
            )

    for col in NON_NEGATIVE_COLUMNS:
        if col not in df.columns:
            continue
        neg_count = int((df[col] < 0).sum())
        if neg_count:
            logger.warning("fact_sales has %s negative values in '%s'", neg_count, col)

    return df


def prepare_dimension(
    dimension: pd.DataFrame,
    key: str,
    columns: Sequence[str],
    table: str,
) -> pd.DataFrame:
    """Validate a dimension table and return its key plus requested attributes.

    Args:
        dimension: Raw dimension table.
        key: Name of the surrogate key column.
        columns: Attribute columns the calling report reads.
        table: Table name used in error messages.

    Returns:
        A new DataFrame with ``key`` followed by ``columns``.

    Raises:
        DataQualityError: If columns are missing or the key is null or duplicated.

    """
    if not isinstance(dimension, pd.DataFrame):
        raise DataQualityError(f"{table} must be a DataFrame, got {type(dimension).__name__}")

    wanted = [key] + [col for col in columns if col != key]
    _require_columns(dimension, wanted, table)
    df = dimension.loc[:, wanted].copy()

    null_keys = int(df[key].isna().sum())
    if null_keys:
        raise DataQualityError(f"{table}.{key} has {null_keys} null values")

    duplicated = df[key][df[key].duplicated()].unique().tolist()
    if duplicated:
        raise DataQualityError(f"{table}.{key} is not unique, duplicated keys: {duplicated[:10]}")

    return df


def exclude_undated(facts: pd.DataFrame) -> pd.DataFrame:
    """Drop fact rows with a null ``order_date`` (date-keyed reports only)."""
    undated = facts[ORDER_DATE].isna()
    undated_count = int(undated.sum())
    if undated_count:
        logger.debug("Excluding %s fact rows with null order_date", undated_count)
    return facts.loc[~undated]
