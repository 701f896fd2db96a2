"""Console output formatting utilities."""

from __future__ import annotations

import pandas as pd

from sales_analytics.reports.api import REPORTS


def format_report_for_console(name: str, df: pd.DataFrame) -> str:
    """Build a human-readable table for one report.

    Args:
        name: Report name, used to look up the display title.
        df: Report DataFrame.

    Returns:
        Title, underline and the table with floats as ``1,234.56``.
    """
    title = REPORTS.get(name, name)
    lines = [title, "=" * 60]

    if df.empty:
        lines.append("No rows.")
    else:
        lines.append(df.to_string(index=False, float_format=lambda v: f"{v:,.2f}"))

    return "\n".join(lines)
