"""Output formatters for report results."""

from sales_analytics.formatters.console import format_report_for_console

__all__ = ["format_report_for_console"]
