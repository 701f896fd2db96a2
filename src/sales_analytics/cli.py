"""Command-line interface for the sales reports.

Loads the gold tables from a data root, runs the requested reports, prints
them and optionally writes each one to CSV.

Usage:
    sales-analytics --data-root data
    sales-analytics --report top_customers --limit 5 --export
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from sales_analytics.config import DATA_ROOT_ENV, TOP_CUSTOMERS_LIMIT, WarehousePaths
from sales_analytics.exceptions import SalesAnalyticsError
from sales_analytics.formatters.console import format_report_for_console
from sales_analytics.reports.api import REPORT_NAMES, run_all_reports
from sales_analytics.warehouse.loaders import load_dataset

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sales-analytics",
        description="Run the gold-layer sales reports over a star schema extract.",
    )
    p.add_argument(
        "--data-root",
        default=os.environ.get(DATA_ROOT_ENV, "data"),
        help=f"Directory containing gold/*.csv (default: ${DATA_ROOT_ENV} or 'data')",
    )
    p.add_argument(
        "--report",
        action="append",
        choices=REPORT_NAMES,
        help="Report to run; repeat for several (default: all reports)",
    )
    p.add_argument(
        "--limit",
        type=int,
        default=TOP_CUSTOMERS_LIMIT,
        help=f"Rows in the top_customers report (default: {TOP_CUSTOMERS_LIMIT})",
    )
    p.add_argument(
        "--export",
        action="store_true",
        help="Write each report as CSV to <data-root>/reports",
    )
    p.add_argument(
        "--output-dir",
        type=Path,
        help="Write each report as CSV to this directory instead (implies --export)",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    paths = WarehousePaths.from_root(args.data_root)

    try:
        dataset = load_dataset(paths)
        results = run_all_reports(dataset, args.report, limit=args.limit)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except SalesAnalyticsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    output_dir = args.output_dir
    if output_dir is None and args.export:
        paths.ensure_dirs()
        output_dir = paths.reports
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    for name, df in results.items():
        print(format_report_for_console(name, df))
        print()
        if output_dir is not None:
            out_path = output_dir / f"{name}.csv"
            df.to_csv(out_path, index=False, encoding="utf-8")
            logger.info("Wrote %s", out_path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
