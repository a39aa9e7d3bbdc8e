"""
Sales Report — Application Entrypoint

Configures structlog, loads a JSON dataset, runs the seller performance
analysis with the reference revenue and bonus strategies, and writes the
report as JSON.

Run via:
    python -m src.main --input data.json
    python -m src.main --input data.json --output report.json --top 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import structlog

from src.config import settings
from src.engine.aggregation import analyze_sales_data
from src.engine.bonus import calculate_bonus_by_profit
from src.engine.errors import SalesDataError
from src.engine.options import AnalysisOptions
from src.engine.revenue import calculate_simple_revenue
from src.pipeline.dataset_io import DatasetLoadError, load_dataset, write_report


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO") -> None:
    """
    Set up structured logging with JSON output on stderr.

    stdout is reserved for the report itself.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper())

    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rank sellers by profit and compute revenue, bonus and top products.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.main --input data.json
  python -m src.main --input data.json --output report.json --top 5 --log-level DEBUG
""",
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to a JSON dataset with sellers, products and purchase_records.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write the report here instead of stdout.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=settings.TOP_PRODUCTS_LIMIT,
        help=f"Top products per seller (default: {settings.TOP_PRODUCTS_LIMIT}).",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {settings.LOG_LEVEL}).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the report and return a process exit code.

    Execution order:
    1. Configure logging (structlog JSON)
    2. Load the dataset
    3. Analyze with the reference strategies
    4. Write the report to --output or stdout
    """
    args = parse_args(argv)
    _configure_logging(log_level=args.log_level)
    logger = structlog.get_logger(__name__)

    options = AnalysisOptions(
        revenue_strategy=calculate_simple_revenue,
        bonus_strategy=calculate_bonus_by_profit,
        top_products_limit=args.top,
    )

    try:
        data = load_dataset(args.input)
        report = analyze_sales_data(data, options)
    except (DatasetLoadError, SalesDataError) as e:
        logger.error(
            "sales_report_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        print(f"Failed to build report: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                write_report(report, f)
        except OSError as e:
            logger.error(
                "sales_report_failed",
                error=str(e),
                error_type=type(e).__name__,
                path=args.output,
            )
            print(f"Failed to write report: {e}", file=sys.stderr)
            return 1
        logger.info("sales_report_written", path=args.output, rows=len(report))
    else:
        write_report(report, sys.stdout)

    return 0


# ---------------------------------------------------------------------------
# CLI Entry
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    sys.exit(main())
