"""
Sales Report — Input Validation

All-or-nothing shape check run before any aggregation. The first failing
check raises; nothing is mutated.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from src.engine.errors import (
    InvalidOptionsError,
    InvalidProductsError,
    InvalidPurchaseRecordsError,
    InvalidSellersError,
    MissingDataError,
    MissingStrategiesError,
)
from src.engine.options import AnalysisOptions
from src.utils.records import get_field, is_sequence


def _require_collection(data: Any, name: str, error: type[Exception], label: str) -> None:
    value = get_field(data, name)
    if not is_sequence(value) or len(value) == 0:
        raise error(f"{label} must be a non-empty sequence")


def resolve_options(options: Any) -> AnalysisOptions:
    """
    Normalize options into AnalysisOptions.

    Accepts AnalysisOptions, a mapping, or any attribute object carrying the
    option fields. Scalars and sequences are not configuration objects.
    """
    if isinstance(options, AnalysisOptions):
        return options
    if isinstance(options, (str, bytes, bytearray, int, float, Decimal)) or is_sequence(options):
        raise InvalidOptionsError(
            f"options must be a configuration object, got {type(options).__name__}"
        )
    return AnalysisOptions(
        revenue_strategy=get_field(options, "revenue_strategy"),
        bonus_strategy=get_field(options, "bonus_strategy"),
        top_products_limit=get_field(options, "top_products_limit"),
    )


def validate_inputs(data: Any, options: Any) -> AnalysisOptions:
    """
    Validate the dataset and options bundle.

    Check order:
    1. data present
    2. sellers, products, purchase_records are non-empty sequences
    3. options is a configuration object (not a scalar or sequence)
    4. both strategies are callable
    5. top_products_limit, when given, is a positive int

    Args:
        data: Mapping or object with sellers, products, purchase_records.
        options: AnalysisOptions, mapping, or attribute object.

    Returns:
        Resolved AnalysisOptions.

    Raises:
        SalesDataError subclass for the first failing check.
    """
    if data is None:
        raise MissingDataError("sales data is missing")

    _require_collection(data, "sellers", InvalidSellersError, "sellers")
    _require_collection(data, "products", InvalidProductsError, "products")
    _require_collection(
        data, "purchase_records", InvalidPurchaseRecordsError, "purchase_records"
    )

    if options is None:
        raise InvalidOptionsError("options are missing")
    resolved = resolve_options(options)

    missing = [
        name
        for name in ("revenue_strategy", "bonus_strategy")
        if not callable(getattr(resolved, name))
    ]
    if missing:
        raise MissingStrategiesError(
            f"options must provide callable strategies: {', '.join(missing)}"
        )

    limit = resolved.top_products_limit
    if limit is not None and (
        isinstance(limit, bool) or not isinstance(limit, int) or limit < 1
    ):
        raise InvalidOptionsError(
            f"top_products_limit must be a positive integer, got {limit!r}"
        )

    return resolved
