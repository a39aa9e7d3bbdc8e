"""
Sales Report — Dataset Loading & Report Export

Reads a JSON dataset ({"sellers": [...], "products": [...],
"purchase_records": [...]}) and writes the report back out as JSON.
Fractional numbers are parsed as Decimal so money never passes through float
on the way in.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import IO, Any, Iterable, cast

import structlog

from src.config import settings
from src.models.records import SalesDataset
from src.models.report_row import ReportRow
from src.utils.records import is_sequence

logger = structlog.get_logger(__name__)


class DatasetLoadError(Exception):
    """Dataset file is missing, unreadable, or not valid JSON."""


def _count(value: Any) -> int:
    return len(value) if is_sequence(value) else 0


def load_dataset(path: str | Path) -> SalesDataset:
    """
    Load a sales dataset from a JSON file.

    Shape checks are left to validate_inputs(); only a top-level JSON
    object is required here.

    Raises:
        DatasetLoadError: On a missing file, invalid JSON, or a non-object root.
    """
    dataset_path = Path(path)
    try:
        with dataset_path.open(encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Dataset file not found: {dataset_path}") from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Invalid JSON in {dataset_path}: {e}") from e

    if not isinstance(data, dict):
        raise DatasetLoadError(
            f"Dataset root must be a JSON object, got {type(data).__name__}"
        )

    logger.info(
        "dataset_loaded",
        path=str(dataset_path),
        sellers=_count(data.get("sellers")),
        products=_count(data.get("products")),
        purchase_records=_count(data.get("purchase_records")),
    )
    return cast(SalesDataset, data)


def report_to_dicts(rows: Iterable[ReportRow]) -> list[dict[str, Any]]:
    return [row.to_dict() for row in rows]


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def write_report(rows: Iterable[ReportRow], stream: IO[str]) -> None:
    """Write report rows as a JSON array; Decimals become JSON numbers."""
    json.dump(
        report_to_dicts(rows),
        stream,
        default=_json_default,
        indent=settings.REPORT_JSON_INDENT,
        ensure_ascii=False,
    )
    stream.write("\n")
