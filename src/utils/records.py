"""
Sales Report — Record Field Access & Money Helpers

Input records arrive either as mappings (parsed JSON) or as attribute
objects. Money values are converted to Decimal through str() so that
float inputs keep their printed value instead of their binary expansion.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from src.config import settings


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or an attribute object."""
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def is_sequence(value: Any) -> bool:
    """True for list-like collections; strings and bytes do not count."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def to_decimal(value: Any) -> Decimal:
    """
    Convert a numeric input to Decimal.

    None is treated as zero. Raises ValueError on non-numeric input.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    try:
        return Decimal(str(value))
    except ArithmeticError as e:
        raise ValueError(f"Expected a number, got {value!r}") from e


def round_money(value: Decimal) -> Decimal:
    """Round to MONEY_DECIMAL_PLACES using ROUND_HALF_UP (0.005 -> 0.01)."""
    exponent = Decimal(1).scaleb(-settings.MONEY_DECIMAL_PLACES)
    return value.quantize(exponent, rounding=ROUND_HALF_UP)
