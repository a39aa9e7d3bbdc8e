"""
Immutable output rows of the seller performance report.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, NamedTuple


class TopProduct(NamedTuple):
    """One of a seller's best-selling products."""
    sku: Any
    quantity: Any


class ReportRow(NamedTuple):
    """Final per-seller report entry (money rounded to 2dp)."""
    seller_id: Any
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: tuple[TopProduct, ...]
    bonus: Decimal

    def to_dict(self) -> dict[str, Any]:
        data = self._asdict()
        data["top_products"] = [product._asdict() for product in self.top_products]
        return data
