"""
Per-seller running totals, owned by a single analysis run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from src.models.report_row import TopProduct


@dataclass
class SellerAggregate:
    """Mutable accumulator for one input seller."""
    id: Any
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    products_sold: dict[Any, Any] = field(default_factory=dict)  # sku -> quantity, first-sold order
    bonus: Decimal = Decimal("0")
    top_products: tuple[TopProduct, ...] = ()
