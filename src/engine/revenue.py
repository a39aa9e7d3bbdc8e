"""
Sales Report — Simple Revenue Strategy

Item revenue = sale_price × quantity × (1 - discount / 100)
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from src.utils.records import get_field, to_decimal

_ONE = Decimal("1")
_HUNDRED = Decimal("100")


def calculate_simple_revenue(item: Any, _product: Any) -> Decimal:
    """
    Revenue of a single line item after its percentage discount.

    The product card is accepted to satisfy the revenue strategy
    signature but is not used.

    Args:
        item: Line item with sale_price, quantity and discount (percent).
        _product: Product card for the item's sku.

    Returns:
        Unrounded Decimal revenue.

    Examples:
        >>> calculate_simple_revenue({"sale_price": 100, "quantity": 2, "discount": 10}, None)
        Decimal('180.0')
    """
    sale_price = to_decimal(get_field(item, "sale_price"))
    quantity = to_decimal(get_field(item, "quantity"))
    discount = to_decimal(get_field(item, "discount"))

    discount_multiplier = _ONE - discount / _HUNDRED
    return sale_price * quantity * discount_multiplier
