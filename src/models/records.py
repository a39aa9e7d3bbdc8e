"""
Input record shapes.

Loaders hand the engine already-parsed data; these TypedDicts document the
field names the engine reads. Attribute objects with the same field names
are accepted as well.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence, TypedDict, Union

Number = Union[int, float, Decimal]


class SellerRecord(TypedDict):
    id: str
    first_name: str
    last_name: str


class ProductRecord(TypedDict):
    sku: str
    purchase_price: Number


class PurchaseItem(TypedDict):
    sku: str
    quantity: Number
    sale_price: Number
    discount: Number  # percent, 0-100


class PurchaseRecord(TypedDict):
    seller_id: str
    total_amount: Number
    total_discount: Number
    items: Sequence[PurchaseItem]


class SalesDataset(TypedDict):
    sellers: Sequence[SellerRecord]
    products: Sequence[ProductRecord]
    purchase_records: Sequence[PurchaseRecord]
