"""
Models package — export report and aggregate types.
"""

from src.models.records import (
    ProductRecord,
    PurchaseItem,
    PurchaseRecord,
    SalesDataset,
    SellerRecord,
)
from src.models.report_row import ReportRow, TopProduct
from src.models.seller_aggregate import SellerAggregate

__all__ = [
    "ProductRecord",
    "PurchaseItem",
    "PurchaseRecord",
    "ReportRow",
    "SalesDataset",
    "SellerAggregate",
    "SellerRecord",
    "TopProduct",
]
