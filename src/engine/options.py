"""
Sales Report — Analysis Options & Strategy Interfaces

Revenue and bonus policies are injected by the caller. Any callable with
the matching signature satisfies the protocols below.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Protocol

if TYPE_CHECKING:
    from src.models.seller_aggregate import SellerAggregate


class RevenueStrategy(Protocol):
    def __call__(self, item: Any, product: Any) -> Decimal | float | int: ...


class BonusStrategy(Protocol):
    def __call__(
        self, index: int, total: int, seller: SellerAggregate
    ) -> Decimal | float | int: ...


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Options bundle for analyze_sales_data().

    Attributes:
        revenue_strategy: (item, product) -> item revenue.
        bonus_strategy: (rank_index, total_sellers, seller) -> bonus.
        top_products_limit: Max top products per seller; None uses
            settings.TOP_PRODUCTS_LIMIT.
    """
    revenue_strategy: Optional[RevenueStrategy] = None
    bonus_strategy: Optional[BonusStrategy] = None
    top_products_limit: Optional[int] = None
