"""
Sales Report — Seller Performance Aggregation

Pipeline (single run, one static dataset):
1. Validate inputs and resolve options
2. Build seller aggregates and the seller/product lookups
3. Fold purchase records into per-seller revenue, profit, sales_count, products_sold
4. Stable sort sellers by profit descending
5. Assign bonus per rank and pick each seller's top products
6. Format immutable report rows (money rounded to 2dp)

Unknown seller ids skip the whole receipt. Unknown skus skip only the
item; the receipt still counts toward sales_count and revenue.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping, NamedTuple, Sequence

import structlog

from src.config import settings
from src.engine.options import BonusStrategy, RevenueStrategy
from src.engine.validation import validate_inputs
from src.models.records import SalesDataset
from src.models.report_row import ReportRow, TopProduct
from src.models.seller_aggregate import SellerAggregate
from src.utils.records import get_field, round_money, to_decimal

logger = structlog.get_logger(__name__)


class FoldStats(NamedTuple):
    """Data-quality counters from one fold over purchase records."""
    receipts_processed: int
    receipts_skipped: int
    items_skipped: int


# ---------------------------------------------------------------------------
# Index Builders
# ---------------------------------------------------------------------------


def build_seller_stats(sellers: Iterable[Any]) -> list[SellerAggregate]:
    """One zeroed aggregate per input seller, in input order."""
    return [
        SellerAggregate(
            id=get_field(seller, "id"),
            name=f"{get_field(seller, 'first_name')} {get_field(seller, 'last_name')}",
        )
        for seller in sellers
    ]


def build_seller_index(stats: Iterable[SellerAggregate]) -> dict[Any, SellerAggregate]:
    """Seller id -> aggregate. Duplicate ids: last one wins."""
    return {seller.id: seller for seller in stats}


def build_product_index(products: Iterable[Any]) -> dict[Any, Any]:
    """Product sku -> product card. Duplicate skus: last one wins."""
    return {get_field(product, "sku"): product for product in products}


# ---------------------------------------------------------------------------
# Fold
# ---------------------------------------------------------------------------


def fold_purchase_records(
    purchase_records: Iterable[Any],
    seller_index: Mapping[Any, SellerAggregate],
    product_index: Mapping[Any, Any],
    revenue_strategy: RevenueStrategy,
) -> FoldStats:
    """
    Accumulate every receipt into its seller's aggregate, in input order.

    Mutates only the aggregates reachable through ``seller_index``.

    Returns:
        FoldStats with processed/skipped counts.
    """
    processed = 0
    receipts_skipped = 0
    items_skipped = 0

    for receipt in purchase_records:
        seller_id = get_field(receipt, "seller_id")
        seller = seller_index.get(seller_id)
        if seller is None:
            receipts_skipped += 1
            logger.debug("receipt_skipped_unknown_seller", seller_id=seller_id)
            continue

        processed += 1
        seller.sales_count += 1
        seller.revenue += to_decimal(get_field(receipt, "total_amount")) - to_decimal(
            get_field(receipt, "total_discount")
        )

        for item in get_field(receipt, "items") or ():
            sku = get_field(item, "sku")
            product = product_index.get(sku)
            if product is None:
                items_skipped += 1
                logger.debug(
                    "item_skipped_unknown_sku", seller_id=seller_id, sku=sku
                )
                continue

            quantity = get_field(item, "quantity") or 0
            item_revenue = to_decimal(revenue_strategy(item, product))
            cost = to_decimal(get_field(product, "purchase_price")) * to_decimal(quantity)
            seller.profit += item_revenue - cost

            seller.products_sold[sku] = seller.products_sold.get(sku, 0) + quantity

    return FoldStats(
        receipts_processed=processed,
        receipts_skipped=receipts_skipped,
        items_skipped=items_skipped,
    )


# ---------------------------------------------------------------------------
# Ranking, Bonus, Top Products
# ---------------------------------------------------------------------------


def rank_sellers(stats: Iterable[SellerAggregate]) -> list[SellerAggregate]:
    """Stable sort by profit descending; equal profits keep input order."""
    return sorted(stats, key=lambda seller: seller.profit, reverse=True)


def assign_bonuses(ranked: Sequence[SellerAggregate], bonus_strategy: BonusStrategy) -> None:
    """Store bonus_strategy(index, total, seller) on each ranked seller."""
    total = len(ranked)
    for index, seller in enumerate(ranked):
        seller.bonus = to_decimal(bonus_strategy(index, total, seller))


def select_top_products(
    products_sold: Mapping[Any, Any],
    limit: int | None = None,
) -> tuple[TopProduct, ...]:
    """
    Best sellers by quantity, descending, at most ``limit`` entries.

    Ties keep the mapping's iteration order (first-sold first).
    """
    if limit is None:
        limit = settings.TOP_PRODUCTS_LIMIT
    ordered = sorted(
        (TopProduct(sku=sku, quantity=quantity) for sku, quantity in products_sold.items()),
        key=lambda product: product.quantity,
        reverse=True,
    )
    return tuple(ordered[:limit])


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_report_row(seller: SellerAggregate) -> ReportRow:
    return ReportRow(
        seller_id=seller.id,
        name=seller.name,
        revenue=round_money(seller.revenue),
        profit=round_money(seller.profit),
        sales_count=seller.sales_count,
        top_products=seller.top_products,
        bonus=round_money(seller.bonus),
    )


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------


def analyze_sales_data(data: SalesDataset, options: Any) -> list[ReportRow]:
    """
    Build the ranked seller performance report.

    Args:
        data: SalesDataset mapping, or any object with ``sellers``,
            ``products`` and ``purchase_records`` sequences.
        options: AnalysisOptions, mapping, or attribute object with ``revenue_strategy``,
            ``bonus_strategy`` and optional ``top_products_limit``.

    Returns:
        One ReportRow per input seller, ordered by profit descending.

    Raises:
        SalesDataError subclass when the input shape is invalid.
    """
    resolved = validate_inputs(data, options)

    stats = build_seller_stats(get_field(data, "sellers"))
    seller_index = build_seller_index(stats)
    product_index = build_product_index(get_field(data, "products"))

    fold_stats = fold_purchase_records(
        get_field(data, "purchase_records"),
        seller_index,
        product_index,
        resolved.revenue_strategy,
    )

    ranked = rank_sellers(stats)
    assign_bonuses(ranked, resolved.bonus_strategy)
    for seller in ranked:
        seller.top_products = select_top_products(
            seller.products_sold, resolved.top_products_limit
        )

    report = [format_report_row(seller) for seller in ranked]

    total_profit = sum((seller.profit for seller in ranked), Decimal("0"))
    logger.info(
        "sales_analysis_completed",
        sellers=len(report),
        products=len(product_index),
        receipts_processed=fold_stats.receipts_processed,
        receipts_skipped=fold_stats.receipts_skipped,
        items_skipped=fold_stats.items_skipped,
        total_profit=str(round_money(total_profit)),
    )
    return report


analyze = analyze_sales_data
