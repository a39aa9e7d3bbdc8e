"""
Sales Report — Profit-Rank Bonus Strategy

Tiers by 0-based rank after sorting sellers by profit descending:
- rank 0: profit × BONUS_RATE_TOP (15%)
- rank 1-2: profit × BONUS_RATE_RUNNER_UP (10%)
- last rank: BONUS_RATE_LAST (nothing)
- everyone else: profit × BONUS_RATE_STANDARD (5%)

Rank 0 is checked before the last rank, so a lone seller gets the top tier.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from src.config import BonusTier, settings
from src.models.seller_aggregate import SellerAggregate

logger = structlog.get_logger(__name__)


def classify_bonus_tier(index: int, total: int) -> BonusTier:
    """Map a 0-based profit rank to its bonus tier."""
    if index < 0 or index >= total:
        raise ValueError(f"index must be in [0, {total}), got {index}")

    if index == 0:
        return BonusTier.TOP
    if index <= settings.BONUS_RUNNER_UP_MAX_RANK:
        return BonusTier.RUNNER_UP
    if index == total - 1:
        return BonusTier.LAST
    return BonusTier.STANDARD


def _tier_rate(tier: BonusTier) -> Decimal:
    if tier == BonusTier.TOP:
        return settings.BONUS_RATE_TOP
    if tier == BonusTier.RUNNER_UP:
        return settings.BONUS_RATE_RUNNER_UP
    if tier == BonusTier.LAST:
        return settings.BONUS_RATE_LAST
    return settings.BONUS_RATE_STANDARD


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAggregate) -> Decimal:
    """
    Bonus for the seller at ``index`` out of ``total`` ranked sellers.

    Args:
        index: 0-based rank after sorting by profit descending.
        total: Number of ranked sellers.
        seller: The seller's aggregate; only profit is read.

    Returns:
        Unrounded Decimal bonus.

    Raises:
        ValueError: If index is outside [0, total).
    """
    tier = classify_bonus_tier(index, total)
    bonus = seller.profit * _tier_rate(tier)

    logger.debug(
        "bonus_calculated",
        seller_id=seller.id,
        rank=index,
        total=total,
        tier=tier.value,
        profit=str(seller.profit),
        bonus=str(bonus),
    )
    return bonus
