"""
Sales Report — Shared pytest Fixtures

Provides common fixtures for all test modules:
- Reference analysis options (simple revenue + profit-rank bonus)
- Single-sale and five-seller datasets
- JSON dataset writer for CLI tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from src.engine.bonus import calculate_bonus_by_profit
from src.engine.options import AnalysisOptions
from src.engine.revenue import calculate_simple_revenue
from src.models.records import SalesDataset

from builders import make_item, make_product, make_receipt, make_seller


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def default_options() -> AnalysisOptions:
    """Reference strategies used by the CLI."""
    return AnalysisOptions(
        revenue_strategy=calculate_simple_revenue,
        bonus_strategy=calculate_bonus_by_profit,
    )


@pytest.fixture
def single_sale_dataset() -> SalesDataset:
    """1 seller, 1 product (cost 50), 1 receipt: 2 × 100, no discount."""
    return {
        "sellers": [make_seller("seller_1")],
        "products": [make_product("SKU_001", purchase_price=50)],
        "purchase_records": [
            make_receipt(
                "seller_1",
                [make_item("SKU_001", quantity=2, sale_price=100, discount=0)],
                total_amount=200,
                total_discount=0,
            )
        ],
    }


@pytest.fixture
def five_seller_dataset() -> SalesDataset:
    """
    Five sellers with distinct profits, listed out of profit order.

    Profit per seller = (sale_price - 50) × quantity on SKU_A:
    s1=100, s2=500, s3=300, s4=200, s5=400.
    """
    profits = {"s1": 100, "s2": 500, "s3": 300, "s4": 200, "s5": 400}
    return {
        "sellers": [make_seller(sid, first_name=sid.upper(), last_name="Seller") for sid in profits],
        "products": [make_product("SKU_A", purchase_price=50)],
        "purchase_records": [
            make_receipt(sid, [make_item("SKU_A", quantity=1, sale_price=50 + profit)])
            for sid, profit in profits.items()
        ],
    }


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a dataset as JSON into tmp_path and return the file path."""

    def _write(data: Any, name: str = "dataset.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, default=str), encoding="utf-8")
        return path

    return _write
