from src.engine.aggregation import (
    analyze,
    analyze_sales_data,
    assign_bonuses,
    build_product_index,
    build_seller_index,
    build_seller_stats,
    fold_purchase_records,
    format_report_row,
    rank_sellers,
    select_top_products,
)
from src.engine.bonus import calculate_bonus_by_profit, classify_bonus_tier
from src.engine.errors import (
    InvalidOptionsError,
    InvalidProductsError,
    InvalidPurchaseRecordsError,
    InvalidSellersError,
    MissingDataError,
    MissingStrategiesError,
    SalesDataError,
)
from src.engine.options import AnalysisOptions, BonusStrategy, RevenueStrategy
from src.engine.revenue import calculate_simple_revenue
from src.engine.validation import validate_inputs

__all__ = [
    "AnalysisOptions",
    "BonusStrategy",
    "InvalidOptionsError",
    "InvalidProductsError",
    "InvalidPurchaseRecordsError",
    "InvalidSellersError",
    "MissingDataError",
    "MissingStrategiesError",
    "RevenueStrategy",
    "SalesDataError",
    "analyze",
    "analyze_sales_data",
    "assign_bonuses",
    "build_product_index",
    "build_seller_index",
    "build_seller_stats",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "classify_bonus_tier",
    "fold_purchase_records",
    "format_report_row",
    "rank_sellers",
    "select_top_products",
    "validate_inputs",
]
