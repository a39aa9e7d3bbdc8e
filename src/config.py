"""
Sales Report — Configuration & Constants

Every bonus rate, limit, and rounding constant lives here. No hardcoded
values in business logic.

Usage:
    from src.config import settings
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class BonusTier(str, Enum):
    """Bonus tier by profit rank (0-based)."""
    TOP = "top"                # rank 0
    RUNNER_UP = "runner_up"    # rank 1-2
    STANDARD = "standard"      # everyone in between
    LAST = "last"              # rank total - 1


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for the sales report.

    Loads from environment variables with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # Bonus Policy (fraction of seller profit)
    # -----------------------------------------------------------------------
    BONUS_RATE_TOP: Decimal = Decimal("0.15")
    BONUS_RATE_RUNNER_UP: Decimal = Decimal("0.10")
    BONUS_RATE_STANDARD: Decimal = Decimal("0.05")
    BONUS_RATE_LAST: Decimal = Decimal("0")
    BONUS_RUNNER_UP_MAX_RANK: int = 2      # ranks 1..2 get the runner-up rate

    # -----------------------------------------------------------------------
    # Report Shape
    # -----------------------------------------------------------------------
    TOP_PRODUCTS_LIMIT: int = Field(default=10, ge=1)
    MONEY_DECIMAL_PLACES: int = Field(default=2, ge=0)
    REPORT_JSON_INDENT: int = 2

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"


# Singleton instance
settings = Settings()
