"""
Sales Report — Input Validation Errors

Raised by validate_inputs() before any aggregation work starts. All of them
are ValueError subclasses so callers can catch the whole family at once.
"""

from __future__ import annotations


class SalesDataError(ValueError):
    """Base class for malformed analysis input."""


class MissingDataError(SalesDataError):
    """The dataset argument is absent."""


class InvalidSellersError(SalesDataError):
    """sellers is absent, not a sequence, or empty."""


class InvalidProductsError(SalesDataError):
    """products is absent, not a sequence, or empty."""


class InvalidPurchaseRecordsError(SalesDataError):
    """purchase_records is absent, not a sequence, or empty."""


class InvalidOptionsError(SalesDataError):
    """options is absent or not a configuration object."""


class MissingStrategiesError(SalesDataError):
    """revenue_strategy or bonus_strategy is missing or not callable."""
