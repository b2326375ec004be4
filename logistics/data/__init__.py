"""
Logistics Data

Static reference data for pricing and display.

Structure:
    - reference/promotion.py: Bulk-weight promotion thresholds
    - reference/currency.py: Currency display settings for labels
"""

from .reference.promotion import BULK_WEIGHT_THRESHOLD_KG, BULK_WEIGHT_DISCOUNT_KG
from .reference.currency import (
    CURRENCY_SYMBOL,
    DECIMAL_SEPARATOR,
    THOUSANDS_SEPARATOR,
    FEE_QUANTUM,
    FEE_ROUNDING,
)

__all__ = [
    "BULK_WEIGHT_THRESHOLD_KG",
    "BULK_WEIGHT_DISCOUNT_KG",
    "CURRENCY_SYMBOL",
    "DECIMAL_SEPARATOR",
    "THOUSANDS_SEPARATOR",
    "FEE_QUANTUM",
    "FEE_ROUNDING",
]
