"""
Standard Freight (PAD)

Flat rate per adjusted kilogram, no fixed fee.
"""

from decimal import Decimal, localcontext

from ..delivery import DeliveryRecord
from .base import EXACT_CONTEXT, FreightStrategy, floor_at_zero


class Standard(FreightStrategy):
    """Standard - 1.20 per adjusted kg."""

    # Identity
    code = "PAD"
    name = "Standard"

    # Pricing
    rate_per_kg = Decimal("1.2")

    @classmethod
    def compute_fee(cls, record: DeliveryRecord) -> Decimal:
        weight = cls.adjusted_weight(record)
        with localcontext(EXACT_CONTEXT):
            return floor_at_zero(weight * cls.rate_per_kg)
