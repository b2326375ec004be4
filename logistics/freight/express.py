"""
Express Freight (EXP)

Higher rate per adjusted kilogram plus a fixed express surcharge.
"""

from decimal import Decimal, localcontext

from ..delivery import DeliveryRecord
from .base import EXACT_CONTEXT, FreightStrategy, floor_at_zero


class Express(FreightStrategy):
    """Express - 1.50 per adjusted kg + 10.00 surcharge."""

    # Identity
    code = "EXP"
    name = "Express"

    # Pricing
    rate_per_kg = Decimal("1.5")
    fixed_fee = Decimal("10")

    @classmethod
    def compute_fee(cls, record: DeliveryRecord) -> Decimal:
        weight = cls.adjusted_weight(record)
        with localcontext(EXACT_CONTEXT):
            return floor_at_zero(weight * cls.rate_per_kg + cls.fixed_fee)
