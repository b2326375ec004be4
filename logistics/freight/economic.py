"""
Economic Freight (ECO)

FREE-SHIPPING THRESHOLD
-----------------------
Light deliveries (adjusted weight under FREE_BELOW_KG) ship for free.
Above the threshold the fee is rate_per_kg * weight minus a fixed rebate,
floored at zero. Between 2 kg and ~4.55 kg the rebate cancels the weight
component entirely, so those deliveries are free too.

is_free() tests the threshold directly and then falls back to the fee, so it
agrees with compute_fee() == 0 for every valid weight.
"""

from decimal import Decimal, localcontext

from ..delivery import DeliveryRecord
from .base import EXACT_CONTEXT, FreightStrategy, floor_at_zero, ZERO


class Economic(FreightStrategy):
    """Economic - 1.10 per adjusted kg - 5.00 rebate, free under 2 kg."""

    # Identity
    code = "ECO"
    name = "Economic"

    # Pricing
    rate_per_kg = Decimal("1.1")
    fixed_fee = Decimal("-5")

    # Thresholds
    FREE_BELOW_KG = Decimal("2")

    @classmethod
    def compute_fee(cls, record: DeliveryRecord) -> Decimal:
        weight = cls.adjusted_weight(record)
        if weight < cls.FREE_BELOW_KG:
            return ZERO
        with localcontext(EXACT_CONTEXT):
            return floor_at_zero(weight * cls.rate_per_kg + cls.fixed_fee)

    @classmethod
    def is_free(cls, record: DeliveryRecord) -> bool:
        if cls.adjusted_weight(record) < cls.FREE_BELOW_KG:
            return True
        return cls.compute_fee(record) == ZERO
