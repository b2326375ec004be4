"""
Freight Strategy Base Class

Base class and helpers shared by all freight pricing strategies.

EXACT ARITHMETIC
----------------
Fees are currency, so nothing inside a strategy may round. The default
decimal context keeps only 28 significant digits and overflows on large
exponents, so every helper and every compute_fee() runs under
EXACT_CONTEXT (maximum precision and exponent range). Only add, subtract,
multiply and compare are used, so results stay exact and finite.
Rounding to cents happens once, in round_fee(), for display and export.
"""

from abc import ABC
from decimal import (
    Context,
    Decimal,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    localcontext,
)

from ..data.reference.currency import FEE_QUANTUM, FEE_ROUNDING
from ..data.reference.promotion import (
    BULK_WEIGHT_DISCOUNT_KG,
    BULK_WEIGHT_THRESHOLD_KG,
)
from ..delivery import DeliveryRecord


ZERO = Decimal("0")

EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def apply_weight_discount(weight_kg: Decimal) -> Decimal:
    """
    Apply the bulk-weight promotion.

    Deliveries heavier than BULK_WEIGHT_THRESHOLD_KG are priced as if they
    weighed BULK_WEIGHT_DISCOUNT_KG less. The threshold itself is not
    discounted (10 kg stays 10 kg).

    Args:
        weight_kg: Declared weight in kilograms

    Returns:
        Weight used for pricing
    """
    if weight_kg > BULK_WEIGHT_THRESHOLD_KG:
        with localcontext(EXACT_CONTEXT):
            return weight_kg - BULK_WEIGHT_DISCOUNT_KG
    return weight_kg


def floor_at_zero(amount: Decimal) -> Decimal:
    """Clamp a fee so it is never negative."""
    return max(amount, ZERO)


def round_fee(fee: Decimal) -> Decimal:
    """Round a fee to cents (FEE_ROUNDING, half-even) for display and export."""
    return fee.quantize(FEE_QUANTUM, rounding=FEE_ROUNDING, context=EXACT_CONTEXT)


# =============================================================================
# BASE CLASS
# =============================================================================

class FreightStrategy(ABC):
    """
    Base class for all freight strategies.

    Strategies are never instantiated. Pricing lives in class attributes and
    every operation is a classmethod, so a strategy is a pure function of the
    delivery weight.

    Attributes:
        IDENTITY
            code            - Freight type code (e.g., "PAD", "EXP")
            name            - Human-readable name

        PRICING
            rate_per_kg     - Price per adjusted kilogram
            fixed_fee       - Amount added after the weight component
                              (negative for a fixed rebate)
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    code: str
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    rate_per_kg: Decimal
    fixed_fee: Decimal = ZERO

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def adjusted_weight(cls, record: DeliveryRecord) -> Decimal:
        """Weight after the bulk-weight promotion."""
        return apply_weight_discount(record.weight_kg)

    @classmethod
    def compute_fee(cls, record: DeliveryRecord) -> Decimal:
        """
        Fee for a delivery. Always >= 0.

        Subclasses must override this and do their arithmetic under
        localcontext(EXACT_CONTEXT).
        """
        raise NotImplementedError(f"{cls.__name__} does not define compute_fee()")

    @classmethod
    def is_free(cls, record: DeliveryRecord) -> bool:
        """
        True when the delivery ships for free.

        Default compares the computed fee to zero exactly.
        Override when a cheaper direct test exists.
        """
        return cls.compute_fee(record) == ZERO
