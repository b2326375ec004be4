"""
Delivery Record

A single validated delivery: who receives it, where it goes, how heavy it is
and which freight type prices it. Records are immutable and compare by value.

Validation order (first failure wins):
    1. recipient     - required, not blank
    2. address       - required, not blank
    3. weight_kg     - required, finite, > 0
    4. freight_code  - required, not blank

USAGE
-----
    from logistics.delivery import DeliveryRecord
    record = DeliveryRecord("Fulano", "Rua A, 123", Decimal("5"), "exp")
    record.freight_code  # "EXP"
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .errors import ValidationError


@dataclass(frozen=True, slots=True)
class DeliveryRecord:
    """Immutable delivery, validated and normalized on construction."""

    recipient: str
    address: str
    weight_kg: Decimal
    freight_code: str

    def __post_init__(self) -> None:
        recipient = _require_text(self.recipient, "recipient", "Recipient is required.")
        address = _require_text(self.address, "address", "Address is required.")
        weight_kg = _require_weight(self.weight_kg)
        freight_code = _require_text(
            self.freight_code, "freight_code", "Freight type is required."
        )

        # Frozen dataclass: normalized values have to bypass __setattr__
        object.__setattr__(self, "recipient", recipient)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "weight_kg", weight_kg)
        object.__setattr__(self, "freight_code", freight_code.upper())


# =============================================================================
# FIELD VALIDATION
# =============================================================================

def _require_text(value, field: str, message: str) -> str:
    """Return the stripped value, or raise if it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, message)
    return value.strip()


def _require_weight(value) -> Decimal:
    """
    Convert a weight to Decimal and check it is a positive finite number.

    Floats go through repr so 1.1 becomes Decimal("1.1"), not its binary
    expansion.
    """
    if value is None:
        raise ValidationError("weight_kg", "Weight is required.")

    # bool is an int subclass; True is not a weight
    if isinstance(value, bool):
        raise ValidationError("weight_kg", "Weight must be a number.")

    if isinstance(value, Decimal):
        weight = value
    elif isinstance(value, int):
        weight = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            weight = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError("weight_kg", f"Weight must be a number, got {value!r}.") from None
    else:
        raise ValidationError("weight_kg", f"Weight must be a number, got {type(value).__name__}.")

    if not weight.is_finite():
        raise ValidationError("weight_kg", "Weight must be a finite number.")
    if weight <= 0:
        raise ValidationError("weight_kg", "Weight must be greater than zero.")

    return weight
