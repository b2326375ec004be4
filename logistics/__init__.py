"""
Logistics Freight Module

Freight fee calculation and shipping label rendering for single deliveries,
plus a DataFrame pipeline that prices many deliveries at once.
"""

from .delivery import DeliveryRecord
from .errors import (
    FreightError,
    ValidationError,
    UnsupportedFreightTypeError,
    DuplicateFreightCodeError,
)
from .registry import FreightRegistry, default_registry
from .labels import LabelService, PlainTextLabelFormatter
from .calculate_costs import calculate_costs
from .version import VERSION

__all__ = [
    "DeliveryRecord",
    "FreightError",
    "ValidationError",
    "UnsupportedFreightTypeError",
    "DuplicateFreightCodeError",
    "FreightRegistry",
    "default_registry",
    "LabelService",
    "PlainTextLabelFormatter",
    "calculate_costs",
    "VERSION",
]
