"""
Label Service

Prices a delivery through the registry and hands the fee to a formatter.
Holds no per-call state; every call is independent.
"""

import logging

from ..delivery import DeliveryRecord
from ..registry import FreightRegistry
from .formatter import LabelFormatter

logger = logging.getLogger(__name__)


class LabelService:
    """Generates shipping labels and order summaries."""

    def __init__(self, registry: FreightRegistry, formatter: LabelFormatter) -> None:
        if registry is None:
            raise TypeError("registry must not be None")
        if formatter is None:
            raise TypeError("formatter must not be None")
        self._registry = registry
        self._formatter = formatter

    def generate_label(self, record: DeliveryRecord) -> str:
        """Shipping label: recipient, address and freight fee."""
        fee = self._registry.compute_fee(record)
        logger.debug("Rendering label for %s (%s)", record.recipient, record.freight_code)
        return self._formatter.render_label(record, fee)

    def generate_summary(self, record: DeliveryRecord) -> str:
        """One-line order summary: recipient, freight code and fee."""
        fee = self._registry.compute_fee(record)
        return self._formatter.render_summary(record, fee)

    def is_free_shipping(self, record: DeliveryRecord) -> bool:
        return self._registry.is_free(record)
