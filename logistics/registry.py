"""
Freight Registry

Resolves a freight code to its strategy. Built once from the full set of
strategies and read-only afterwards, so one registry can be shared freely.

USAGE
-----
    from logistics.registry import default_registry
    registry = default_registry()
    registry.compute_fee(record)
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable

from .delivery import DeliveryRecord
from .errors import DuplicateFreightCodeError, UnsupportedFreightTypeError
from .freight import ALL, FreightStrategy

logger = logging.getLogger(__name__)


class FreightRegistry:
    """Immutable mapping of freight code -> strategy."""

    def __init__(self, strategies: Iterable[type[FreightStrategy]]):
        if strategies is None:
            raise TypeError("strategies must not be None")

        by_code: dict[str, type[FreightStrategy]] = {}
        for strategy in strategies:
            existing = by_code.get(strategy.code)
            if existing is not None:
                raise DuplicateFreightCodeError(
                    strategy.code, existing.__name__, strategy.__name__
                )
            by_code[strategy.code] = strategy

        self._by_code = MappingProxyType(by_code)
        logger.debug("Freight registry built with codes %s", ", ".join(self.codes))

    # -------------------------------------------------------------------------
    # LOOKUP
    # -------------------------------------------------------------------------

    @property
    def codes(self) -> tuple[str, ...]:
        """Registered freight codes, sorted."""
        return tuple(sorted(self._by_code))

    def get(self, code: str) -> type[FreightStrategy]:
        """Strategy for a freight code. Raises UnsupportedFreightTypeError if unknown."""
        strategy = self._by_code.get(code)
        if strategy is None:
            raise UnsupportedFreightTypeError(code)
        return strategy

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"FreightRegistry(codes={list(self.codes)})"

    # -------------------------------------------------------------------------
    # DELEGATION
    # -------------------------------------------------------------------------

    def compute_fee(self, record: DeliveryRecord) -> Decimal:
        """Fee for a delivery, priced by the strategy matching its freight code."""
        strategy = self.get(record.freight_code)
        fee = strategy.compute_fee(record)
        logger.debug(
            "Freight fee | code=%s weight=%s kg -> fee=%s",
            record.freight_code, record.weight_kg, fee,
        )
        return fee

    def is_free(self, record: DeliveryRecord) -> bool:
        """True when the matching strategy ships this delivery for free."""
        return self.get(record.freight_code).is_free(record)


def default_registry() -> FreightRegistry:
    """Registry over every known strategy (freight.ALL)."""
    return FreightRegistry(ALL)
