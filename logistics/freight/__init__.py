"""
Freight Package

Exports all freight strategy classes.

Every strategy applies the bulk-weight promotion (apply_weight_discount)
before its own formula, so the three codes price the same adjusted weight.
"""

from .base import (
    EXACT_CONTEXT,
    FreightStrategy,
    ZERO,
    apply_weight_discount,
    floor_at_zero,
    round_fee,
)
from .standard import Standard
from .express import Express
from .economic import Economic


# All strategies
ALL = [Standard, Express, Economic]


# =============================================================================
# HELPERS
# =============================================================================

def get_codes(strategies: list[type[FreightStrategy]] | None = None) -> list[str]:
    """Freight codes of the given strategies (ALL by default), in order."""
    return [s.code for s in (ALL if strategies is None else strategies)]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_strategies() -> None:
    """
    Validate strategy configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen: dict[str, str] = {}

    for s in ALL:
        code = getattr(s, "code", None)
        if not isinstance(code, str) or not code.strip():
            errors.append(f"{s.__name__}: code must be a non-blank string")
            continue

        # Records normalize codes to uppercase, so lowercase codes never match
        if code != code.strip().upper():
            errors.append(f"{s.__name__}: code '{code}' must be stripped uppercase")

        if code in seen:
            errors.append(f"{s.__name__}: code '{code}' already used by {seen[code]}")
        seen[code] = s.__name__

        if not getattr(s, "name", None):
            errors.append(f"{s.__name__}: name is required")

        if s.compute_fee.__func__ is FreightStrategy.compute_fee.__func__:
            errors.append(f"{s.__name__}: must override compute_fee()")

    if errors:
        raise ValueError("Freight configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_strategies()

__all__ = [
    # Base
    "FreightStrategy",
    "apply_weight_discount",
    "floor_at_zero",
    "round_fee",
    "EXACT_CONTEXT",
    "ZERO",
    # Strategy classes
    "Standard",
    "Express",
    "Economic",
    # Lists
    "ALL",
    # Helpers
    "get_codes",
]
