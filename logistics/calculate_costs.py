"""
Freight Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (CSV, an
order export, manual creation) as long as it contains the required columns.
The output is the same DataFrame with normalized fields and costs appended.
Each row is priced independently, exactly as a single DeliveryRecord would be.

REQUIRED INPUT COLUMNS
----------------------
    recipient           - Recipient name
    address             - Delivery address
    weight_kg           - Declared weight in kilograms
    freight_code        - Freight type code (PAD, EXP, ECO; case-insensitive)

OUTPUT COLUMNS ADDED
--------------------
    supplement_deliveries() normalizes:
        - recipient, address (trimmed), freight_code (trimmed, uppercase)
    and adds:
        - adjusted_weight_kg (after bulk-weight promotion)

    calculate() adds:
        - cost_freight (Decimal, rounded half-even to cents)
        - is_free_shipping (exact: a sub-cent fee shows cost_freight 0.00
          but is not free)
        - calculator_version

USAGE
-----
    from logistics.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import logging

import polars as pl

from .version import VERSION
from .data import FEE_QUANTUM
from .delivery import DeliveryRecord
from .errors import ValidationError
from .freight import apply_weight_discount, round_fee
from .registry import FreightRegistry, default_registry

logger = logging.getLogger(__name__)


REQUIRED_COLUMNS = ["recipient", "address", "weight_kg", "freight_code"]

# Decimal scale of cost_freight
FEE_SCALE = -FEE_QUANTUM.as_tuple().exponent


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    registry: FreightRegistry | None = None
) -> pl.DataFrame:
    """
    Calculate freight costs for a delivery DataFrame.

    This is the main entry point. Takes raw delivery data and returns
    the same DataFrame with normalized fields and costs appended.

    Args:
        df: Raw delivery DataFrame with required columns (see module docstring)
        registry: Freight registry (default_registry() if not provided)

    Returns:
        DataFrame with supplemented data and costs

    Raises:
        ValueError: If required columns are missing
        ValidationError: If any row is not a valid delivery
        UnsupportedFreightTypeError: If any row has an unknown freight code
    """
    df = supplement_deliveries(df)
    df = calculate(df, registry)
    return df


# =============================================================================
# SUPPLEMENT DELIVERIES
# =============================================================================

def supplement_deliveries(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate and normalize every row, and add the adjusted weight.

    Args:
        df: Raw delivery DataFrame

    Returns:
        DataFrame with normalized recipient/address/freight_code and an
        added adjusted_weight_kg column
    """
    _check_columns(df)

    records = _to_records(df)

    return df.with_columns([
        pl.Series("recipient", [r.recipient for r in records], dtype=pl.Utf8),
        pl.Series("address", [r.address for r in records], dtype=pl.Utf8),
        pl.Series("freight_code", [r.freight_code for r in records], dtype=pl.Utf8),
        pl.Series(
            "adjusted_weight_kg",
            [float(apply_weight_discount(r.weight_kg)) for r in records],
            dtype=pl.Float64,
        ),
    ])


def _check_columns(df: pl.DataFrame) -> None:
    """Raise if any required input column is missing."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")


def _to_records(df: pl.DataFrame) -> list[DeliveryRecord]:
    """
    Build one DeliveryRecord per row.

    A failing row re-raises ValidationError with its row index prepended,
    keeping the failing field.
    """
    records = []
    rows = df.select(REQUIRED_COLUMNS).iter_rows(named=True)
    for i, row in enumerate(rows):
        try:
            records.append(DeliveryRecord(**row))
        except ValidationError as e:
            raise ValidationError(e.field, f"Row {i}: {e}") from e
    return records


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(
    df: pl.DataFrame,
    registry: FreightRegistry | None = None
) -> pl.DataFrame:
    """
    Calculate freight costs for supplemented deliveries.

    Args:
        df: Supplemented delivery DataFrame from supplement_deliveries
        registry: Freight registry (default_registry() if not provided)

    Returns:
        DataFrame with cost_freight, is_free_shipping and calculator_version
    """
    if registry is None:
        registry = default_registry()

    records = _to_records(df)

    fees = [
        round_fee(registry.compute_fee(r))
        for r in records
    ]
    free = [registry.is_free(r) for r in records]

    df = df.with_columns([
        pl.Series("cost_freight", fees, dtype=pl.Decimal(scale=FEE_SCALE)),
        pl.Series("is_free_shipping", free, dtype=pl.Boolean),
    ])

    logger.debug(
        "Priced %d deliveries, %d ship free", len(records), sum(free)
    )

    return _stamp_version(df)


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))
