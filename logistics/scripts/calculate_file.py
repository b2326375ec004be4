"""
Calculate Freight Costs for a CSV File
======================================

Reads deliveries from a CSV, prices every row and writes the result.

Input columns: recipient, address, weight_kg, freight_code

Usage:
    python -m logistics.scripts.calculate_file deliveries.csv priced.csv
"""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl

from logistics.calculate_costs import calculate_costs
from logistics.errors import FreightError


def summarize(df: pl.DataFrame) -> pl.DataFrame:
    """Deliveries, free deliveries and total cost per freight code."""
    return (
        df
        .group_by("freight_code")
        .agg([
            pl.len().alias("deliveries"),
            pl.col("is_free_shipping").sum().alias("free"),
            pl.col("cost_freight").sum().alias("total_cost"),
        ])
        .sort("freight_code")
    )


def run(input_path: Path, output_path: Path) -> pl.DataFrame:
    """Price every delivery in input_path and write to output_path."""
    # Read every column as text so weights reach Decimal without float rounding
    df = pl.read_csv(input_path, infer_schema_length=0)
    print(f"Loaded {len(df):,} deliveries from {input_path}")

    df = calculate_costs(df)

    df.write_csv(output_path)
    print(f"Output saved to: {output_path}")
    return df


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Calculate freight costs for every delivery in a CSV file"
    )
    parser.add_argument("input", type=Path, help="Input CSV")
    parser.add_argument("output", type=Path, help="Output CSV")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        df = run(args.input, args.output)

        print("\n" + "=" * 60)
        print("SUMMARY BY FREIGHT CODE")
        print("=" * 60)
        print(summarize(df))

    except (FreightError, ValueError, OSError, pl.exceptions.PolarsError) as e:
        print(f"\nError: {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
