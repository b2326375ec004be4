"""
Freight Label Calculator
========================

Calculate the freight fee for a single delivery and print its label.

Any detail not given as a flag is prompted for interactively.

Usage:
    python -m logistics.scripts.calculator
    python -m logistics.scripts.calculator --recipient Fulano --address "Rua A, 123" --weight 5 --code EXP
"""

import argparse
import logging
import sys

from logistics.delivery import DeliveryRecord
from logistics.errors import FreightError
from logistics.freight import ALL, get_codes
from logistics.labels import LabelService, PlainTextLabelFormatter
from logistics.registry import default_registry
from logistics.version import VERSION


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Calculate the freight fee and label for one delivery"
    )
    parser.add_argument("--recipient", type=str, help="Recipient name")
    parser.add_argument("--address", type=str, help="Delivery address")
    parser.add_argument("--weight", type=str, help="Weight in kg (e.g., 5 or 1.5)")
    parser.add_argument(
        "--code",
        type=str,
        help=f"Freight type code ({', '.join(get_codes())})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )
    return parser.parse_args(argv)


def get_user_input(args: argparse.Namespace) -> dict:
    """Fill in any delivery detail missing from the command line."""
    print("\n=== Freight Label Calculator ===")
    print(f"Version: {VERSION}\n")

    recipient = args.recipient or input("Recipient: ").strip()
    address = args.address or input("Address: ").strip()
    weight = args.weight or input("Weight (kg): ").strip()

    if args.code:
        code = args.code
    else:
        print("\nFreight type:")
        for s in ALL:
            print(f"  {s.code}  {s.name}")
        code = input("Select code: ").strip()

    return {
        "recipient": recipient,
        "address": address,
        "weight_kg": weight,
        "freight_code": code,
    }


def print_results(service: LabelService, record: DeliveryRecord) -> None:
    """Print label, summary and free-shipping flag."""
    print("\n" + "=" * 50)
    print("LABEL")
    print("=" * 50)
    print(service.generate_label(record))

    print("\n--- Summary ---")
    print(service.generate_summary(record))

    print(f"\nFree shipping: {'yes' if service.is_free_shipping(record) else 'no'}")
    print()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        delivery = get_user_input(args)
        record = DeliveryRecord(**delivery)
        service = LabelService(default_registry(), PlainTextLabelFormatter())
        print_results(service, record)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except FreightError as e:
        print(f"\nError: {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
