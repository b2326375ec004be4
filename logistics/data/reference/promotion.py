"""
Bulk-Weight Promotion Configuration

Heavy deliveries get one kilogram knocked off before pricing.
"""

from decimal import Decimal

BULK_WEIGHT_THRESHOLD_KG = Decimal("10")   # Promotion applies strictly above this weight
BULK_WEIGHT_DISCOUNT_KG = Decimal("1")     # Kilograms removed from the priced weight
