"""
Currency Display Configuration

Labels show fees in Brazilian Real (e.g., "R$ 1.234,56").
"""

from decimal import Decimal, ROUND_HALF_EVEN

CURRENCY_SYMBOL = "R$"
DECIMAL_SEPARATOR = ","
THOUSANDS_SEPARATOR = "."

# Fees are displayed and exported in cents
FEE_QUANTUM = Decimal("0.01")

# Half-even ("banker's") rounding, as the pt-BR currency formatter does
FEE_ROUNDING = ROUND_HALF_EVEN
