"""
Label Formatters

A formatter turns a delivery and its fee into text. LabelService only needs
the two render methods of the LabelFormatter protocol; any object providing
them can be plugged in.

PlainTextLabelFormatter output:

    Destinatário: Fulano
    Endereço: Rua A, 123
    Valor do Frete: R$ 12,00

    Pedido para Fulano com frete tipo PAD no valor de R$ 12,00
"""

from decimal import Decimal
from typing import Protocol

from ..data.reference.currency import (
    CURRENCY_SYMBOL,
    DECIMAL_SEPARATOR,
    THOUSANDS_SEPARATOR,
)
from ..delivery import DeliveryRecord
from ..freight import round_fee


class LabelFormatter(Protocol):
    def render_label(self, record: DeliveryRecord, fee: Decimal) -> str:
        ...

    def render_summary(self, record: DeliveryRecord, fee: Decimal) -> str:
        ...


def format_brl(amount: Decimal) -> str:
    """
    Format an amount as Brazilian Real, e.g. Decimal("1234.5") -> "R$ 1.234,50".

    Rounds half-even to cents, so 0.005 shows as "R$ 0,00" and 0.015 as
    "R$ 0,02". Negative amounts get a leading minus sign.
    """
    cents = round_fee(Decimal(amount))
    sign = "-" if cents < 0 else ""
    whole, frac = f"{abs(cents):,.2f}".split(".")
    whole = whole.replace(",", THOUSANDS_SEPARATOR)
    return f"{sign}{CURRENCY_SYMBOL} {whole}{DECIMAL_SEPARATOR}{frac}"


class PlainTextLabelFormatter:
    """Plain-text label and summary with fees in Brazilian Real."""

    def render_label(self, record: DeliveryRecord, fee: Decimal) -> str:
        return (
            f"Destinatário: {record.recipient}\n"
            f"Endereço: {record.address}\n"
            f"Valor do Frete: {format_brl(fee)}"
        )

    def render_summary(self, record: DeliveryRecord, fee: Decimal) -> str:
        return (
            f"Pedido para {record.recipient} com frete tipo {record.freight_code} "
            f"no valor de {format_brl(fee)}"
        )
