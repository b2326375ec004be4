"""
Labels Package

Shipping label and order summary rendering.
"""

from .formatter import LabelFormatter, PlainTextLabelFormatter, format_brl
from .service import LabelService

__all__ = [
    "LabelFormatter",
    "PlainTextLabelFormatter",
    "format_brl",
    "LabelService",
]
