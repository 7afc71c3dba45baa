"""
Special Handling Surcharges

Packages that need careful handling end to end.

    ELC - Electronics   10,000
    FRG - Fragile       15,000
"""

from .base import Surcharge
from ..models import Category


class ELC(Surcharge):
    """Electronics - anti-static packing and handling."""

    name = "ELC"
    category = Category.ELECTRONICS
    price = 10000


class FRG(Surcharge):
    """Fragile items - highest handling fee."""

    name = "FRG"
    category = Category.FRAGILE
    price = 15000
