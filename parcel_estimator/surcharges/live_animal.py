"""
Live Animal Surcharges

Live animals travel in ventilated crates and are handled separately from
regular parcels.

    PET - Pets            7,000
    WLD - Wild animals   10,000
    FSH - Fish            8,000
"""

from .base import Surcharge
from ..models import Category


class PET(Surcharge):
    """Pets."""

    name = "PET"
    category = Category.PETS
    price = 7000


class WLD(Surcharge):
    """Wild animals."""

    name = "WLD"
    category = Category.WILD_ANIMALS
    price = 10000


class FSH(Surcharge):
    """Fish (water-filled containers)."""

    name = "FSH"
    category = Category.FISH
    price = 8000
