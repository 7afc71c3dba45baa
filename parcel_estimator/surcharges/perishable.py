"""
Perishable Surcharges

    FOOD - Food items    5,000
    MED  - Medicine      8,000
"""

from .base import Surcharge
from ..models import Category


class FOOD(Surcharge):
    name = "FOOD"
    category = Category.FOOD
    price = 5000


class MED(Surcharge):
    name = "MED"
    category = Category.MEDICINE
    price = 8000
