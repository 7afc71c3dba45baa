"""
Documents Surcharge (DOC)

Flat handling fee for document envelopes.
"""

from .base import Surcharge
from ..models import Category


class DOC(Surcharge):
    """Documents - flat fee."""

    name = "DOC"
    category = Category.DOCUMENTS
    price = 5000
