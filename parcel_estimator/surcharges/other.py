"""
Other Surcharge (OTH)

Packages that fit no listed category are charged a flat 10,000.

Categories not known to the estimator at all (only possible when building a
DataFrame by hand) match no surcharge and are charged nothing.
"""

from .base import Surcharge
from ..models import Category


class OTH(Surcharge):
    """Other - flat fee for uncategorized packages."""

    name = "OTH"
    category = Category.OTHER
    price = 10000
