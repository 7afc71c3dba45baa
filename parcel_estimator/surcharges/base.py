"""
Surcharge Base Class

Shared base class for all category surcharges.
"""

from abc import ABC
import polars as pl

from ..models import Category


class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        IDENTITY
            name        - Short code (e.g., "ELC", "FRG")
            category    - Package category this surcharge is charged on

        PRICING
            price       - Flat amount per package (whole Rupiah)
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    category: Category

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    price: int

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def cost(cls) -> int:
        """Cost per package."""
        return cls.price

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default matches the package category. Override for surcharges with
        additional conditions.
        """
        return pl.col("category") == cls.category.value
