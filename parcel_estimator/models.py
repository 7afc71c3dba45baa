"""
Package Models

Closed enumerations for cities and categories, the immutable estimate input
(PackageInput) and the immutable estimate output (CostBreakdown).

Currency amounts are whole Rupiah. Weights are kilograms, dimensions are
centimeters.
"""

from enum import Enum
from typing import NamedTuple

import polars as pl

from .data.reference.tax import TAX_RATE


# =============================================================================
# ENUMERATIONS
# =============================================================================

class City(str, Enum):
    """Cities served by the estimator."""

    JAKARTA = "Jakarta"
    BANDUNG = "Bandung"
    SURABAYA = "Surabaya"
    MEDAN = "Medan"
    SEMARANG = "Semarang"
    MAKASSAR = "Makassar"
    PALEMBANG = "Palembang"
    TANGERANG = "Tangerang"
    DEPOK = "Depok"
    BEKASI = "Bekasi"

    def __str__(self) -> str:
        return self.value


class Category(str, Enum):
    """Package categories. Each may carry a flat surcharge (see surcharges/)."""

    DOCUMENTS = "Documents"
    CLOTHING = "Clothing"
    ELECTRONICS = "Electronics"
    FOOD = "Food"
    MEDICINE = "Medicine"
    FRAGILE = "Fragile"
    BOOKS = "Books"
    PETS = "Pets"
    WILD_ANIMALS = "Wild animals"
    FISH = "Fish"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display label shown to the user."""
        return _CATEGORY_LABELS.get(self, self.value)


_CATEGORY_LABELS = {
    Category.FOOD: "Food Items",
    Category.FRAGILE: "Fragile Items",
}


# =============================================================================
# INPUT
# =============================================================================

class PackageInput(NamedTuple):
    """A single, already validated estimate request."""
    weight_kg: float
    length_cm: float
    width_cm: float
    height_cm: float
    origin: City
    destination: City
    category: Category
    insured: bool = False

    def to_row(self) -> dict:
        """Row dict using the pipeline's input column names."""
        return {
            "weight_kg": float(self.weight_kg),
            "length_cm": float(self.length_cm),
            "width_cm": float(self.width_cm),
            "height_cm": float(self.height_cm),
            "origin": City(self.origin).value,
            "destination": City(self.destination).value,
            "category": Category(self.category).value,
            "insured": bool(self.insured),
        }


def packages_to_frame(packages: list[PackageInput]) -> pl.DataFrame:
    """Create a DataFrame with one row per package."""
    return pl.DataFrame(
        [p.to_row() for p in packages],
        schema={
            "weight_kg": pl.Float64,
            "length_cm": pl.Float64,
            "width_cm": pl.Float64,
            "height_cm": pl.Float64,
            "origin": pl.Utf8,
            "destination": pl.Utf8,
            "category": pl.Utf8,
            "insured": pl.Boolean,
        },
    )


# =============================================================================
# OUTPUT
# =============================================================================

class CostBreakdown(NamedTuple):
    """
    Itemized cost estimate.

    Invariants:
        subtotal = base_cost + weight_cost + category_surcharge
        total    = subtotal + tax + insurance_cost
    """
    shipping_weight_kg: float
    base_cost: int
    weight_cost: int
    category_surcharge: int
    subtotal: int
    tax: int
    insurance_cost: int
    total: int

    def as_dict(self) -> dict:
        return dict(self._asdict())

    def line_items(self) -> list[tuple[str, int]]:
        """
        Ordered (label, amount) pairs for display.

        The category surcharge and insurance lines are left out when zero.
        """
        items = [
            ("Base Cost", self.base_cost),
            ("Weight Cost", self.weight_cost),
        ]
        if self.category_surcharge > 0:
            items.append(("Additional Cost", self.category_surcharge))
        items.append(("Subtotal", self.subtotal))
        items.append((f"Tax ({TAX_RATE:.0%})", self.tax))
        if self.insurance_cost > 0:
            items.append(("Insurance", self.insurance_cost))
        items.append(("Total Cost", self.total))
        return items
