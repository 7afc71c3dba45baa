"""
Surcharges Package

Exports all category surcharge classes and the category surcharge table.

Categories are mutually exclusive, so at most one surcharge applies to a
package. Categories without a surcharge class (Clothing, Books) cost nothing
extra.
"""

from types import MappingProxyType

from .base import Surcharge
from .documents import DOC
from .handling import ELC, FRG
from .perishable import FOOD, MED
from .live_animal import PET, WLD, FSH
from .other import OTH
from ..models import Category


# All surcharges
ALL = [DOC, ELC, FRG, FOOD, MED, PET, WLD, FSH, OTH]


# =============================================================================
# HELPERS
# =============================================================================

def get_surcharge(category: Category) -> type[Surcharge] | None:
    """Get the surcharge charged on a category, or None if there is none."""
    category = Category(category)
    for s in ALL:
        if s.category == category:
            return s
    return None


def surcharge_amount(category: Category) -> int:
    """Flat surcharge for a category (0 if none applies)."""
    surcharge = get_surcharge(category)
    return surcharge.cost() if surcharge is not None else 0


# =============================================================================
# VALIDATION
# =============================================================================

def validate_surcharges() -> None:
    """
    Validate surcharge configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen_names = set()
    seen_categories = set()

    for s in ALL:
        if s.name in seen_names:
            errors.append(f"{s.name}: duplicate surcharge name")
        seen_names.add(s.name)

        if not isinstance(s.category, Category):
            errors.append(f"{s.name}: category '{s.category}' is not a Category")
        elif s.category in seen_categories:
            errors.append(f"{s.name}: category '{s.category}' already has a surcharge")
        seen_categories.add(s.category)

        if not isinstance(s.price, int) or s.price < 0:
            errors.append(f"{s.name}: price must be a non-negative integer")

    if errors:
        raise ValueError("Surcharge configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_surcharges()


# Category -> flat surcharge, for every category
CATEGORY_SURCHARGES = MappingProxyType({c: surcharge_amount(c) for c in Category})

__all__ = [
    # Base
    "Surcharge",
    # Surcharge classes
    "DOC",
    "ELC",
    "FRG",
    "FOOD",
    "MED",
    "PET",
    "WLD",
    "FSH",
    "OTH",
    # Lists
    "ALL",
    "CATEGORY_SURCHARGES",
    # Helpers
    "get_surcharge",
    "surcharge_amount",
    "validate_surcharges",
]
