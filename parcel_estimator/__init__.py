"""
Parcel Estimator

Expected shipping cost calculator for parcels between Indonesian cities:
distance tiers, volumetric weight, category surcharges, VAT and optional
insurance.
"""

from .models import City, Category, PackageInput, CostBreakdown
from .errors import PackageInputError, InvalidWeight, InvalidDimensions
from .validation import parse_package
from .distance import resolve_distance
from .calculate_costs import calculate_costs, estimate, estimate_all
from .version import VERSION

__all__ = [
    "City",
    "Category",
    "PackageInput",
    "CostBreakdown",
    "PackageInputError",
    "InvalidWeight",
    "InvalidDimensions",
    "parse_package",
    "resolve_distance",
    "calculate_costs",
    "estimate",
    "estimate_all",
    "VERSION",
]
