"""
Reference Data

Static reference data for distances, rates, tax and configuration.
"""

from .billable_weight import DIM_FACTOR, DIM_THRESHOLD, THRESHOLD_FIELD, FACTOR_FIELD
from .distances import DISTANCES_KM, DEFAULT_DISTANCE_KM
from .tax import TAX_RATE, INSURANCE_RATE
from .weight_rate import RATE_PER_KG

__all__ = [
    "DIM_FACTOR",
    "DIM_THRESHOLD",
    "THRESHOLD_FIELD",
    "FACTOR_FIELD",
    "DISTANCES_KM",
    "DEFAULT_DISTANCE_KM",
    "TAX_RATE",
    "INSURANCE_RATE",
    "RATE_PER_KG",
]
