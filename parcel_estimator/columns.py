"""
Column Schema Definitions

Documents all columns at each pipeline stage and provides validation utilities.
"""

import polars as pl

from .surcharges import ALL as ALL_SURCHARGES


# =============================================================================
# REQUIRED INPUT COLUMNS
# =============================================================================

REQUIRED_INPUT_COLS = [
    "weight_kg",            # Declared weight (kilograms)
    "length_cm",            # Package length (centimeters)
    "width_cm",             # Package width (centimeters)
    "height_cm",            # Package height (centimeters)
    "origin",               # Origin city (City value)
    "destination",          # Destination city (City value)
    "category",             # Package category (Category value)
    "insured",              # True if insurance was requested
]


# =============================================================================
# SUPPLEMENT COLUMNS (added by supplement_packages)
# =============================================================================

SUPPLEMENT_COLS = [
    # Calculated dimensions
    "cubic_cm",                 # L x W x H (cubic centimeters)

    # Billable weight
    "volumetric_weight_kg",     # cubic_cm / DIM_FACTOR
    "uses_volumetric_weight",   # True if volumetric weight > declared weight
    "shipping_weight_kg",       # Max of declared and volumetric weight

    # Distance lookup
    "distance_km",              # Road distance between origin and destination
    "distance_known",           # True if the pair is in the distance table
]


# =============================================================================
# SURCHARGE COLUMNS (added by calculate - surcharge application)
# =============================================================================

def _surcharge_flag_cols() -> list[str]:
    """Flag columns indicating if surcharge applies."""
    return [f"surcharge_{s.name.lower()}" for s in ALL_SURCHARGES]


def _surcharge_cost_cols() -> list[str]:
    """Cost columns for each surcharge."""
    return [f"cost_{s.name.lower()}" for s in ALL_SURCHARGES]


SURCHARGE_FLAG_COLS = _surcharge_flag_cols()
# surcharge_doc, surcharge_elc, surcharge_frg, surcharge_food, surcharge_med,
# surcharge_pet, surcharge_wld, surcharge_fsh, surcharge_oth

SURCHARGE_COST_COLS = _surcharge_cost_cols()
# cost_doc, cost_elc, cost_frg, cost_food, cost_med,
# cost_pet, cost_wld, cost_fsh, cost_oth


# =============================================================================
# COST COLUMNS (added by calculate - final costs)
# =============================================================================

COST_COLS = [
    "distance_tier",        # Distance bracket (1-3)
    "cost_base",            # Base cost from distance tier
    "cost_weight",          # shipping_weight_kg * RATE_PER_KG (rounded)
    "cost_category",        # Sum of category surcharge costs
    "cost_subtotal",        # base + weight + category
    "cost_tax",             # subtotal * TAX_RATE (rounded)
    "cost_insurance",       # subtotal * INSURANCE_RATE if insured (rounded)
    "cost_total",           # subtotal + tax + insurance
    "calculator_version",   # Version stamp
]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_input_columns(df: pl.DataFrame) -> None:
    """
    Check that all required input columns are present.

    Raises:
        ValueError: If any required column is missing
    """
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required input columns: {', '.join(missing)}")


def get_output_columns() -> list[str]:
    """All columns added by the pipeline."""
    return SUPPLEMENT_COLS + SURCHARGE_FLAG_COLS + SURCHARGE_COST_COLS + COST_COLS
