"""
Parcel Estimator Data

Reference data and loaders for distance tiers, city distances and configuration.

Structure:
    - reference/: Static reference data (distances, tiers, rates, tax)
"""

import polars as pl
from functools import lru_cache
from pathlib import Path

from .reference.billable_weight import DIM_FACTOR, DIM_THRESHOLD, THRESHOLD_FIELD, FACTOR_FIELD
from .reference.distances import DISTANCES_KM, DEFAULT_DISTANCE_KM
from .reference.tax import TAX_RATE, INSURANCE_RATE
from .reference.weight_rate import RATE_PER_KG


REFERENCE_DIR = Path(__file__).parent / "reference"


@lru_cache(maxsize=None)
def load_rates() -> pl.DataFrame:
    """
    Load distance tier base rates, ready for joining.

    Read once per process. The last bracket has no upper bound.

    Returns:
        DataFrame with columns:
            - distance_tier: Tier number (1-3)
            - distance_km_lower: Lower bound of distance bracket (exclusive)
            - distance_km_upper: Upper bound of distance bracket (inclusive, null = open)
            - rate: Base cost for this bracket

    Raises:
        ValueError: If the brackets overlap, leave a gap, or are open before the last one
    """
    rates = pl.read_csv(
        REFERENCE_DIR / "base_rates.csv",
        schema_overrides={
            "distance_tier": pl.Int64,
            "distance_km_lower": pl.Float64,
            "distance_km_upper": pl.Float64,
            "rate": pl.Int64,
        },
    )
    validate_rates(rates)
    return rates


def validate_rates(rates: pl.DataFrame) -> None:
    """
    Check that distance brackets tile the distance axis.

    Each bracket must start where the previous one ends, and only the last
    bracket may leave its upper bound empty.

    Raises:
        ValueError: With every problem found
    """
    errors = []
    rows = rates.sort("distance_km_lower").to_dicts()

    if not rows:
        errors.append("no distance brackets defined")

    for i, row in enumerate(rows):
        tier = row["distance_tier"]
        lower, upper = row["distance_km_lower"], row["distance_km_upper"]
        is_last = i == len(rows) - 1

        if upper is None:
            if not is_last:
                errors.append(f"tier {tier}: only the last bracket may be open-ended")
            continue
        if upper <= lower:
            errors.append(f"tier {tier}: upper bound {upper} not above lower bound {lower}")
        if not is_last:
            next_lower = rows[i + 1]["distance_km_lower"]
            if next_lower < upper:
                errors.append(f"tier {tier}: overlaps next bracket ({next_lower} < {upper})")
            elif next_lower > upper:
                errors.append(f"tier {tier}: gap to next bracket ({upper} to {next_lower})")

    if errors:
        raise ValueError("Invalid distance brackets:\n" + "\n".join(errors))


@lru_cache(maxsize=None)
def load_distances() -> pl.DataFrame:
    """
    Load city-pair distances in both directions.

    Each unordered pair in DISTANCES_KM appears twice (A->B and B->A) so a
    plain left join on (origin, destination) is symmetric. Built once per
    process.

    Returns:
        DataFrame with columns: origin, destination, distance_km
    """
    rows = []
    for pair, km in DISTANCES_KM.items():
        a, b = sorted(pair)
        rows.append({"origin": a, "destination": b, "distance_km": km})
        rows.append({"origin": b, "destination": a, "distance_km": km})

    return pl.DataFrame(
        rows,
        schema={"origin": pl.Utf8, "destination": pl.Utf8, "distance_km": pl.Int64},
    )


__all__ = [
    # Reference data loaders
    "load_rates",
    "load_distances",
    "validate_rates",
    "REFERENCE_DIR",
    # Billable weight config
    "DIM_FACTOR",
    "DIM_THRESHOLD",
    "THRESHOLD_FIELD",
    "FACTOR_FIELD",
    # Distance config
    "DISTANCES_KM",
    "DEFAULT_DISTANCE_KM",
    # Tax and insurance config
    "TAX_RATE",
    "INSURANCE_RATE",
    # Weight rate
    "RATE_PER_KG",
]
