"""
Parcel Shipping Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (form input,
CSV, manual creation) as long as it contains the required columns. The output
is the same DataFrame with calculation columns and costs appended.

REQUIRED INPUT COLUMNS
----------------------
    weight_kg           - Declared weight in kilograms
    length_cm           - Package length in centimeters
    width_cm            - Package width in centimeters
    height_cm           - Package height in centimeters
    origin              - Origin city (City value, e.g. "Jakarta")
    destination         - Destination city (City value)
    category            - Package category (Category value, e.g. "Documents")
    insured             - True if insurance was requested

Inputs are expected to be validated already (see validation.parse_package):
weight and dimensions positive.

OUTPUT COLUMNS ADDED
--------------------
    supplement_packages() adds:
        - cubic_cm
        - distance_km, distance_known
        - volumetric_weight_kg, uses_volumetric_weight, shipping_weight_kg

    calculate() adds:
        - surcharge_* flags (doc, elc, frg, food, med, pet, wld, fsh, oth)
        - cost_* amounts (category surcharges, category, base, weight,
          subtotal, tax, insurance, total)
        - distance_tier
        - calculator_version

ROUNDING
--------
Costs are whole Rupiah, halves rounded up. The weight cost is the only
fractional part of the subtotal, so rounding it is the same as rounding the
subtotal. Tax and insurance are taken from the whole-Rupiah subtotal, which
keeps subtotal and total exact sums of their parts.

USAGE
-----
    from parcel_estimator.calculate_costs import calculate_costs
    result = calculate_costs(df)

    from parcel_estimator.calculate_costs import estimate
    breakdown = estimate(package)
"""

import logging
import math

import polars as pl

from .columns import validate_input_columns
from .data import (
    load_rates,
    DIM_FACTOR,
    DIM_THRESHOLD,
    THRESHOLD_FIELD,
    FACTOR_FIELD,
    RATE_PER_KG,
    TAX_RATE,
    INSURANCE_RATE,
)
from .distance import lookup_distances
from .models import CostBreakdown, PackageInput, packages_to_frame
from .surcharges import ALL
from .version import VERSION


logger = logging.getLogger(__name__)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    distances: pl.DataFrame | None = None
) -> pl.DataFrame:
    """
    Calculate shipping costs for a package DataFrame.

    This is the main entry point. Takes raw package data and returns
    the same DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw package DataFrame with required columns (see module docstring)
        distances: City-pair distance table (built from DISTANCES_KM if not provided)

    Returns:
        DataFrame with supplemented data, surcharge flags, and costs
    """
    df = supplement_packages(df, distances)
    df = calculate(df)
    logger.debug("Calculated costs for %d package(s)", len(df))
    return df


def estimate(package: PackageInput) -> CostBreakdown:
    """
    Estimate the cost of a single validated package.

    Runs a one-row DataFrame through the pipeline and reads the row back.
    """
    df = calculate_costs(packages_to_frame([package]))
    return to_breakdown(df.row(0, named=True))


def estimate_all(packages: list[PackageInput]) -> list[CostBreakdown]:
    """Estimate many packages in one pipeline run, in input order."""
    if not packages:
        return []
    df = calculate_costs(packages_to_frame(packages))
    return [to_breakdown(row) for row in df.iter_rows(named=True)]


def to_breakdown(row: dict) -> CostBreakdown:
    """Build a CostBreakdown from a priced row."""
    return CostBreakdown(
        shipping_weight_kg=_round_weight(row["shipping_weight_kg"], row["weight_kg"]),
        base_cost=int(row["cost_base"]),
        weight_cost=int(row["cost_weight"]),
        category_surcharge=int(row["cost_category"]),
        subtotal=int(row["cost_subtotal"]),
        tax=int(row["cost_tax"]),
        insurance_cost=int(row["cost_insurance"]),
        total=int(row["cost_total"]),
    )


def base_rate(distance_km: float) -> int:
    """Base cost for a single distance, from the distance tier table."""
    df = _lookup_base_rate(pl.DataFrame({"distance_km": [distance_km]}))
    return int(df["cost_base"][0])


def _round_weight(shipping_weight_kg: float, weight_kg: float) -> float:
    """
    Round shipping weight to 2 decimals for reporting.

    Declared weights with more than 2 decimals round up instead, so the
    reported weight is never below the declared one.
    """
    rounded = math.floor(shipping_weight_kg * 100 + 0.5) / 100
    # Not plain 2-decimal rounding: 2.004 kg declared reports 2.01, not 2.00
    if rounded < weight_kg:
        rounded = (math.floor(weight_kg * 100) + 1) / 100
    return rounded


# =============================================================================
# SUPPLEMENT PACKAGES
# =============================================================================

def supplement_packages(
    df: pl.DataFrame,
    distances: pl.DataFrame | None = None
) -> pl.DataFrame:
    """
    Supplement package data with volume, distance and weight calculations.

    Args:
        df: Raw package DataFrame
        distances: Distance table (built from reference data if not provided)

    Returns:
        DataFrame with added columns:
            - cubic_cm
            - distance_km, distance_known
            - volumetric_weight_kg, uses_volumetric_weight, shipping_weight_kg

    Raises:
        ValueError: If a required input column is missing
    """
    validate_input_columns(df)

    df = _add_calculated_dimensions(df)
    df = lookup_distances(df, distances)
    df = _add_billable_weight(df)

    return df


def _add_calculated_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Add calculated dimensional columns."""
    return df.with_columns(
        (pl.col("length_cm") * pl.col("width_cm") * pl.col("height_cm"))
        .cast(pl.Float64)
        .alias("cubic_cm")
    )


def _add_billable_weight(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate volumetric weight and shipping weight.

    Shipping weight is the greater of declared weight and volumetric weight.
    DIM_THRESHOLD is 0, so every package with a volume is compared.
    """
    # Calculate volumetric weight
    df = df.with_columns(
        (pl.col(FACTOR_FIELD) / DIM_FACTOR).alias("volumetric_weight_kg")
    )

    # Determine if volumetric weight applies and calculate shipping weight
    df = df.with_columns([
        pl.when(pl.col(THRESHOLD_FIELD) > DIM_THRESHOLD)
        .then(pl.col("volumetric_weight_kg") > pl.col("weight_kg"))
        .otherwise(False)
        .alias("uses_volumetric_weight"),

        pl.when(pl.col(THRESHOLD_FIELD) > DIM_THRESHOLD)
        .then(pl.max_horizontal("weight_kg", "volumetric_weight_kg"))
        .otherwise(pl.col("weight_kg"))
        .cast(pl.Float64)
        .alias("shipping_weight_kg"),
    ])

    return df


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate shipping costs for supplemented packages.

    Args:
        df: Supplemented package DataFrame from supplement_packages

    Returns:
        DataFrame with surcharge flags, costs, and totals

    Processing order:
        1. Category surcharges
        2. Base cost from distance tier
        3. Weight cost
        4. Subtotal, tax, insurance, total
        5. Version stamp
    """
    # Phase 1: Category surcharges
    df = _apply_surcharges(df, ALL)

    # Phase 2: Look up base cost by distance tier
    df = _lookup_base_rate(df)

    # Phase 3: Weight cost
    df = _calculate_weight_cost(df)

    # Phase 4: Calculate costs
    df = _calculate_subtotal(df)
    df = _apply_tax(df)
    df = _apply_insurance(df)
    df = _calculate_total(df)

    # Phase 5: Stamp version
    df = _stamp_version(df)

    return df


def _round_half_up(expr: pl.Expr) -> pl.Expr:
    """Round a non-negative amount to whole Rupiah, halves up."""
    return (expr + 0.5).floor().cast(pl.Int64)


def _apply_surcharges(df: pl.DataFrame, surcharges: list) -> pl.DataFrame:
    """
    Apply category surcharges and total them into cost_category.

    Categories are mutually exclusive, so at most one flag is set per row.
    Unknown categories match nothing and cost 0.
    """
    for s in surcharges:
        df = _apply_single_surcharge(df, s)

    cost_cols = [f"cost_{s.name.lower()}" for s in surcharges]
    if not cost_cols:
        return df.with_columns(pl.lit(0, dtype=pl.Int64).alias("cost_category"))

    return df.with_columns(
        pl.sum_horizontal(cost_cols).cast(pl.Int64).alias("cost_category")
    )


def _apply_single_surcharge(df: pl.DataFrame, surcharge) -> pl.DataFrame:
    """Apply a single surcharge."""
    flag_col = f"surcharge_{surcharge.name.lower()}"
    cost_col = f"cost_{surcharge.name.lower()}"

    df = df.with_columns(
        surcharge.conditions().fill_null(False).alias(flag_col)
    )
    df = df.with_columns(
        pl.when(pl.col(flag_col))
        .then(pl.lit(surcharge.cost(), dtype=pl.Int64))
        .otherwise(pl.lit(0, dtype=pl.Int64))
        .alias(cost_col)
    )

    return df


def _lookup_base_rate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Look up base cost by distance bracket.

    Brackets are (lower, upper]: 100 km is tier 1, 101 km is tier 2. The
    last bracket has no upper bound, so every non-negative distance matches.
    """
    input_count = len(df)
    rates = load_rates()

    df = df.with_row_index("_row_id")

    df = (
        df
        .join(rates, how="cross")
        .filter(
            (pl.col("distance_km") > pl.col("distance_km_lower")) &
            (
                pl.col("distance_km_upper").is_null() |
                (pl.col("distance_km") <= pl.col("distance_km_upper"))
            )
        )
        .rename({"rate": "cost_base"})
    )

    output_count = len(df)
    if output_count != input_count:
        raise ValueError(
            f"{abs(input_count - output_count)} package(s) do not match exactly one "
            f"distance bracket. Check distance_km values and base_rates.csv."
        )

    df = df.drop(["distance_km_lower", "distance_km_upper"])
    df = df.sort("_row_id").drop("_row_id")

    return df


def _calculate_weight_cost(df: pl.DataFrame) -> pl.DataFrame:
    """Charge RATE_PER_KG for every kilogram of shipping weight."""
    return df.with_columns(
        _round_half_up(pl.col("shipping_weight_kg") * RATE_PER_KG).alias("cost_weight")
    )


def _calculate_subtotal(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_subtotal as sum of base, weight and category costs."""
    return df.with_columns(
        pl.sum_horizontal(["cost_base", "cost_weight", "cost_category"])
        .cast(pl.Int64)
        .alias("cost_subtotal")
    )


def _apply_tax(df: pl.DataFrame) -> pl.DataFrame:
    """Apply VAT as percentage of subtotal."""
    return df.with_columns(
        _round_half_up(pl.col("cost_subtotal") * TAX_RATE).alias("cost_tax")
    )


def _apply_insurance(df: pl.DataFrame) -> pl.DataFrame:
    """Apply insurance as percentage of subtotal, only for insured packages."""
    return df.with_columns(
        pl.when(pl.col("insured").fill_null(False))
        .then(_round_half_up(pl.col("cost_subtotal") * INSURANCE_RATE))
        .otherwise(pl.lit(0, dtype=pl.Int64))
        .alias("cost_insurance")
    )


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_total as subtotal plus tax plus insurance."""
    return df.with_columns(
        (pl.col("cost_subtotal") + pl.col("cost_tax") + pl.col("cost_insurance"))
        .alias("cost_total")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_packages",
    "calculate",
    "estimate",
    "estimate_all",
    "to_breakdown",
    "base_rate",
]
