"""
Distance Resolver

Maps an (origin, destination) city pair to a road distance in kilometers.

The lookup is symmetric and total: every pair resolves to either its listed
distance or DEFAULT_DISTANCE_KM.
"""

import logging

import polars as pl

from .data import DISTANCES_KM, DEFAULT_DISTANCE_KM, load_distances
from .models import City


logger = logging.getLogger(__name__)


def resolve_distance(origin: City, destination: City) -> int:
    """Distance in km between two cities, in either direction."""
    return DISTANCES_KM.get(
        frozenset({City(origin).value, City(destination).value}),
        DEFAULT_DISTANCE_KM,
    )


def lookup_distances(
    df: pl.DataFrame,
    distances: pl.DataFrame | None = None
) -> pl.DataFrame:
    """
    Add distance columns to packages based on origin and destination.

    TWO-TIER FALLBACK
    -----------------
    1. Exact pair match from the distance table (either direction)
    2. DEFAULT_DISTANCE_KM

    Args:
        df: DataFrame with origin and destination columns
        distances: Distance table (loaded from DISTANCES_KM if not provided)

    Returns:
        DataFrame with added columns:
            - distance_km: Resolved distance
            - distance_known: True if the pair was found in the table
    """
    if distances is None:
        distances = load_distances()

    # Categorical or enum columns join as plain strings
    df = df.with_columns([
        pl.col("origin").cast(pl.Utf8),
        pl.col("destination").cast(pl.Utf8),
    ])
    df = df.with_row_index("_row_id")

    df = df.join(
        distances.rename({"distance_km": "_distance_km"}),
        on=["origin", "destination"],
        how="left",
    )

    df = df.with_columns([
        pl.col("_distance_km").is_not_null().alias("distance_known"),
        pl.coalesce([pl.col("_distance_km"), pl.lit(DEFAULT_DISTANCE_KM)])
        .cast(pl.Int64)
        .alias("distance_km"),
    ]).drop("_distance_km")
    df = df.sort("_row_id").drop("_row_id")

    logger.debug(
        "Resolved distances for %d package(s), %d using default %d km",
        len(df), df.filter(~pl.col("distance_known")).height, DEFAULT_DISTANCE_KM,
    )

    return df


__all__ = [
    "resolve_distance",
    "lookup_distances",
]
