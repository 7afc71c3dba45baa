"""
Tests for the distance resolver.
"""

import sys
from itertools import product
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
import polars as pl

from parcel_estimator.data import DEFAULT_DISTANCE_KM, DISTANCES_KM, load_distances
from parcel_estimator.distance import lookup_distances, resolve_distance
from parcel_estimator.models import City


# =============================================================================
# SCALAR LOOKUP
# =============================================================================

class TestResolveDistance:
    """Tests for resolve_distance."""

    @pytest.mark.parametrize("origin, destination, expected", [
        (City.JAKARTA, City.BANDUNG, 150),
        (City.JAKARTA, City.SURABAYA, 800),
        (City.JAKARTA, City.MEDAN, 1400),
        (City.BANDUNG, City.SURABAYA, 700),
        (City.BANDUNG, City.MEDAN, 1300),
        (City.SURABAYA, City.MEDAN, 1200),
    ])
    def test_listed_pairs(self, origin, destination, expected):
        assert resolve_distance(origin, destination) == expected
        assert resolve_distance(destination, origin) == expected

    def test_symmetric_for_all_pairs(self):
        """(A, B) and (B, A) resolve the same for every city pair."""
        for a, b in product(City, City):
            assert resolve_distance(a, b) == resolve_distance(b, a)

    def test_unknown_pair_default(self):
        assert resolve_distance(City.SEMARANG, City.MAKASSAR) == DEFAULT_DISTANCE_KM == 300
        assert resolve_distance(City.MAKASSAR, City.SEMARANG) == 300

    def test_same_city_default(self):
        for city in City:
            assert resolve_distance(city, city) == 300

    def test_always_positive(self):
        for a, b in product(City, City):
            assert resolve_distance(a, b) > 0

    def test_accepts_city_values(self):
        assert resolve_distance("Medan", "Jakarta") == 1400

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DISTANCES_KM[frozenset({"Depok", "Bekasi"})] = 25


# =============================================================================
# FRAME LOOKUP
# =============================================================================

class TestLookupDistances:
    """Tests for lookup_distances on a DataFrame."""

    def test_both_directions_loaded(self):
        df = load_distances()
        assert len(df) == 2 * len(DISTANCES_KM)
        pairs = set(zip(df["origin"], df["destination"]))
        assert ("Jakarta", "Medan") in pairs
        assert ("Medan", "Jakarta") in pairs

    def test_matches_scalar_lookup(self):
        """Frame lookup agrees with resolve_distance for every pair."""
        pairs = list(product(City, City))
        df = pl.DataFrame({
            "origin": [a.value for a, _ in pairs],
            "destination": [b.value for _, b in pairs],
        })
        df = lookup_distances(df)
        assert df["distance_km"].to_list() == [resolve_distance(a, b) for a, b in pairs]

    def test_unknown_city_default(self):
        df = lookup_distances(pl.DataFrame({
            "origin": ["Bogor"],
            "destination": ["Jakarta"],
        }))
        assert df["distance_km"][0] == 300
        assert df["distance_known"][0] == False

    def test_known_flag(self):
        df = lookup_distances(pl.DataFrame({
            "origin": ["Bandung", "Depok"],
            "destination": ["Medan", "Bekasi"],
        }))
        assert df["distance_known"].to_list() == [True, False]
        assert df["distance_km"].to_list() == [1300, 300]

    def test_categorical_columns(self):
        """Categorical city columns join like plain strings."""
        df = pl.DataFrame({
            "origin": ["Surabaya"],
            "destination": ["Jakarta"],
        }).with_columns(pl.col("origin", "destination").cast(pl.Categorical))
        df = lookup_distances(df)
        assert df["distance_km"][0] == 800


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
