"""
City Distances

Road distances in kilometers between well-known city pairs.

Keys are unordered pairs of city names (City values), so Jakarta-Bandung and
Bandung-Jakarta are the same entry. Any pair not listed (same-city pairs
included) uses DEFAULT_DISTANCE_KM.
"""

from types import MappingProxyType


DEFAULT_DISTANCE_KM = 300

DISTANCES_KM = MappingProxyType({
    frozenset({"Jakarta", "Bandung"}): 150,
    frozenset({"Jakarta", "Surabaya"}): 800,
    frozenset({"Jakarta", "Medan"}): 1400,
    frozenset({"Bandung", "Surabaya"}): 700,
    frozenset({"Bandung", "Medan"}): 1300,
    frozenset({"Surabaya", "Medan"}): 1200,
})
