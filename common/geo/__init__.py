"""
Geo module - Great-circle distance and radius filtering.
"""

from common.geo.proximity import (
    Coordinate,
    EARTH_RADIUS_KM,
    distance_km,
    filter_within_radius,
    sort_by_distance,
)

__all__ = [
    "Coordinate",
    "EARTH_RADIUS_KM",
    "distance_km",
    "filter_within_radius",
    "sort_by_distance",
]
