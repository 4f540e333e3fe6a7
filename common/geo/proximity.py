"""
Great-circle distance and radius filtering.

Pure functions with no shared state, safe to call from any task.

Filtering is a linear scan. That is enough for the candidate lists handed
over by the stores; a spatial index could replace it later as long as the
results stay inclusive, symmetric and in input order.

Example:
    from common.geo import Coordinate, distance_km, filter_within_radius

    oslo = Coordinate(latitude=59.9139, longitude=10.7522)
    nearby = filter_within_radius(places, oslo, 5.0, lambda p: p.coordinate)
"""

import math
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar("T")

EARTH_RADIUS_KM = 6371.0

# Points closer than this are treated as the same place (about a micrometre)
COINCIDENCE_TOLERANCE_KM = 1e-9


class Coordinate(NamedTuple):
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def from_optional(
        cls,
        latitude: Optional[float],
        longitude: Optional[float],
    ) -> Optional["Coordinate"]:
        """
        Build a coordinate from nullable fields.

        Returns None unless both values are present; a half-populated pair
        has no position.
        """
        if latitude is None or longitude is None:
            return None
        return cls(float(latitude), float(longitude))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance between two coordinates in kilometres.

    Symmetric. Exactly 0.0 only for identical coordinates: distinct
    coordinates whose separation underflows double precision get the
    smallest positive float instead.
    """
    if a == b:
        return 0.0
    # Fixed argument order makes the result bit-for-bit symmetric
    if b < a:
        a, b = b, a

    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))
    return max(2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h)), math.ulp(0.0))


def filter_within_radius(
    items: Iterable[T],
    center: Coordinate,
    radius_km: float,
    coordinate_of: Callable[[T], Optional[Coordinate]],
) -> List[T]:
    """
    Keep the items whose coordinate lies within radius_km of center.

    Args:
        items: Candidates, in the order results should keep
        center: Reference point
        radius_km: Inclusive radius; <= 0 keeps only points at center
        coordinate_of: Extracts an item's coordinate; items mapped to None are skipped

    Returns:
        Matching items in input order
    """
    limit = radius_km if radius_km > 0 else COINCIDENCE_TOLERANCE_KM

    result = []
    for item in items:
        coordinate = coordinate_of(item)
        if coordinate is None:
            continue
        if distance_km(center, coordinate) <= limit:
            result.append(item)
    return result


def sort_by_distance(
    items: Iterable[T],
    center: Coordinate,
    coordinate_of: Callable[[T], Optional[Coordinate]],
) -> List[Tuple[T, float]]:
    """
    Pair each located item with its distance from center, nearest first.

    Ties keep input order. Items without a coordinate are dropped.
    """
    paired = []
    for item in items:
        coordinate = coordinate_of(item)
        if coordinate is None:
            continue
        paired.append((item, distance_km(center, coordinate)))
    paired.sort(key=lambda pair: pair[1])
    return paired
