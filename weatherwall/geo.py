"""
Great-circle distance between airports.

Haversine formula on a spherical Earth of radius 6372.8 km.
"""

import math
from typing import Protocol


# Earth radius in km
EARTH_RADIUS_KM = 6372.8


class HasPosition(Protocol):
    latitude: float
    longitude: float


def distance_between(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points in kilometers.

    All angles are converted to radians, including the latitudes in the
    cosine factor. NaN inputs yield NaN.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push a marginally above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(a, 1.0)))

    return EARTH_RADIUS_KM * c


def distance_km(a: HasPosition, b: HasPosition) -> float:
    """Distance in km between two positioned objects (e.g. airports)."""
    return distance_between(a.latitude, a.longitude, b.latitude, b.longitude)
