"""
Great-circle distance helpers.

Inputs are decimal degrees and are not validated: a NaN coordinate yields a
NaN distance, which callers rank after every real distance.
"""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in kilometres between two lat/lng points."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    if a > 1.0:
        # rounding near antipodes
        a = 1.0
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_sort_key(distance_km: float) -> float:
    return math.inf if math.isnan(distance_km) else distance_km
