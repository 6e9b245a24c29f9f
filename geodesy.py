"""Inverse-problem helpers (great-circle distance and initial bearing).

These solve the reverse of ``destination``: given two points, how far apart
are they and in which direction does the great circle leave the first one.
They exist to cross-check the forward solver and are not part of the stable
API.
"""

import math

from .angles import clamp, normalize_bearing_deg
from .coordinates import LatLon
from .sphere import EARTH_RADIUS_M, check_radius_m


def great_circle_distance_m(p: LatLon, q: LatLon, radius_m: float = EARTH_RADIUS_M) -> float:
    """Great-circle distance between two points (haversine).

    Args:
        p, q: points in radians
        radius_m: sphere radius in meters (> 0)
    Returns:
        distance in meters
    """
    check_radius_m(radius_m)
    dlat = q.lat - p.lat
    dlon = q.lon - p.lon
    a = math.sin(dlat / 2.0) ** 2 + math.cos(p.lat) * math.cos(q.lat) * math.sin(dlon / 2.0) ** 2
    a = clamp(a, 0.0, 1.0)
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return radius_m * c


def initial_bearing_deg(p: LatLon, q: LatLon) -> float:
    """Initial bearing from p to q (degrees 0..360).

    Coincident points, and pole-to-pole pairs, have no defined bearing; 0 is
    returned for them.
    """
    dlon = q.lon - p.lon
    y = math.sin(dlon) * math.cos(q.lat)
    x = math.cos(p.lat) * math.sin(q.lat) - math.sin(p.lat) * math.cos(q.lat) * math.cos(dlon)
    if x == 0.0 and y == 0.0:
        return 0.0
    return normalize_bearing_deg(math.degrees(math.atan2(y, x)))


def angle_difference_deg(a_deg: float, b_deg: float) -> float:
    """Smallest absolute separation between two bearings, in [0, 180]."""
    diff = (a_deg - b_deg) % 360.0
    return min(diff, 360.0 - diff)
