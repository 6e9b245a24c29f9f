"""Direct geodesic problem on a sphere (destination point).

Given a start point, a distance and an initial bearing, find the point reached
by following the great circle through the start point in that direction.

Conventions:
- latitude/longitude in radians
- distance and radius in meters
- bearing in radians, clockwise from true North (0 = N, pi/2 = E)

Formulae (spherical trigonometry, delta = d / R):
    sin(lat2) = sin(lat1) cos(delta) + cos(lat1) sin(delta) cos(theta)
    lon2 = lon1 + atan2(sin(theta) sin(delta) cos(lat1),
                        cos(delta) - sin(lat1) sin(lat2))
"""

import math

from .angles import clamp, normalize_longitude
from .coordinates import LatLon
from .sphere import EARTH_RADIUS_M, SphereParameters, check_radius_m


def destination_with_radius(start: LatLon, distance_m: float, bearing_rad: float, radius_m: float) -> LatLon:
    """Destination point on a sphere of radius ``radius_m``.

    Args:
        start: start point (radians)
        distance_m: arc length to travel in meters; negative travels backwards
        bearing_rad: initial bearing in radians, clockwise from North
        radius_m: sphere radius in meters (> 0)
    Returns:
        destination point with lon normalized to (-pi, pi]
    Raises:
        ValueError: if radius_m is not positive
    """
    check_radius_m(radius_m)

    if distance_m == 0.0:
        return start

    delta = distance_m / radius_m
    if not all(map(math.isfinite, (start.lat, start.lon, delta, bearing_rad))):
        # math.sin/cos raise on infinities instead of returning NaN
        return LatLon(math.nan, math.nan)

    sin_lat1 = math.sin(start.lat)
    cos_lat1 = math.cos(start.lat)
    sin_delta = math.sin(delta)
    cos_delta = math.cos(delta)

    sin_lat2 = sin_lat1 * cos_delta + cos_lat1 * sin_delta * math.cos(bearing_rad)
    # rounding can push the sine just past +/-1
    lat2 = math.asin(clamp(sin_lat2, -1.0, 1.0))

    y = math.sin(bearing_rad) * sin_delta * cos_lat1
    x = cos_delta - sin_lat1 * math.sin(lat2)
    lon2 = normalize_longitude(start.lon + math.atan2(y, x))

    return LatLon(lat2, lon2)


def destination(start: LatLon, distance_m: float, bearing_rad: float) -> LatLon:
    """Destination point on the mean-radius Earth sphere."""
    return destination_with_radius(start, distance_m, bearing_rad, EARTH_RADIUS_M)


def destination_on_sphere(start: LatLon, distance_m: float, bearing_rad: float, sphere: SphereParameters) -> LatLon:
    return destination_with_radius(start, distance_m, bearing_rad, sphere.radius_m)
