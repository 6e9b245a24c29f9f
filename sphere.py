"""Sphere model parameters.

The solver works on a perfect sphere. The only parameter is its radius; the
default is the mean Earth radius (IUGG R1, 6371 km), which is what the
convenience functions use when no radius is given.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6371000.0


def check_radius_m(radius_m: float) -> float:
    """Return ``radius_m`` unchanged, or raise if it is not strictly positive.

    NaN fails the check as well.
    """
    if not radius_m > 0:
        raise ValueError("radius_m must be positive")
    return radius_m


@dataclass(frozen=True)
class SphereParameters:
    """Spherical Earth model.

    Fields:
    - radius_m: sphere radius in meters (> 0)
    """
    radius_m: float = EARTH_RADIUS_M

    def __post_init__(self):
        check_radius_m(self.radius_m)

    def angular_distance(self, distance_m: float) -> float:
        """Central angle (radians) subtended by an arc of ``distance_m`` meters."""
        return distance_m / self.radius_m

    @property
    def circumference_m(self) -> float:
        return 2.0 * math.pi * self.radius_m
