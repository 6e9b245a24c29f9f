from .sphere import EARTH_RADIUS_M, SphereParameters
from .coordinates import LatLon
from .angles import (
    clamp,
    normalize_longitude,
    normalize_bearing,
    normalize_bearing_deg,
)
from .destination import (
    destination,
    destination_with_radius,
    destination_on_sphere,
)
# test-support helpers (inverse problem); not part of the stable API
from .geodesy import (
    great_circle_distance_m,
    initial_bearing_deg,
    angle_difference_deg,
)

__all__ = [
    "EARTH_RADIUS_M",
    "SphereParameters",
    "LatLon",
    "clamp",
    "normalize_longitude",
    "normalize_bearing",
    "normalize_bearing_deg",
    "destination",
    "destination_with_radius",
    "destination_on_sphere",
    "great_circle_distance_m",
    "initial_bearing_deg",
    "angle_difference_deg",
]
