"""CLI to compute a destination point on the sphere.

Usage:
    python -m geodesic_destination.cli --lat-deg 48.866667 --lon-deg 2.333333 --distance-m 1000 --bearing-deg 45
"""

import argparse
import logging
import math

from .coordinates import LatLon
from .destination import destination_on_sphere
from .logging_config import get_logger
from .sphere import EARTH_RADIUS_M, SphereParameters


def main(argv=None):
    parser = argparse.ArgumentParser(description="Destination point from start, distance and bearing (spherical Earth)")
    parser.add_argument("--lat-deg", type=float, required=True, help="start latitude in degrees")
    parser.add_argument("--lon-deg", type=float, required=True, help="start longitude in degrees")
    parser.add_argument("--distance-m", type=float, required=True)
    parser.add_argument("--bearing-deg", type=float, required=True, help="clockwise from North")
    parser.add_argument("--radius-m", type=float, default=EARTH_RADIUS_M, help="sphere radius (default: mean Earth radius)")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logger = get_logger(__name__, logging.DEBUG if args.verbose else logging.INFO)

    try:
        sphere = SphereParameters(radius_m=args.radius_m)
    except ValueError as exc:
        parser.error(str(exc))

    start = LatLon(math.radians(args.lat_deg), math.radians(args.lon_deg))
    logger.debug(
        "start=%s distance_m=%s bearing_deg=%s radius_m=%s",
        start, args.distance_m, args.bearing_deg, sphere.radius_m,
    )
    dest = destination_on_sphere(start, args.distance_m, math.radians(args.bearing_deg), sphere)
    lat_deg = math.degrees(dest.lat)
    lon_deg = math.degrees(dest.lon)
    logger.info("destination lat=%.9f lon=%.9f", lat_deg, lon_deg)
    print(f"{lat_deg:.9f} {lon_deg:.9f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
