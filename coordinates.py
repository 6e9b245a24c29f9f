"""Latitude/longitude value type.

Both components are radians. Nothing is validated on construction: callers
own their inputs. Everything returned by this package satisfies
lat in [-pi/2, pi/2] and lon in (-pi, pi].
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LatLon:
    lat: float
    lon: float
