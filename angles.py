"""Angle helpers: clamping and wrapping.

Python's ``%`` already returns a result with the sign of the divisor, so the
remainders below are never negative. The boundary fix-ups that remain are
about which end of the half-open interval a value lands on after rounding.
"""

import math

_TWO_PI = 2.0 * math.pi


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp into [lo, hi]; NaN passes through unchanged."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def normalize_longitude(lon_rad: float) -> float:
    """Wrap a longitude into (-pi, pi].

    An input of exactly pi stays pi; -pi maps to pi.

    Args:
        lon_rad: longitude in radians (any finite value)
    Returns:
        equivalent longitude in (-pi, pi]; NaN for non-finite input
    """
    wrapped = (lon_rad + math.pi) % _TWO_PI
    lon = wrapped - math.pi
    if lon <= -math.pi:
        lon = math.pi
    return lon


def normalize_bearing(bearing_rad: float) -> float:
    """Wrap a bearing into [0, 2pi)."""
    b = bearing_rad % _TWO_PI
    if b >= _TWO_PI:
        # a tiny negative input rounds up to exactly 2pi
        b -= _TWO_PI
    return b


def normalize_bearing_deg(bearing_deg: float) -> float:
    """Wrap a bearing in degrees into [0, 360)."""
    b = bearing_deg % 360.0
    if b >= 360.0:
        b -= 360.0
    return b
