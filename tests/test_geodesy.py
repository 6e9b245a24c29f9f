import math

import numpy as np
import pytest

from geodesic_destination import (
    LatLon,
    EARTH_RADIUS_M,
    destination,
    great_circle_distance_m,
    initial_bearing_deg,
    angle_difference_deg,
)


def _random_points(n, seed):
    rng = np.random.default_rng(seed)
    lats = rng.uniform(-math.pi / 2.0, math.pi / 2.0, n)
    lons = rng.uniform(-math.pi, math.pi, n)
    return [LatLon(float(a), float(b)) for a, b in zip(lats, lons)]


def test_distance_symmetric_and_zero_on_self():
    pts = _random_points(200, seed=7)
    for p, q in zip(pts[::2], pts[1::2]):
        assert abs(great_circle_distance_m(p, q) - great_circle_distance_m(q, p)) < 1e-9
        assert great_circle_distance_m(p, p) < 1e-9


def test_distance_known_values():
    quarter = great_circle_distance_m(LatLon(0.0, 0.0), LatLon(0.0, math.pi / 2.0))
    assert abs(quarter - EARTH_RADIUS_M * math.pi / 2.0) < 1e-6
    antipodal = great_circle_distance_m(LatLon(0.0, 0.0), LatLon(0.0, math.pi))
    assert abs(antipodal - EARTH_RADIUS_M * math.pi) < 1e-6
    pole_to_pole = great_circle_distance_m(LatLon(math.pi / 2.0, 0.0), LatLon(-math.pi / 2.0, 0.0), radius_m=1.0)
    assert abs(pole_to_pole - math.pi) < 1e-12


def test_distance_rejects_bad_radius():
    with pytest.raises(ValueError):
        great_circle_distance_m(LatLon(0.0, 0.0), LatLon(0.1, 0.1), radius_m=-1.0)


def test_initial_bearing_cardinals():
    o = LatLon(0.0, 0.0)
    assert abs(initial_bearing_deg(o, LatLon(0.1, 0.0))) < 1e-9
    assert abs(initial_bearing_deg(o, LatLon(0.0, 0.1)) - 90.0) < 1e-9
    assert abs(initial_bearing_deg(o, LatLon(-0.1, 0.0)) - 180.0) < 1e-9
    assert abs(initial_bearing_deg(o, LatLon(0.0, -0.1)) - 270.0) < 1e-9


def test_initial_bearing_degenerate_is_zero():
    p = LatLon(0.4, 1.3)
    assert initial_bearing_deg(p, p) == 0.0
    north = LatLon(math.pi / 2.0, 0.0)
    assert initial_bearing_deg(north, north) == 0.0


def test_initial_bearing_range():
    pts = _random_points(200, seed=11)
    for p, q in zip(pts[::2], pts[1::2]):
        b = initial_bearing_deg(p, q)
        assert 0.0 <= b < 360.0


def test_angle_difference():
    assert angle_difference_deg(359.0, 1.0) == 2.0
    assert angle_difference_deg(1.0, 359.0) == 2.0
    assert angle_difference_deg(0.0, 180.0) == 180.0
    assert angle_difference_deg(90.0, 90.0) == 0.0
    assert angle_difference_deg(-10.0, 350.0) == 0.0
    assert abs(angle_difference_deg(720.5, 0.0) - 0.5) < 1e-12


def test_destination_round_trip_random():
    rng = np.random.default_rng(42)
    for _ in range(300):
        start = LatLon(math.radians(rng.uniform(-80.0, 80.0)), rng.uniform(-math.pi, math.pi))
        bearing = float(rng.uniform(0.0, 2.0 * math.pi))
        distance = float(rng.uniform(1.0, 1.0e6))
        dest = destination(start, distance, bearing)
        assert abs(great_circle_distance_m(start, dest) - distance) < 1e-3
        assert angle_difference_deg(initial_bearing_deg(start, dest), math.degrees(bearing)) < 1e-6
