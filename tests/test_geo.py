import math

import pytest

from app.modules.peers.geo import EARTH_RADIUS_KM, distance_sort_key, haversine_km


@pytest.mark.parametrize("lat,lng", [(0.0, 0.0), (1.3521, 103.8198), (-33.87, 151.21), (89.9, -179.9)])
def test_identical_points_are_zero(lat, lng):
    assert haversine_km(lat, lng, lat, lng) == 0


@pytest.mark.parametrize("a,b", [
    ((1.3521, 103.8198), (1.36, 103.82)),
    ((37.7749, -122.4194), (51.5074, -0.1278)),
    ((-45.0, 10.0), (45.0, -170.0)),
])
def test_distance_is_symmetric(a, b):
    assert haversine_km(*a, *b) == haversine_km(*b, *a)


def test_antipodal_points_are_half_circumference():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)
    assert haversine_km(90.0, 0.0, -90.0, 0.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_known_distance_one_degree_of_latitude():
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.01)


def test_nan_propagates_and_sorts_last():
    distance = haversine_km(float("nan"), 0.0, 1.0, 1.0)
    assert math.isnan(distance)
    assert sorted([distance, 3.0, 1.0], key=distance_sort_key)[-1] is distance
