# tests/domain/test_geography.py
import math

import pytest

from fast_delivery.domain.entities.geography import (
    EARTH_RADIUS_KM,
    Coordinate,
    Distance,
    GeoPoint,
)
from fast_delivery.domain.errors import DivideByZeroError, MissingInputError, RangeError

MOSCOW = GeoPoint.of(55.7558, 37.6173)
SAINT_PETERSBURG = GeoPoint.of(59.9311, 30.3609)
SAMARA = GeoPoint.of(53.1959, 50.1200)


def test_coordinate_range_is_supplied_per_role():
    assert Coordinate.latitude(55.0, 45.0, 65.0).value == 55.0
    assert Coordinate.longitude(95.0, 30.0, 96.0).value == 95.0
    with pytest.raises(RangeError) as ei:
        Coordinate.latitude(70.0, 45.0, 65.0)
    assert ei.value.bound == 65.0
    assert "Coordinate 70.000000 not in range [45.00, 65.00]" == str(ei.value)
    with pytest.raises(RangeError):
        Coordinate(-181.0)


def test_coordinate_helpers():
    a, b = Coordinate(10.5), Coordinate(12.0)
    assert a < b
    assert a.difference_from(b) == 1.5
    assert Coordinate(10.5) == a
    assert str(a) == "10.500000°"


def test_geo_point_requires_both_coordinates():
    with pytest.raises(MissingInputError):
        GeoPoint(Coordinate(1.0), None)


def test_geo_point_helpers():
    assert MOSCOW.is_at_same_location(GeoPoint.of(55.7558, 37.6173))
    assert not MOSCOW.is_at_same_location(SAMARA)
    assert math.isclose(MOSCOW.latitude_difference_from(SAINT_PETERSBURG), 4.1753)
    assert math.isclose(MOSCOW.longitude_difference_from(SAINT_PETERSBURG), 7.2564)


def test_distance_to_self_is_zero():
    for p in (MOSCOW, SAINT_PETERSBURG, SAMARA, GeoPoint.of(-33.9, 151.2)):
        assert Distance.calculate(p, p).kilometers == pytest.approx(0.0, abs=1e-9)


def test_distance_is_symmetric():
    for a, b in ((MOSCOW, SAINT_PETERSBURG), (MOSCOW, SAMARA), (SAMARA, SAINT_PETERSBURG)):
        ab = Distance.calculate(a, b)
        ba = Distance.calculate(b, a)
        assert ab.is_approximately_equal_to(ba, 0.1)


def test_distance_along_a_meridian():
    # six degrees of latitude on one meridian
    d = Distance.calculate(GeoPoint.of(45.0, 40.0), GeoPoint.of(51.0, 40.0))
    assert d.kilometers == pytest.approx(EARTH_RADIUS_KM * math.radians(6.0), rel=1e-12)


def test_moscow_to_saint_petersburg():
    d = Distance.calculate(MOSCOW, SAINT_PETERSBURG)
    # straight-line figure from the haversine formula on a 6371 km sphere
    assert 620.0 < d.kilometers < 645.0


def test_distance_over_cap_is_rejected():
    with pytest.raises(RangeError):
        Distance.calculate(GeoPoint.of(0.0, 0.0), GeoPoint.of(0.0, 180.0))


def test_distance_bounds():
    assert Distance(0.0).kilometers == 0.0
    assert Distance(20_000.0).kilometers == 20_000.0
    with pytest.raises(RangeError):
        Distance(-0.001)
    with pytest.raises(RangeError):
        Distance(20_000.001)


def test_distance_arithmetic():
    d = Distance(300.0) + Distance(150.0)
    assert d == Distance(450.0)
    assert Distance(900.0).ratio_to(Distance(450.0)) == 2.0
    assert Distance(100.0) < Distance(100.5)
    assert Distance(1.5).meters == 1500.0
    assert Distance(10.0).miles == pytest.approx(6.21371)
    assert str(Distance(714.0)) == "714.00 km"
    with pytest.raises(RangeError):
        Distance(15_000.0).add(Distance(6_000.0))


def test_ratio_to_zero_distance():
    with pytest.raises(DivideByZeroError):
        Distance(10.0).ratio_to(Distance(0.0))
    with pytest.raises(ZeroDivisionError):
        Distance(10.0).ratio_to(Distance(0.0))


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_coordinate_is_rejected(value):
    with pytest.raises(RangeError):
        Coordinate.latitude(value, 45.0, 65.0)
    with pytest.raises(RangeError):
        Coordinate(value)


@pytest.mark.parametrize("km", [float("nan"), float("inf")])
def test_non_finite_distance_is_rejected(km):
    with pytest.raises(RangeError):
        Distance(km)
