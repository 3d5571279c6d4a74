import math

import pytest
from pytest import approx

from geodetics.ellipsoid import KRASOVSKIY, WGS84
from geodetics.exceptions import InvalidParameter
from geodetics.points import GeodeticPoint, PlanePoint
from geodetics.regions import *

from tests.functions import assert_geodetic_points_equal


def test_get_region():
    region = get_region('X')
    assert region == RegionParameters('X', 23.5, -9214.69, 300_000.)

    with pytest.raises(InvalidParameter):
        get_region('made up')


def test_regional_projector_init():
    projector = RegionalProjector('X', 6)
    assert projector.projector.ellipsoid == KRASOVSKIY
    assert projector.central_meridian == approx(math.radians(38.5))
    assert projector.false_northing == -9214.69
    assert projector.false_easting == 6_300_000.
    assert repr(projector) == "<RegionalProjector('X', zone=6)>"

    assert RegionalProjector('X', 1, WGS84).central_meridian == approx(math.radians(23.5))

    with pytest.raises(InvalidParameter):
        RegionalProjector('made up', 6)

    with pytest.raises(InvalidParameter):
        RegionalProjector('X', 0)

    with pytest.raises(InvalidParameter):
        RegionalProjector('X', 2.5)


def test_regional_round_trip():
    # Sample point of region X, zone 6
    projector = RegionalProjector('X', 6)
    source = PlanePoint(5313937.778, 6295607.862)

    geodetic = projector.plane_to_geodetic(source)
    lat, lon, _ = geodetic.to_degrees()
    assert 47. < lat < 49.
    assert 38.4 < lon < 38.5

    assert projector.geodetic_to_plane(geodetic) == approx(source, abs=1e-4)


def test_regional_false_origin():
    projector = RegionalProjector('X', 6)
    point = GeodeticPoint.from_degrees(54., 39.)

    plane = projector.geodetic_to_plane(point)
    raw = projector.projector.geodetic_to_plane(point, math.radians(38.5))
    assert plane.northing == approx(raw.northing - 9214.69)
    assert plane.easting == approx(raw.easting + 6_300_000.)

    assert_geodetic_points_equal(projector.plane_to_geodetic(plane), point)
