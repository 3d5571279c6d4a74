import math

import pytest
from pytest import approx

from geodetics.ellipsoid import KRASOVSKIY, WGS84
from geodetics.exceptions import NonConvergence
from geodetics.gauss_kruger import *
from geodetics.meridian import meridian_distance
from geodetics.points import GeodeticPoint, PlanePoint

from tests.functions import assert_geodetic_points_equal


def test_projector_repr():
    assert repr(GaussKrugerProjector(KRASOVSKIY)) == \
        '<GaussKrugerProjector(<Ellipsoid(a=6378245.0, 1/f=298.3)>)>'


def test_origin_identity():
    projector = GaussKrugerProjector(KRASOVSKIY)
    l0 = math.radians(38.5)

    assert projector.geodetic_to_plane(GeodeticPoint(0., l0), l0) == PlanePoint(0., 0.)
    assert projector.plane_to_geodetic(PlanePoint(0., 0.), l0) == GeodeticPoint(0., l0)


def test_central_meridian():
    projector = GaussKrugerProjector(WGS84)
    l0 = math.radians(27.)

    for lat_deg in (-60., 12.5, 54., 80.):
        lat = math.radians(lat_deg)
        actual = projector.geodetic_to_plane(GeodeticPoint(lat, l0), l0)
        assert actual.easting == 0.
        assert actual.northing == meridian_distance(WGS84, lat)

        assert_geodetic_points_equal(
            projector.plane_to_geodetic(actual, l0),
            GeodeticPoint(lat, l0),
            angle_tol=1e-10,
        )


def test_worked_example():
    # Krasovskiy, B = 54, L = 39, L0 = 38.5
    projector = GaussKrugerProjector(KRASOVSKIY)
    l0 = math.radians(38.5)
    point = GeodeticPoint.from_degrees(54., 39.)

    plane = projector.geodetic_to_plane(point, l0)
    assert plane.easting > 0
    assert plane.northing > meridian_distance(KRASOVSKIY, point.latitude)

    assert_geodetic_points_equal(projector.plane_to_geodetic(plane, l0), point)


def test_round_trip():
    l0 = math.radians(39.)
    for ellipsoid in (KRASOVSKIY, WGS84):
        projector = GaussKrugerProjector(ellipsoid)
        for lat_deg in (-80., -45., -10., 0., 10., 30., 54., 70., 85.):
            for dlon_deg in (-3., -1.5, 0., 0.7, 2.9):
                point = GeodeticPoint.from_degrees(lat_deg, 39. + dlon_deg)
                plane = projector.geodetic_to_plane(point, l0)
                assert_geodetic_points_equal(projector.plane_to_geodetic(plane, l0), point)


def test_symmetry():
    projector = GaussKrugerProjector(KRASOVSKIY)
    l0 = math.radians(38.5)
    dlon = math.radians(1.2)

    east = projector.geodetic_to_plane(GeodeticPoint(math.radians(54.), l0 + dlon), l0)
    west = projector.geodetic_to_plane(GeodeticPoint(math.radians(54.), l0 - dlon), l0)
    assert east.northing == approx(west.northing, abs=1e-9)
    assert east.easting == approx(-west.easting, abs=1e-9)

    # Southern hemisphere mirrors the northern one
    south = projector.geodetic_to_plane(GeodeticPoint(math.radians(-54.), l0 + dlon), l0)
    assert south.northing == approx(-east.northing, abs=1e-6)
    assert south.easting == approx(east.easting, abs=1e-6)


def test_easting_near_central_meridian():
    projector = GaussKrugerProjector(WGS84)
    lat, dlon = math.radians(45.), 1e-4
    plane = projector.geodetic_to_plane(GeodeticPoint(lat, dlon), 0.)

    # To first order, easting is the arc of the parallel
    assert plane.easting == approx(WGS84.radius_parallel(lat) * dlon, rel=1e-8)


def test_height_ignored():
    projector = GaussKrugerProjector(WGS84)
    point = GeodeticPoint.from_degrees(54., 39., 250.)
    assert projector.geodetic_to_plane(point, 0.6) == \
        projector.geodetic_to_plane(point._replace(height=0.), 0.6)


def test_plane_to_geodetic_nonconvergence():
    projector = GaussKrugerProjector(WGS84)
    with pytest.raises(NonConvergence):
        projector.plane_to_geodetic(PlanePoint(math.nan, 0.), 0.)
