import math

from pytest import approx

from geodetics._const import ARCSECOND
from geodetics.datum import *
from geodetics.points import CartesianPoint
from geodetics.utils.mixins import LoggingMixin

# SK-42 to WGS 84
SK42_WGS84 = DatumTransformParameters(23.57, -140.95, -79.8, 0., -0.35, -0.79, -0.22)
POINT = CartesianPoint(2_849_000., 2_296_000., 5_129_000.)


def test_identity():
    params = DatumTransformParameters(0., 0., 0., 0., 0., 0., 0.)
    assert transform_datum(POINT, params) == approx(POINT)


def test_translation():
    params = DatumTransformParameters(10., -20., 30.5, 0., 0., 0., 0.)
    assert transform_datum(POINT, params) == approx(
        (POINT.x + 10., POINT.y - 20., POINT.z + 30.5)
    )


def test_rotation():
    params = DatumTransformParameters(0., 0., 0., 0., 0., 1., 0.)
    a = 6378137.
    actual = transform_datum(CartesianPoint(a, 0., 0.), params)
    assert actual == approx((a, -ARCSECOND * a, 0.))

    params = DatumTransformParameters(0., 0., 0., 1., 0., 0., 0.)
    actual = transform_datum(CartesianPoint(0., 0., a), params)
    assert actual == approx((0., ARCSECOND * a, a))

    params = DatumTransformParameters(0., 0., 0., 0., 1., 0., 0.)
    actual = transform_datum(CartesianPoint(a, 0., 0.), params)
    assert actual == approx((a, 0., ARCSECOND * a))

    actual = transform_datum(CartesianPoint(0., 0., a), params)
    assert actual == approx((-ARCSECOND * a, 0., a))


def test_all_parameters():
    # x' = s(x + rz y - ry z) + dx, cyclic for y' and z'
    params = DatumTransformParameters(1., 2., 3., 1., 2., 3., 1.)
    s, r = 1 + 1e-6, ARCSECOND
    actual = transform_datum(CartesianPoint(6_000_000., 1_000_000., 500_000.), params)
    assert actual == approx((
        s * (6_000_000. + 2_000_000. * r) + 1.,
        s * (1_000_000. - 17_500_000. * r) + 2.,
        s * (500_000. + 11_000_000. * r) + 3.,
    ), abs=1e-6)


def test_scale():
    params = DatumTransformParameters(0., 0., 0., 0., 0., 0., 1.)
    actual = transform_datum(POINT, params)
    assert actual == approx(tuple(x * (1 + 1e-6) for x in POINT))


def test_returns_floats():
    actual = transform_datum(POINT, SK42_WGS84)
    assert isinstance(actual, CartesianPoint)
    assert all(type(x) is float for x in actual)


def test_inverse():
    assert SK42_WGS84.inverted() == (-23.57, 140.95, 79.8, 0., 0.35, 0.79, 0.22)

    transformer = DatumTransformer(SK42_WGS84)
    shifted = transformer.transform(POINT)
    assert shifted == transform_datum(POINT, SK42_WGS84)
    assert math.dist(shifted, POINT) > 100.

    # First order inverse
    assert transformer.inverse_transform(shifted) == approx(POINT, abs=1e-2)


def test_nan_propagates():
    actual = transform_datum(CartesianPoint(math.nan, 0., 0.), SK42_WGS84)
    assert math.isnan(actual.x)


def test_large_rotation_warning(caplog):
    LoggingMixin.WARNED_ONCE.clear()
    DatumTransformer(SK42_WGS84)
    assert 'small-angle' not in caplog.text

    DatumTransformer(DatumTransformParameters(0., 0., 0., 0., 0., 3600., 0.))
    assert 'small-angle' in caplog.text
