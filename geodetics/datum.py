"""
Seven-parameter (Helmert) similarity transform between cartesian frames
"""

__all__ = ['DatumTransformParameters', 'DatumTransformer', 'transform_datum']

from typing import NamedTuple

import numpy as np

from geodetics._const import ARCSECOND
from geodetics.points import CartesianPoint
from geodetics.utils.mixins import LoggingMixin

# Arc-seconds
_LARGE_ROTATION = 60.0


class DatumTransformParameters(NamedTuple):
    """
    Linearized similarity transform parameters. Valid only for small rotations and
    scale corrections.

    Attributes:
        dx, dy, dz:
            Translations, in meters

        rx, ry, rz:
            Rotations about the x, y and z axes, in arc-seconds

        m:
            Scale correction, in parts per million
    """
    dx: float
    dy: float
    dz: float
    rx: float
    ry: float
    rz: float
    m: float

    def inverted(self) -> 'DatumTransformParameters':
        """The parameters of the reverse transform (exact to first order)"""
        return DatumTransformParameters(*(-x for x in self))


def transform_datum(point: CartesianPoint, params: DatumTransformParameters) -> CartesianPoint:
    """
    Applies a seven-parameter transform to a cartesian point:
    scale * R * p + t, where R is the small-angle rotation matrix.

    Args:
        point:
            The point in the source frame

        params:
            The transform parameters

    Returns:
        CartesianPoint in the target frame
    """
    rx, ry, rz = (r * ARCSECOND for r in params[3:6])
    scale = 1 + params.m * 1e-6

    R = np.array([
        [1., rz, -ry],
        [-rz, 1., rx],
        [ry, -rx, 1.],
    ])
    translation = np.array(params[:3], dtype=float)
    p = scale * (R @ np.array(point, dtype=float)) + translation

    return CartesianPoint(*(float(x) for x in p))


class DatumTransformer(LoggingMixin):
    """
    Transforms points between two cartesian frames linked by a fixed parameter set.

    Args:
        params:
            The forward (source to target) transform parameters
    """

    def __init__(self, params: DatumTransformParameters):
        super().__init__()
        self.params = params

        if max(abs(params.rx), abs(params.ry), abs(params.rz)) > _LARGE_ROTATION:
            self.warn_once(
                'Datum rotations over %s arc-seconds are outside the small-angle '
                'approximation; transformed points will be inaccurate',
                _LARGE_ROTATION,
            )

    def __repr__(self):
        return f'<DatumTransformer({self.params!r})>'

    def transform(self, point: CartesianPoint) -> CartesianPoint:
        """Transforms a point from the source frame to the target frame"""
        return transform_datum(point, self.params)

    def inverse_transform(self, point: CartesianPoint) -> CartesianPoint:
        """Transforms a point from the target frame back to the source frame"""
        return transform_datum(point, self.params.inverted())
