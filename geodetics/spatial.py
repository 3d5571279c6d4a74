"""
Conversion between geodetic coordinates and 3D cartesian (ellipsoid-centered) coordinates
"""

__all__ = ['SpatialConverter']

import math

from geodetics._const import SPATIAL_MAX_ITER, SPATIAL_TOLERANCE
from geodetics.ellipsoid import Ellipsoid
from geodetics.exceptions import NonConvergence
from geodetics.points import CartesianPoint, GeodeticPoint
from geodetics.utils.mixins import LoggingMixin


class SpatialConverter(LoggingMixin):
    """
    Converts between geodetic (latitude, longitude, height) and cartesian (x, y, z)
    coordinates on the same ellipsoid.

    Args:
        ellipsoid:
            The reference ellipsoid
    """

    def __init__(self, ellipsoid: Ellipsoid):
        super().__init__()
        self.ellipsoid = ellipsoid

    def __repr__(self):
        return f'<SpatialConverter({self.ellipsoid!r})>'

    def geodetic_to_spatial(self, point: GeodeticPoint) -> CartesianPoint:
        """
        Converts a geodetic point to cartesian coordinates.

        Args:
            point:
                The geodetic point (radians, radians, meters)

        Returns:
            CartesianPoint
        """
        lat, lon, height = point
        n = self.ellipsoid.radius_n(lat)

        return CartesianPoint(
            (n + height) * math.cos(lat) * math.cos(lon),
            (n + height) * math.cos(lat) * math.sin(lon),
            ((1 - self.ellipsoid.e1_2) * n + height) * math.sin(lat),
        )

    def spatial_to_geodetic(self, point: CartesianPoint, **kwargs) -> GeodeticPoint:
        """
        Converts cartesian coordinates to a geodetic point. Longitude is exact; latitude
        is iterated from its zero-height estimate until the update falls below
        the tolerance, and height is recovered from the converged latitude.

        Points on the polar axis resolve to latitude +/- pi/2 (by the sign of z) without
        iterating.

        Args:
            point:
                The cartesian point

        Keyword Args:
            tolerance: (float) (Default 1e-12)
                Convergence threshold on the latitude update, in radians

            max_iterations: (int) (Default 256)
                Iteration cap; NonConvergence is raised when exceeded

        Returns:
            GeodeticPoint
        """
        tolerance = kwargs.get('tolerance', SPATIAL_TOLERANCE)
        max_iterations = kwargs.get('max_iterations', SPATIAL_MAX_ITER)

        x, y, z = point
        e2 = self.ellipsoid.e1_2
        lon = math.atan2(y, x)
        q = math.hypot(x, y)

        if q == 0:
            lat = -math.pi / 2 if z < 0 else math.pi / 2
            return GeodeticPoint(lat, lon, abs(z) - self.ellipsoid.b)

        lat, delta = math.atan(z / (q * (1 - e2))), math.inf
        for iteration in range(1, max_iterations + 1):
            n = self.ellipsoid.radius_n(lat)
            new_lat = math.atan((z + n * e2 * math.sin(lat)) / q)
            delta = abs(new_lat - lat)
            lat = new_lat

            if delta < tolerance:
                self.logger.debug('Latitude converged after %d iterations', iteration)
                break
        else:
            self.logger.error(
                'Cartesian to geodetic conversion of %s did not converge in %d iterations',
                point, max_iterations
            )
            raise NonConvergence(
                f'Cartesian to geodetic conversion did not converge after '
                f'{max_iterations} iterations',
                iterations=max_iterations,
                residual=delta,
            )

        sin_lat = math.sin(lat)
        height = (
            q * math.cos(lat) + z * sin_lat
            - self.ellipsoid.radius_n(lat) * (1 - e2 * sin_lat ** 2)
        )
        return GeodeticPoint(lat, lon, height)
