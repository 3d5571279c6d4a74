"""
Gauss-Krüger (transverse Mercator) conformal projection of the ellipsoid onto a plane
"""

__all__ = ['GaussKrugerProjector']

import math

from geodetics.ellipsoid import Ellipsoid
from geodetics.meridian import latitude_from_arc, meridian_distance
from geodetics.points import GeodeticPoint, PlanePoint
from geodetics.utils.mixins import LoggingMixin


class GaussKrugerProjector(LoggingMixin):
    """
    Projects geodetic coordinates to Gauss-Krüger plane coordinates and back, relative
    to the equator and a given central meridian. No false origin is applied.

    The series are valid close to the central meridian (a few degrees of longitude);
    they diverge far from it and callers are responsible for staying in range.

    Args:
        ellipsoid:
            The ellipsoid the geodetic coordinates refer to
    """

    def __init__(self, ellipsoid: Ellipsoid):
        super().__init__()
        self.ellipsoid = ellipsoid

    def __repr__(self):
        return f'<GaussKrugerProjector({self.ellipsoid!r})>'

    def geodetic_to_plane(self, point: GeodeticPoint, central_meridian: float) -> PlanePoint:
        """
        Projects a geodetic point onto the plane.

        Args:
            point:
                The geodetic point; its height is ignored

            central_meridian:
                Longitude of the central meridian, in radians

        Returns:
            PlanePoint
        """
        lat = point.latitude
        dlon = point.longitude - central_meridian
        return PlanePoint(self._northing(lat, dlon), self._easting(lat, dlon))

    def plane_to_geodetic(self, point: PlanePoint, central_meridian: float) -> GeodeticPoint:
        """
        Recovers the geodetic point of a plane point.

        Args:
            point:
                The plane point, relative to the equator and the central meridian

            central_meridian:
                Longitude of the central meridian, in radians

        Returns:
            GeodeticPoint (height 0)
        """
        foot_lat = latitude_from_arc(self.ellipsoid, point.northing)
        return GeodeticPoint(
            self._latitude(foot_lat, point.easting),
            self._longitude_delta(foot_lat, point.easting) + central_meridian,
        )

    def _northing(self, lat: float, dlon: float) -> float:
        eta2 = self.ellipsoid.e2_2 * math.cos(lat) ** 2
        n = self.ellipsoid.radius_n(lat)
        sin_b, cos_b = math.sin(lat), math.cos(lat)
        t2 = math.tan(lat) ** 2

        a0 = meridian_distance(self.ellipsoid, lat)
        a2 = 1 / 2 * n * sin_b * cos_b
        a4 = 1 / 24 * n * sin_b * cos_b ** 3 * (5 - t2 + 9 * eta2 + 4 * eta2 ** 2)
        a6 = 1 / 720 * n * sin_b * cos_b ** 5 * (
            61 - 58 * t2 + t2 ** 2 + 270 * eta2 - 330 * eta2 * t2
        )
        a8 = 1 / 40320 * n * sin_b * cos_b ** 7 * (1385 - 3111 * t2 + 543 * t2 ** 2 - t2 ** 3)

        return a0 + a2 * dlon ** 2 + a4 * dlon ** 4 + a6 * dlon ** 6 + a8 * dlon ** 8

    def _easting(self, lat: float, dlon: float) -> float:
        eta2 = self.ellipsoid.e2_2 * math.cos(lat) ** 2
        n = self.ellipsoid.radius_n(lat)
        cos_b = math.cos(lat)
        t2 = math.tan(lat) ** 2

        b1 = self.ellipsoid.radius_parallel(lat)
        b3 = 1 / 6 * n * cos_b ** 3 * (1 - t2 + eta2)
        b5 = 1 / 120 * n * cos_b ** 5 * (5 - 18 * t2 + t2 ** 2 + 14 * eta2 - 58 * eta2 * t2)
        b7 = 1 / 5040 * n * cos_b ** 7 * (61 - 479 * t2 + 179 * t2 ** 2 - t2 ** 3)

        return b1 * dlon + b3 * dlon ** 3 + b5 * dlon ** 5 + b7 * dlon ** 7

    def _latitude(self, foot_lat: float, y: float) -> float:
        n = self.ellipsoid.radius_n(foot_lat)
        t = math.tan(foot_lat)
        t2 = t * t
        eta2 = self.ellipsoid.e2_2 * math.cos(foot_lat) ** 2

        a2 = -t * (1 + eta2) / (2 * n ** 2)
        a4 = -a2 / (12 * n ** 2) * (5 + 3 * t2 + eta2 - 9 * eta2 * t2 - 4 * eta2 ** 2)
        a6 = a2 / (360 * n ** 4) * (
            61 + 90 * t2 + 45 * t2 ** 2 + 46 * eta2 - 252 * eta2 * t2 - 90 * eta2 * t2 ** 2
        )

        return foot_lat + a2 * y ** 2 + a4 * y ** 4 + a6 * y ** 6

    def _longitude_delta(self, foot_lat: float, y: float) -> float:
        n = self.ellipsoid.radius_n(foot_lat)
        t2 = math.tan(foot_lat) ** 2
        eta2 = self.ellipsoid.e2_2 * math.cos(foot_lat) ** 2

        p1 = 1 / (n * math.cos(foot_lat))
        p3 = -p1 / (6 * n ** 2) * (1 + 2 * t2 + eta2)
        p5 = p1 / (120 * n ** 4) * (5 + 28 * t2 + 24 * t2 ** 2 + 6 * eta2 + 8 * eta2 * t2)

        return p1 * y + p3 * y ** 3 + p5 * y ** 5
