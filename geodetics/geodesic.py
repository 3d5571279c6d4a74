"""
Direct and inverse geodesic problems on the ellipsoid.

The direct problem integrates the geodesic differential equations with a single
fourth-order Runge-Kutta step; the inverse problem uses Vincenty's iteration on
the auxiliary sphere.
"""

__all__ = ['DirectResult', 'GeodesicSolver', 'InverseResult']

import math
from typing import NamedTuple

import numpy as np

from geodetics._const import (
    DIRECT_PROBLEM_SINGLE_STEP_LIMIT, VINCENTY_MAX_ITER, VINCENTY_TOLERANCE
)
from geodetics.ellipsoid import Ellipsoid
from geodetics.exceptions import NonConvergence
from geodetics.utils.functions import normalize_azimuth
from geodetics.utils.mixins import LoggingMixin


class DirectResult(NamedTuple):
    """Destination of the direct problem and the back azimuth from it"""
    latitude: float
    longitude: float
    back_azimuth: float


class InverseResult(NamedTuple):
    """Geodesic distance between two points and the azimuths at either end"""
    distance: float
    azimuth12: float
    azimuth21: float


class GeodesicSolver(LoggingMixin):
    """
    Solves the direct and inverse geodesic problems on an ellipsoid.

    Angles are in radians; azimuths are clockwise from north and returned in [0, 2*pi).
    Back azimuths point from the second point toward the first.

    Args:
        ellipsoid:
            The reference ellipsoid
    """

    def __init__(self, ellipsoid: Ellipsoid):
        super().__init__()
        self.ellipsoid = ellipsoid

    def __repr__(self):
        return f'<GeodesicSolver({self.ellipsoid!r})>'

    def _derivatives(self, state: np.ndarray, distance: float) -> np.ndarray:
        """Increments of (latitude, longitude, azimuth) over the distance at a state"""
        lat, _, azimuth = state
        n = self.ellipsoid.radius_n(lat)
        dlon = distance * math.sin(azimuth) / (n * math.cos(lat))
        return np.array([
            distance * math.cos(azimuth) / self.ellipsoid.radius_m(lat),
            dlon,
            dlon * math.sin(lat),
        ])

    def direct_problem(
        self,
        lat1: float,
        lon1: float,
        azimuth12: float,
        distance: float
    ) -> DirectResult:
        """
        Given a start point, an azimuth and a distance, finds the end point.

        The whole distance is covered by one Runge-Kutta step, so accuracy degrades
        for long lines (a warning is logged past 200 km); split long lines into
        shorter legs when accuracy matters.

        Args:
            lat1:
                Latitude of the start point, in radians

            lon1:
                Longitude of the start point, in radians

            azimuth12:
                Azimuth of the geodesic at the start point, in radians

            distance:
                Length of the geodesic, in meters

        Returns:
            DirectResult of (latitude, longitude, back_azimuth)
        """
        if abs(distance) > DIRECT_PROBLEM_SINGLE_STEP_LIMIT:
            self.warn_once(
                'Direct problem distances over %s m lose accuracy; '
                'consider splitting the line into shorter legs',
                DIRECT_PROBLEM_SINGLE_STEP_LIMIT,
            )

        y0 = np.array([lat1, lon1, azimuth12], dtype=float)
        k1 = self._derivatives(y0, distance)
        k2 = self._derivatives(y0 + 0.5 * k1, distance)
        k3 = self._derivatives(y0 + 0.5 * k2, distance)
        k4 = self._derivatives(y0 + k3, distance)
        lat2, lon2, azimuth2 = y0 + (k1 + 2 * k2 + 2 * k3 + k4) / 6

        return DirectResult(
            float(lat2),
            float(lon2),
            normalize_azimuth(float(azimuth2) + math.pi),
        )

    def inverse_problem_vincenty(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        **kwargs
    ) -> InverseResult:
        """
        Given two points, finds the geodesic distance between them and the azimuths
        at either end, using Vincenty's formulae.

        Coincident points have a distance of 0 and undefined (NaN) azimuths. Nearly
        antipodal points may fail to converge, in which case NonConvergence is raised.

        Args:
            lat1:
                Latitude of the first point, in radians

            lon1:
                Longitude of the first point, in radians

            lat2:
                Latitude of the second point, in radians

            lon2:
                Longitude of the second point, in radians

        Keyword Args:
            tolerance: (float) (Default 1e-14)
                Convergence threshold on the longitude update, in radians

            max_iterations: (int) (Default 200)
                Iteration cap

        Returns:
            InverseResult of (distance, azimuth12, azimuth21)
        """
        tolerance = kwargs.get('tolerance', VINCENTY_TOLERANCE)
        max_iterations = kwargs.get('max_iterations', VINCENTY_MAX_ITER)

        f, a, b = self.ellipsoid.f, self.ellipsoid.a, self.ellipsoid.b

        U1 = math.atan((1 - f) * math.tan(lat1))
        U2 = math.atan((1 - f) * math.tan(lat2))
        L = math.remainder(lon2 - lon1, 2 * math.pi)
        Lambda = L

        sinU1, cosU1 = math.sin(U1), math.cos(U1)
        sinU2, cosU2 = math.sin(U2), math.cos(U2)

        delta = math.inf
        for iteration in range(1, max_iterations + 1):
            sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
            sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                                 (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

            if sinSigma == 0:
                # Coincident points
                return InverseResult(0.0, math.nan, math.nan)

            cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
            sigma = math.atan2(sinSigma, cosSigma)
            sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
            cosSqAlpha = 1 - sinAlpha ** 2

            try:
                cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
            except ZeroDivisionError:
                # Equatorial line
                cos2SigmaM = 0

            C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
            Lambda_prev = Lambda
            Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
            )

            delta = abs(Lambda - Lambda_prev)
            if delta < tolerance:
                self.logger.debug('Vincenty inverse converged after %d iterations', iteration)
                break
        else:
            self.logger.error(
                'Vincenty inverse between (%s, %s) and (%s, %s) did not converge in %d '
                'iterations; the points are likely nearly antipodal',
                lat1, lon1, lat2, lon2, max_iterations
            )
            raise NonConvergence(
                f'Vincenty inverse problem did not converge after {max_iterations} iterations',
                iterations=max_iterations,
                residual=delta,
            )

        uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
        A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
        B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
        deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
            )
        )

        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
        alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
        alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

        return InverseResult(
            b * A * (sigma - deltaSigma),
            normalize_azimuth(alpha1),
            normalize_azimuth(alpha2 + math.pi),
        )

    def direct_problem_degrees(
        self,
        lat1: float,
        lon1: float,
        azimuth12: float,
        distance: float
    ) -> DirectResult:
        """
        Convenience wrapper around direct_problem taking and returning decimal degrees.
        """
        result = self.direct_problem(
            math.radians(lat1), math.radians(lon1), math.radians(azimuth12), distance
        )
        return DirectResult(*(math.degrees(x) for x in result))

    def inverse_problem_degrees(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        **kwargs
    ) -> InverseResult:
        """
        Convenience wrapper around inverse_problem_vincenty taking and returning
        decimal degrees.
        """
        distance, azimuth12, azimuth21 = self.inverse_problem_vincenty(
            math.radians(lat1), math.radians(lon1),
            math.radians(lat2), math.radians(lon2),
            **kwargs
        )
        return InverseResult(distance, math.degrees(azimuth12), math.degrees(azimuth21))
