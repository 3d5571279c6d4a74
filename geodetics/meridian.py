"""
Meridian arc length: latitude to distance along the meridian and back
"""

__all__ = ['latitude_from_arc', 'meridian_arc', 'meridian_distance']

import math

from geodetics._const import MERIDIAN_MAX_ITER, MERIDIAN_TOLERANCE
from geodetics.ellipsoid import Ellipsoid
from geodetics.exceptions import NonConvergence
from geodetics.utils.logging import LOGGER, warn_once


def meridian_distance(ellipsoid: Ellipsoid, lat: float) -> float:
    """
    Signed distance along the meridian from the equator to a latitude, using the
    series in the third flattening n (through n^3).

    Args:
        ellipsoid:
            The reference ellipsoid

        lat:
            Latitude, in radians

    Returns:
        (float) the arc length in meters; negative in the southern hemisphere
    """
    n, b = ellipsoid.n, ellipsoid.b
    n2, n3 = n * n, n * n * n

    b0 = b * (1 + n + 5 / 4 * n2 + 5 / 4 * n3)
    b2 = -b * (3 / 2 * n + 3 / 2 * n2 + 21 / 16 * n3)
    b4 = b * (15 / 16 * n2 + 15 / 16 * n3)
    b6 = -b * (35 / 48 * n3)

    return b0 * lat + b2 * math.sin(2 * lat) + b4 * math.sin(4 * lat) + b6 * math.sin(6 * lat)


def meridian_arc(ellipsoid: Ellipsoid, lat1: float, lat2: float) -> float:
    """
    Length of the meridian arc between two latitudes.

    Args:
        ellipsoid:
            The reference ellipsoid

        lat1:
            Latitude of the first point, in radians

        lat2:
            Latitude of the second point, in radians

    Returns:
        (float) the (unsigned) arc length, in meters
    """
    return abs(meridian_distance(ellipsoid, lat2) - meridian_distance(ellipsoid, lat1))


def latitude_from_arc(ellipsoid: Ellipsoid, distance: float, **kwargs) -> float:
    """
    Latitude reached by travelling a given (signed) distance north along the meridian
    from the equator. Solved by fixed point iteration on the eccentricity series
    (through e^8), seeded at the equator.

    Args:
        ellipsoid:
            The reference ellipsoid

        distance:
            The meridian arc length from the equator, in meters

    Keyword Args:
        tolerance: (float) (Default 1e-12)
            Convergence threshold on the latitude update, in radians

        max_iterations: (int) (Default 100)
            Iteration cap; NonConvergence is raised when exceeded

    Returns:
        (float) the latitude, in radians
    """
    tolerance = kwargs.get('tolerance', MERIDIAN_TOLERANCE)
    max_iterations = kwargs.get('max_iterations', MERIDIAN_MAX_ITER)

    if abs(distance) > meridian_distance(ellipsoid, math.pi / 2):
        warn_once('Meridian distances beyond the pole produce latitudes outside [-90, 90] degrees')

    e2 = ellipsoid.e1_2
    a0 = 1 + 3 / 4 * e2 + 45 / 64 * e2 ** 2 + 175 / 256 * e2 ** 3 + 11025 / 16384 * e2 ** 4
    a2 = 3 / 4 * e2 + 15 / 16 * e2 ** 2 + 525 / 512 * e2 ** 3 + 2205 / 2048 * e2 ** 4
    a4 = 15 / 64 * e2 ** 2 + 105 / 256 * e2 ** 3 + 2205 / 4096 * e2 ** 4
    a6 = 35 / 512 * e2 ** 3 + 315 / 2048 * e2 ** 4
    a8 = 315 / 16384 * e2 ** 4

    rectified = distance / (ellipsoid.a * (1 - e2))

    lat, delta = 0.0, math.inf
    for iteration in range(1, max_iterations + 1):
        new_lat = (
            rectified
            + a2 / 2 * math.sin(2 * lat)
            - a4 / 4 * math.sin(4 * lat)
            + a6 / 6 * math.sin(6 * lat)
            - a8 / 8 * math.sin(8 * lat)
        ) / a0
        delta = abs(new_lat - lat)
        lat = new_lat

        if delta < tolerance:
            LOGGER.debug('Meridian arc inversion converged after %d iterations', iteration)
            return lat

    LOGGER.error(
        'Meridian arc inversion for %s m did not converge in %d iterations',
        distance, max_iterations
    )
    raise NonConvergence(
        f'Latitude from meridian arc did not converge after {max_iterations} iterations',
        iterations=max_iterations,
        residual=delta,
    )
