"""
Representation of a reference ellipsoid and its radii of curvature
"""

__all__ = ['Ellipsoid', 'KRASOVSKIY', 'PZ90', 'WGS84']

import math
from typing import Literal

from geodetics._const import ELLIPSOID_PRESETS
from geodetics.exceptions import InvalidParameter


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-major axis and flattening.

    All derived quantities are computed once on construction; instances are immutable
    and compare equal when their defining parameters are equal.

    Args:
        a:
            The semi-major (equatorial) axis, in meters

        inverse_flattening:
            The inverse flattening 1/f. Use math.inf for a sphere.
    """

    __slots__ = ('_a', '_f', '_b', '_e1_2', '_e2_2', '_n')

    def __init__(self, a: float, inverse_flattening: float):
        try:
            a, inverse_flattening = float(a), float(inverse_flattening)
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(
                f'Ellipsoid parameters must be numeric, got {a!r}, {inverse_flattening!r}'
            ) from exc

        if math.isnan(inverse_flattening) or inverse_flattening <= 1:
            raise InvalidParameter(
                f'Inverse flattening must be greater than 1, got {inverse_flattening}'
            )

        self._init(a, 1 / inverse_flattening)

    def _init(self, a: float, f: float):
        if not math.isfinite(a) or a <= 0:
            raise InvalidParameter(f'Semi-major axis must be a positive number, got {a}')

        if not 0 <= f < 1:
            raise InvalidParameter(f'Flattening must be in [0, 1), got {f}')

        b = a * (1 - f)
        object.__setattr__(self, '_a', a)
        object.__setattr__(self, '_f', f)
        object.__setattr__(self, '_b', b)
        object.__setattr__(self, '_e1_2', 1 - b * b / (a * a))
        object.__setattr__(self, '_e2_2', a * a / (b * b) - 1)
        object.__setattr__(self, '_n', (a - b) / (a + b))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __getstate__(self):
        return self._a, self._f

    def __setstate__(self, state):
        self._init(*state)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, 1/f={round(self.inverse_flattening, 9)})>'

    @classmethod
    def from_flattening(cls, a: float, f: float) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its semi-major axis and flattening (rather than
        inverse flattening). A flattening of 0 produces a sphere.

        Args:
            a:
                The semi-major axis, in meters

            f:
                The flattening, in [0, 1)

        Returns:
            Ellipsoid
        """
        try:
            a, f = float(a), float(f)
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(
                f'Ellipsoid parameters must be numeric, got {a!r}, {f!r}'
            ) from exc

        ellipsoid = cls.__new__(cls)
        ellipsoid._init(a, f)
        return ellipsoid

    @classmethod
    def from_preset(cls, name: Literal['krasovskiy', 'wgs84', 'pz90']) -> 'Ellipsoid':
        """
        Creates one of the well-known reference ellipsoids by name (case insensitive).

        Args:
            name:
                One of 'krasovskiy', 'wgs84', 'pz90'

        Returns:
            Ellipsoid
        """
        try:
            return cls(*ELLIPSOID_PRESETS[str(name).lower()])
        except KeyError as exc:
            raise InvalidParameter(
                f"Unknown ellipsoid '{name}'. Options: {list(ELLIPSOID_PRESETS.keys())}"
            ) from exc

    @property
    def a(self) -> float:
        """Semi-major (equatorial) axis, in meters"""
        return self._a

    @property
    def b(self) -> float:
        """Semi-minor (polar) axis, in meters"""
        return self._b

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @property
    def inverse_flattening(self) -> float:
        """Inverse flattening; infinite for a sphere"""
        return 1 / self._f if self._f else math.inf

    @property
    def e1_2(self) -> float:
        """First eccentricity squared"""
        return self._e1_2

    @property
    def e2_2(self) -> float:
        """Second eccentricity squared"""
        return self._e2_2

    @property
    def e1(self) -> float:
        """First eccentricity"""
        return math.sqrt(self._e1_2)

    @property
    def e2(self) -> float:
        """Second eccentricity"""
        return math.sqrt(self._e2_2)

    @property
    def n(self) -> float:
        """Third flattening, (a - b) / (a + b)"""
        return self._n

    def _w(self, lat: float) -> float:
        return math.sqrt(1 - self._e1_2 * math.sin(lat) ** 2)

    def radius_m(self, lat: float) -> float:
        """
        Radius of curvature of the meridian section.

        Args:
            lat:
                Latitude, in radians

        Returns:
            (float) the radius, in meters
        """
        return self._a * (1 - self._e1_2) / self._w(lat) ** 3

    def radius_n(self, lat: float) -> float:
        """
        Radius of curvature of the prime vertical section.

        Args:
            lat:
                Latitude, in radians

        Returns:
            (float) the radius, in meters
        """
        return self._a / self._w(lat)

    def radius_mean(self, lat: float) -> float:
        """Gaussian mean radius of curvature, sqrt(M * N), at a latitude in radians"""
        return self._b / self._w(lat) ** 2

    def radius_parallel(self, lat: float) -> float:
        """Radius of the parallel at a latitude in radians"""
        return self.radius_n(lat) * math.cos(lat)

    def radius_azimuth(self, lat: float, azimuth: float) -> float:
        """
        Radius of curvature of the normal section in an arbitrary azimuth (Euler's formula).

        Args:
            lat:
                Latitude, in radians

            azimuth:
                Azimuth of the normal section, in radians

        Returns:
            (float) the radius, in meters
        """
        m, n = self.radius_m(lat), self.radius_n(lat)
        return m * n / (n * math.cos(azimuth) ** 2 + m * math.sin(azimuth) ** 2)

    def parallel_arc(self, lat: float, lon1: float, lon2: float) -> float:
        """Length in meters of the arc of a parallel between two longitudes (radians)"""
        return self.radius_parallel(lat) * abs(lon2 - lon1)

    def trapezoid_area(self, lat1: float, lat2: float, lon1: float, lon2: float) -> float:
        """
        Area of the graticule trapezoid bounded by two parallels and two meridians.

        Args:
            lat1:
                Latitude of the southern boundary, in radians

            lat2:
                Latitude of the northern boundary, in radians

            lon1:
                Longitude of the western boundary, in radians

            lon2:
                Longitude of the eastern boundary, in radians

        Returns:
            (float) the area, in square meters
        """
        e2 = self._e1_2
        s1, s2 = math.sin(lat1), math.sin(lat2)
        return self._b ** 2 * abs(lon2 - lon1) * (
            s2 - s1
            + 2 / 3 * e2 * (s2 ** 3 - s1 ** 3)
            + 3 / 5 * e2 ** 2 * (s2 ** 5 - s1 ** 5)
            + 4 / 7 * e2 ** 3 * (s2 ** 7 - s1 ** 7)
        )


KRASOVSKIY = Ellipsoid.from_preset('krasovskiy')
WGS84 = Ellipsoid.from_preset('wgs84')
PZ90 = Ellipsoid.from_preset('pz90')
