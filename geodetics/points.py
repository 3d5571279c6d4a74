"""
Coordinate value types: geodetic, plane and cartesian points
"""

__all__ = ['CartesianPoint', 'GeodeticPoint', 'PlanePoint']

import math
from typing import NamedTuple, Tuple

from geodetics.utils.functions import round_half_up

_DMS = Tuple[int, int, float, str]


class GeodeticPoint(NamedTuple):
    """A point in geodetic coordinates: latitude and longitude in radians, height in meters"""
    latitude: float
    longitude: float
    height: float = 0.0

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, height: float = 0.0):
        """Creates a GeodeticPoint from decimal degrees"""
        return cls(math.radians(latitude), math.radians(longitude), height)

    @classmethod
    def from_dms(cls, lat: _DMS, lon: _DMS, height: float = 0.0):
        """
        Creates a GeodeticPoint from Degree Minutes Seconds latitude and longitude.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (int),  <minutes> (int), <seconds> (float), <quadrant> (str) )

            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (int),  <minutes> (int), <seconds> (float), <quadrant> (str) )

            height:
                Height above the ellipsoid, in meters

        Returns:
            GeodeticPoint
        """
        def convert(dms: _DMS) -> float:
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls.from_degrees(convert(lat), convert(lon), height)

    def to_degrees(self) -> Tuple[float, float, float]:
        """Returns (latitude, longitude, height) with angles in decimal degrees"""
        return math.degrees(self.latitude), math.degrees(self.longitude), self.height

    def to_dms(self, seconds_digits: int = 5) -> Tuple[_DMS, _DMS]:
        """
        Converts latitude and longitude to tuples of degrees, minutes, seconds, hemisphere

        Args:
            seconds_digits:
                The decimal precision the seconds are rounded to

        Returns:
            (latitude, longitude), each as (degrees, minutes, seconds, hemisphere)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            seconds = round_half_up(abs(dd) * 3600, seconds_digits)
            minutes, seconds = divmod(seconds, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, seconds_digits)

        lat, lon, _ = self.to_degrees()
        return (
            (*convert(lat), 'N' if lat >= 0 else 'S'),
            (*convert(lon), 'E' if lon >= 0 else 'W'),
        )

    def to_decimal_degree_string(self, digits: int = 8) -> str:
        """Formats latitude and longitude as 'lat, lon' in decimal degrees"""
        lat, lon, _ = self.to_degrees()
        return f'{lat:.{digits}f}, {lon:.{digits}f}'

    def to_dms_string(self, seconds_digits: int = 3) -> str:
        """Formats latitude and longitude as e.g. 54°00'00.000"N  39°00'00.000"E"""
        def fmt(dms: _DMS) -> str:
            width = seconds_digits + 3 if seconds_digits else 2
            return f'{dms[0]}°{dms[1]:02d}\'{dms[2]:0{width}.{seconds_digits}f}"{dms[3]}'

        lat, lon = self.to_dms(seconds_digits)
        return f'{fmt(lat)}  {fmt(lon)}'


class PlanePoint(NamedTuple):
    """A point on the projection plane, in meters"""
    northing: float
    easting: float


class CartesianPoint(NamedTuple):
    """A point in an ellipsoid-centered, ellipsoid-fixed frame, in meters"""
    x: float
    y: float
    z: float
