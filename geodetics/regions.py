"""
Regional plane coordinate systems: Gauss-Krüger projections with a zone-dependent
central meridian and a false origin (SK-63 style)
"""

__all__ = ['RegionParameters', 'RegionalProjector', 'SK63_REGIONS', 'get_region']

import math
from typing import Dict, NamedTuple

from geodetics.ellipsoid import KRASOVSKIY, Ellipsoid
from geodetics.exceptions import InvalidParameter
from geodetics.gauss_kruger import GaussKrugerProjector
from geodetics.points import GeodeticPoint, PlanePoint


class RegionParameters(NamedTuple):
    """Central meridian of the first zone (degrees) and false origin offsets (meters)"""
    region: str
    central_meridian_degrees: float
    false_northing: float
    false_easting: float


SK63_REGIONS: Dict[str, RegionParameters] = {
    x.region: x for x in (
        RegionParameters('X', 23.5, -9214.69, 300_000.),
    )
}


def get_region(name: str) -> RegionParameters:
    """
    Looks up a regional parameter set by name.

    Args:
        name:
            The region name, e.g. 'X'

    Returns:
        RegionParameters
    """
    try:
        return SK63_REGIONS[name]
    except KeyError as exc:
        raise InvalidParameter(
            f"Unknown region '{name}'. Options: {list(SK63_REGIONS.keys())}"
        ) from exc


class RegionalProjector:
    """
    Converts between geodetic coordinates and the plane coordinates of a regional
    zone. Zones are 3 degrees wide; the central meridian of zone k is the region's
    central meridian + 3 * (k - 1) degrees, and zone k eastings carry a k * 1,000,000 m
    prefix on top of the region's false easting.

    Args:
        region:
            The region name (see SK63_REGIONS)

        zone:
            The zone number, starting at 1

        ellipsoid:
            (Default Krasovskiy) The reference ellipsoid
    """

    def __init__(self, region: str, zone: int, ellipsoid: Ellipsoid = KRASOVSKIY):
        if int(zone) != zone or zone < 1:
            raise InvalidParameter(f'Zone must be a positive integer, got {zone}')

        self.region = get_region(region)
        self.zone = int(zone)
        self.projector = GaussKrugerProjector(ellipsoid)

    def __repr__(self):
        return f'<RegionalProjector({self.region.region!r}, zone={self.zone})>'

    @property
    def central_meridian(self) -> float:
        """Central meridian of the zone, in radians"""
        return math.radians(self.region.central_meridian_degrees + 3 * (self.zone - 1))

    @property
    def false_northing(self) -> float:
        return self.region.false_northing

    @property
    def false_easting(self) -> float:
        return self.region.false_easting + 1_000_000 * self.zone

    def geodetic_to_plane(self, point: GeodeticPoint) -> PlanePoint:
        """Projects a geodetic point to regional plane coordinates"""
        northing, easting = self.projector.geodetic_to_plane(point, self.central_meridian)
        return PlanePoint(northing + self.false_northing, easting + self.false_easting)

    def plane_to_geodetic(self, point: PlanePoint) -> GeodeticPoint:
        """Recovers the geodetic point of regional plane coordinates"""
        return self.projector.plane_to_geodetic(
            PlanePoint(point.northing - self.false_northing, point.easting - self.false_easting),
            self.central_meridian,
        )
