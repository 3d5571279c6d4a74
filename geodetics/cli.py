"""
Command-line demonstration: converts a plane point to geodetic coordinates and back.
"""

import argparse
import logging
import math
import sys

from geodetics._const import ELLIPSOID_PRESETS
from geodetics.ellipsoid import Ellipsoid
from geodetics.exceptions import GeodeticError
from geodetics.gauss_kruger import GaussKrugerProjector
from geodetics.points import PlanePoint
from geodetics.regions import SK63_REGIONS, RegionalProjector
from geodetics.utils.logging import LOGGER

__all__ = ['main']

description = '''
Converts plane coordinates (northing, easting) to geodetic coordinates and back
again, showing the round trip error of the Gauss-Krüger projection.
'''

epilog = '''
Examples:

Run the built-in example (region X, zone 6, Krasovskiy ellipsoid):
geodetics-demo

Convert a point of zone 7 of region X:
geodetics-demo 5500000 7350000 --zone 7

Use an explicit central meridian and false origin on WGS 84:
geodetics-demo 5984000 500000 --ellipsoid wgs84 --central-meridian 39 --false-easting 500000
'''


def get_parser():
    parser = argparse.ArgumentParser(prog='geodetics-demo',
                                     epilog=epilog, description=description,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('northing', help='Northing in meters', type=float, nargs='?',
                        default=5313937.778)
    parser.add_argument('easting', help='Easting in meters', type=float, nargs='?',
                        default=6295607.862)
    parser.add_argument('--ellipsoid', help='Reference ellipsoid, default krasovskiy',
                        choices=sorted(ELLIPSOID_PRESETS), default='krasovskiy')

    regional = parser.add_argument_group('regional system',
                                         'Zone based system with a tabulated false origin. '
                                         'Ignored when --central-meridian is given.')
    regional.add_argument('--region', help='Region name, default X',
                          choices=sorted(SK63_REGIONS), default='X')
    regional.add_argument('--zone', help='Zone number, default 6', type=int, default=6)

    explicit = parser.add_argument_group('explicit projection')
    explicit.add_argument('--central-meridian', help='Central meridian in degrees', type=float)
    explicit.add_argument('--false-northing', help='False northing in meters, default 0',
                          type=float, default=0.)
    explicit.add_argument('--false-easting', help='False easting in meters, default 0',
                          type=float, default=0.)

    parser.add_argument('--precision', help='Decimal places of printed plane coordinates, '
                                            'default 3', type=int, default=3)
    parser.add_argument('--debug', help='Enable debug logging', action='store_true')
    return parser


def _round_trip(args, ellipsoid: Ellipsoid, source: PlanePoint):
    if args.central_meridian is None:
        projector = RegionalProjector(args.region, args.zone, ellipsoid)
        geodetic = projector.plane_to_geodetic(source)
        return geodetic, projector.geodetic_to_plane(geodetic)

    projector = GaussKrugerProjector(ellipsoid)
    central_meridian = math.radians(args.central_meridian)
    offset = PlanePoint(
        source.northing - args.false_northing, source.easting - args.false_easting
    )
    geodetic = projector.plane_to_geodetic(offset, central_meridian)
    northing, easting = projector.geodetic_to_plane(geodetic, central_meridian)
    return geodetic, PlanePoint(northing + args.false_northing, easting + args.false_easting)


def main(argv=None):
    args = get_parser().parse_args(argv)
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)

    ellipsoid = Ellipsoid.from_preset(args.ellipsoid)
    source = PlanePoint(args.northing, args.easting)

    try:
        geodetic, result = _round_trip(args, ellipsoid, source)
    except GeodeticError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1

    p = args.precision
    print(f'Source point:     N {source.northing:.{p}f}  E {source.easting:.{p}f}')
    print(f'Geodetic point:   {geodetic.to_dms_string()}')
    print(f'                  {geodetic.to_decimal_degree_string()}')
    print(f'Round trip point: N {result.northing:.{p}f}  E {result.easting:.{p}f}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
