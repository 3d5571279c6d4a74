
from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.exceptions import GeodeticError, InvalidParameter, NonConvergence
from geodetics.ellipsoid import Ellipsoid, KRASOVSKIY, PZ90, WGS84
from geodetics.points import CartesianPoint, GeodeticPoint, PlanePoint
from geodetics.meridian import latitude_from_arc, meridian_arc, meridian_distance
from geodetics.gauss_kruger import GaussKrugerProjector
from geodetics.spatial import SpatialConverter
from geodetics.datum import DatumTransformParameters, DatumTransformer, transform_datum
from geodetics.geodesic import DirectResult, GeodesicSolver, InverseResult
from geodetics.regions import RegionalProjector

__all__ = [
    'CartesianPoint',
    'DatumTransformParameters',
    'DatumTransformer',
    'DirectResult',
    'Ellipsoid',
    'GaussKrugerProjector',
    'GeodesicSolver',
    'GeodeticError',
    'GeodeticPoint',
    'InvalidParameter',
    'InverseResult',
    'KRASOVSKIY',
    'LOGGER',
    'NonConvergence',
    'PZ90',
    'PlanePoint',
    'RegionalProjector',
    'SpatialConverter',
    'WGS84',
    'latitude_from_arc',
    'meridian_arc',
    'meridian_distance',
    'transform_datum',
]
