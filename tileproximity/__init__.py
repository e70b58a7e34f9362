
import sys

from tileproximity._version import __version__  # noqa: F401
from tileproximity.utils.logging import LOGGER
from tileproximity.exceptions import NonConvergent, TileProximityError, UnsupportedGeometry
from tileproximity.coordinates import CartesianPoint, GeographicPoint
from tileproximity.transform import (
    cartesian_to_geodetic, cartesian_to_geodetic_radians, geodetic_to_cartesian
)
from tileproximity.distance import angular_difference, haversine_distance
from tileproximity.volumes import BoundingVolume, Box, Region, Sphere, Tile
from tileproximity.proximity import (
    distance_to_boundary, distance_to_center, rank_tiles, tiles_within
)
from tileproximity.entry import SiteOfInterest
from tileproximity.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'pyproj': 'tileproximity[proj]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'BoundingVolume',
    'Box',
    'CartesianPoint',
    'GeographicPoint',
    'NonConvergent',
    'Region',
    'SiteOfInterest',
    'Sphere',
    'Tile',
    'TileProximityError',
    'UnsupportedGeometry',
    'angular_difference',
    'cartesian_to_geodetic',
    'cartesian_to_geodetic_radians',
    'distance_to_boundary',
    'distance_to_center',
    'geodetic_to_cartesian',
    'haversine_distance',
    'rank_tiles',
    'tiles_within',
    'LOGGER',
]
