"""
Distances from a point to the bounding volumes of tiles, and helpers for ranking and
filtering tiles by those distances
"""

__all__ = ['distance_to_boundary', 'distance_to_center', 'rank_tiles', 'tiles_within']

import math
from typing import Iterable, List, Tuple

from tileproximity._geometry import box_closest_point, box_contains
from tileproximity.coordinates import CartesianPoint
from tileproximity.distance import angular_difference, haversine_distance
from tileproximity.exceptions import UnsupportedGeometry
from tileproximity.transform import cartesian_to_geodetic_radians
from tileproximity.utils.logging import warn_once
from tileproximity.volumes import BoundingVolume, Box, Region, Sphere, Tile


def _ground_distance(point1: CartesianPoint, point2: CartesianPoint) -> float:
    lat1, lon1, _ = cartesian_to_geodetic_radians(point1)
    lat2, lon2, _ = cartesian_to_geodetic_radians(point2)
    return haversine_distance(lat1, lon1, lat2, lon2)


def distance_to_center(point: CartesianPoint, volume: BoundingVolume) -> float:
    """
    Calculates the ground distance from a point to the center of a bounding volume.

    The center of a Region is the plain midpoint of its bounds, which lands on the
    wrong side of the globe for regions crossing the antimeridian.

    Args:
        point:
            The CartesianPoint to measure from

        volume:
            A Box, Sphere or Region

    Returns:
        (float) the distance in meters
    """
    if isinstance(volume, (Box, Sphere)):
        return _ground_distance(volume.center, point)

    if isinstance(volume, Region):
        if volume.wraps:
            warn_once(
                'Region centers are not corrected for antimeridian wraparound; '
                'distances to wrapping regions are measured from the numeric midpoint. '
                '(this warning will not repeat)'
            )
        lat1 = (volume.south + volume.north) / 2.0
        lon1 = (volume.west + volume.east) / 2.0
        lat2, lon2, _ = cartesian_to_geodetic_radians(point)
        return haversine_distance(lat1, lon1, lat2, lon2)

    raise UnsupportedGeometry(
        f'Bounding volume type {type(volume).__name__} not supported.'
    )


def _distance_to_region(point: CartesianPoint, region: Region) -> float:
    lat1, lon1, _ = cartesian_to_geodetic_radians(point)

    # (lat2, lon2) is the closest point of the region
    lat2 = min(max(lat1, region.south), region.north)

    if region.wraps:
        inside_lon = lon1 >= region.west or lon1 <= region.east
    else:
        inside_lon = region.west <= lon1 <= region.east

    if inside_lon:
        lon2 = lon1
    else:
        east_diff = angular_difference(region.east, lon1)
        west_diff = angular_difference(region.west, lon1)
        lon2 = region.east if abs(east_diff) < abs(west_diff) else region.west

    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    return haversine_distance(lat1, lon1, lat2, lon2)


def distance_to_boundary(point: CartesianPoint, tile: Tile) -> float:
    """
    Calculates the ground distance from a point to the nearest edge of a tile's bounding
    volume. Points inside the volume have a distance of 0.

    Only Box and Region volumes are supported.

    Args:
        point:
            The CartesianPoint to measure from

        tile:
            The Tile

    Returns:
        (float) the distance in meters
    """
    volume = tile.bounding_volume
    if isinstance(volume, Box):
        if box_contains(volume, point):
            return 0.0
        return _ground_distance(point, box_closest_point(volume, point))

    if isinstance(volume, Region):
        return _distance_to_region(point, volume)

    if isinstance(volume, Sphere):
        raise UnsupportedGeometry('Sphere bounding volumes are not supported yet.')

    raise UnsupportedGeometry(
        f'Bounding volume type {type(volume).__name__} not supported.'
    )


_DISTANCE_KEYS = {
    'boundary': distance_to_boundary,
    'center': lambda point, tile: distance_to_center(point, tile.bounding_volume),
}


def rank_tiles(
    point: CartesianPoint,
    tiles: Iterable[Tile],
    key: str = 'boundary',
) -> List[Tuple[float, Tile]]:
    """
    Orders tiles by their distance from a point, nearest first.

    Args:
        point:
            The CartesianPoint to measure from

        tiles:
            The tiles to rank

        key:
            (Default 'boundary') Either 'boundary', to measure to the nearest edge of each
            tile, or 'center', to measure to the center of each tile's volume

    Returns:
        List of (distance in meters, Tile) pairs
    """
    if key not in _DISTANCE_KEYS:
        raise ValueError(f"Distance key must be one of {sorted(_DISTANCE_KEYS)}, not {key!r}")

    measure = _DISTANCE_KEYS[key]
    ranked = [(measure(point, tile), tile) for tile in tiles]
    ranked.sort(key=lambda x: x[0])
    return ranked


def tiles_within(
    point: CartesianPoint,
    tiles: Iterable[Tile],
    radius: float,
    key: str = 'boundary',
) -> List[Tile]:
    """
    Selects the tiles lying within a radius of a point, nearest first.

    Args:
        point:
            The CartesianPoint to measure from

        tiles:
            The candidate tiles

        radius:
            The maximum distance, in meters

        key:
            (Default 'boundary') See rank_tiles()

    Returns:
        List of Tiles
    """
    if radius < 0 or math.isnan(radius):
        raise ValueError(f'Radius must be a non-negative number, got {radius}')

    return [
        tile for distance, tile in rank_tiles(point, tiles, key=key)
        if distance <= radius
    ]
