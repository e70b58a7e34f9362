"""
Conversions between geodetic coordinates and the Earth-centered Cartesian frame
(EPSG:4978) on the WGS84 ellipsoid
"""

__all__ = [
    'cartesian_to_geodetic', 'cartesian_to_geodetic_radians', 'geodetic_to_cartesian',
]

import math
from typing import Tuple

from tileproximity._const import (
    CONVERGENCE_TOLERANCE, MAX_ITERATIONS, WGS84_A, WGS84_E2
)
from tileproximity.coordinates import CartesianPoint, GeographicPoint
from tileproximity.exceptions import NonConvergent


def _prime_vertical_radius(latitude: float) -> float:
    """Radius of curvature in the prime vertical at a latitude (radians)"""
    return WGS84_A / math.sqrt(1 - WGS84_E2 * math.sin(latitude) ** 2)


def _height_above_ellipsoid(p: float, z: float, latitude: float) -> Tuple[float, float]:
    """
    Returns the prime vertical radius and the ellipsoidal height for a point at
    distance `p` from the polar axis and height `z` above the equatorial plane.
    """
    n = _prime_vertical_radius(latitude)
    sin_lat, cos_lat = math.sin(latitude), math.cos(latitude)
    if abs(sin_lat) > abs(cos_lat):
        # p / cos(lat) blows up approaching the poles
        return n, z / sin_lat - (1 - WGS84_E2) * n

    return n, p / cos_lat - n


def geodetic_to_cartesian(
    latitude: float,
    longitude: float,
    altitude: float = 0.0
) -> CartesianPoint:
    """
    Converts a latitude/longitude (degrees) and altitude (meters) to ECEF coordinates.

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

        altitude:
            (Default 0) The height above the ellipsoid, in meters

    Returns:
        CartesianPoint
    """
    lat_rad, lon_rad = math.radians(latitude), math.radians(longitude)
    n = _prime_vertical_radius(lat_rad)

    return CartesianPoint(
        (n + altitude) * math.cos(lat_rad) * math.cos(lon_rad),
        (n + altitude) * math.cos(lat_rad) * math.sin(lon_rad),
        ((1 - WGS84_E2) * n + altitude) * math.sin(lat_rad),
    )


def cartesian_to_geodetic_radians(
    point: CartesianPoint,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = CONVERGENCE_TOLERANCE,
) -> Tuple[float, float, float]:
    """
    Converts ECEF coordinates to geodetic latitude, longitude and altitude by fixed-point
    iteration on the latitude.

    Args:
        point:
            The CartesianPoint to convert

        max_iterations:
            (Default 100) The iteration cap; exceeding it raises NonConvergent

        tolerance:
            (Default 1e-12) The latitude change, in radians, below which the iteration
            is considered settled

    Returns:
        (latitude, longitude, altitude) with latitude and longitude in radians
    """
    longitude = math.atan2(point.y, point.x)
    p = math.hypot(point.x, point.y)
    if p == 0 and point.z == 0:
        # The earth's center has no geodetic latitude
        raise NonConvergent(0, point)

    latitude = math.atan2(point.z, p * (1 - WGS84_E2))

    for _ in range(max_iterations):
        n, altitude = _height_above_ellipsoid(p, point.z, latitude)
        previous, latitude = latitude, math.atan2(
            point.z, p * (1 - WGS84_E2 * n / (n + altitude))
        )
        if abs(latitude - previous) < tolerance:
            return latitude, longitude, _height_above_ellipsoid(p, point.z, latitude)[1]

    raise NonConvergent(max_iterations, point)


def cartesian_to_geodetic(point: CartesianPoint, **kwargs) -> GeographicPoint:
    """
    Degree-valued counterpart of cartesian_to_geodetic_radians.

    Keyword Args:
        max_iterations, tolerance: passed to cartesian_to_geodetic_radians

    Returns:
        GeographicPoint
    """
    return GeographicPoint.from_radians(*cartesian_to_geodetic_radians(point, **kwargs))
