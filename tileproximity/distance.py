"""
Ground distance calculations between geographic points
"""

__all__ = ['angular_difference', 'haversine_distance']

import math

from tileproximity._const import WGS84_A


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance between two points using the Haversine formula.

    The earth is treated as a sphere with the WGS84 equatorial radius; flattening is
    ignored.

    Args:
        lat1, lon1:
            The first point, in radians

        lat2, lon2:
            The second point, in radians

    Returns:
        (float) the distance in meters
    """
    d_lat, d_lon = lat2 - lat1, lon2 - lon1
    var1 = (math.sin(d_lat / 2) ** 2) + math.cos(lat1) * math.cos(lat2) * (
        math.sin(d_lon / 2) ** 2
    )
    # Rounding can push near-antipodal points just past 1
    var1 = min(var1, 1.0)
    return WGS84_A * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def angular_difference(angle1: float, angle2: float) -> float:
    """
    The signed difference angle1 - angle2, normalized to (-pi, pi].

    Args:
        angle1:
            An angle, in radians

        angle2:
            A second angle, in radians

    Returns:
        (float) the difference in radians
    """
    diff = angle1 - angle2
    while diff > math.pi:
        diff -= 2 * math.pi
    while diff <= -math.pi:
        diff += 2 * math.pi
    return diff
