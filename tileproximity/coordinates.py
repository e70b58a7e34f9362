"""
Representations of a point on earth, either geographic (lat/lon/altitude on the WGS84
ellipsoid) or Earth-centered Cartesian (EPSG:4978)
"""

__all__ = ['CartesianPoint', 'GeographicPoint']

import math
from typing import Sequence, Tuple, Union

import numpy as np


class GeographicPoint:
    """
    A geodetic position: latitude and longitude in degrees, altitude in meters above the
    WGS84 ellipsoid.

    Latitudes beyond the poles and longitudes beyond the antimeridian are wrapped back
    into [-90, 90] and (-180, 180] respectively.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        altitude: Union[float, int, str] = 0.0,
        _bounded: bool = True,
    ):
        lat, lon = float(latitude), float(longitude)
        if _bounded:
            if not (math.isfinite(lat) and math.isfinite(lon)):
                raise ValueError(
                    f'Latitude and longitude must be finite, got ({lat}, {lon})'
                )

            if not -90 <= lat <= 90:
                # Crosses one of the poles
                lat = (lat + 90) % 360 - 90
                if lat > 90:
                    lat = 180 - lat
                    lon = lon + 180

            if not -180 < lon <= 180:
                # Crosses the antimeridian
                lon = 180 - (180 - lon) % 360

        self.latitude = lat
        self.longitude = lon
        self.altitude = float(altitude)

    def __eq__(self, other):
        if not isinstance(other, GeographicPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.altitude == other.altitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude))

    def __repr__(self):
        return f'<GeographicPoint({self.latitude}, {self.longitude}, {self.altitude})>'

    @classmethod
    def from_radians(cls, latitude: float, longitude: float, altitude: float = 0.0):
        """Creates a GeographicPoint from a latitude/longitude pair in radians"""
        return GeographicPoint(math.degrees(latitude), math.degrees(longitude), altitude)

    def to_radians(self) -> Tuple[float, float, float]:
        """
        Returns:
            (latitude, longitude, altitude), with latitude and longitude in radians
        """
        return math.radians(self.latitude), math.radians(self.longitude), self.altitude

    def to_cartesian(self) -> 'CartesianPoint':
        """Converts this point to Earth-centered Cartesian (EPSG:4978) coordinates"""
        from tileproximity.transform import geodetic_to_cartesian  # pylint: disable=import-outside-toplevel
        return geodetic_to_cartesian(self.latitude, self.longitude, self.altitude)

    def to_projection(self, crs: str) -> Tuple[float, float]:
        """
        Reproject this point from WGS84 to another coordinate reference system.
        Requires the optional pyproj dependency.

        Args:
            crs:
                A string representing the target EPSG code, e.g. EPSG:3857

        Returns:
            The (x, y) pair in the target projection
        """
        from pyproj import Transformer  # pylint: disable=import-outside-toplevel
        transformer = Transformer.from_crs('EPSG:4326', crs, always_xy=True)
        return transformer.transform(self.longitude, self.latitude)


class CartesianPoint:
    """A position in the Earth-Centered, Earth-Fixed frame (EPSG:4978), in meters"""

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __eq__(self, other):
        if not isinstance(other, CartesianPoint):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<CartesianPoint({self.x}, {self.y}, {self.z})>'

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """Creates a CartesianPoint from any 3-element sequence or numpy array"""
        if len(values) != 3:
            raise ValueError(f'Expected 3 values for a Cartesian point, got {len(values)}')

        return CartesianPoint(*values)

    def to_array(self) -> np.ndarray:
        """Returns the point as a numpy array [x, y, z]"""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_geographic(self) -> GeographicPoint:
        """Converts this point to a geodetic GeographicPoint (degrees)"""
        from tileproximity.transform import cartesian_to_geodetic  # pylint: disable=import-outside-toplevel
        return cartesian_to_geodetic(self)
