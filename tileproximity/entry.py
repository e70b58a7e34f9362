"""
Validation of user-supplied sites of interest: a location plus the radius around it
within which tiles are wanted
"""

__all__ = ['SiteOfInterest']

import math
from typing import Iterable, List, Optional

from pydantic import validate_call

from tileproximity.coordinates import CartesianPoint, GeographicPoint
from tileproximity.proximity import tiles_within
from tileproximity.volumes import Tile

DEFAULT_RADIUS = 200.0


class SiteOfInterest:
    """
    A validated location (degrees, meters) and search radius (meters).

    Unlike GeographicPoint, out-of-range coordinates are rejected rather than wrapped.
    The altitude is optional; when absent the site is taken to lie on the ellipsoid.
    """

    @validate_call
    def __init__(
        self,
        latitude: float,
        longitude: float,
        altitude: Optional[float] = None,
        radius: float = DEFAULT_RADIUS,
    ):
        if not -90 <= latitude <= 90:
            raise ValueError(f'latitude must be between -90 and 90, got {latitude}')

        if not -180 <= longitude <= 180:
            raise ValueError(f'longitude must be between -180 and 180, got {longitude}')

        if altitude is not None and not math.isfinite(altitude):
            raise ValueError(f'altitude must be a finite number, got {altitude}')

        if not (math.isfinite(radius) and radius >= 0):
            raise ValueError(f'radius must be a finite, non-negative number, got {radius}')

        self.latitude = latitude
        self.longitude = longitude
        self.altitude = altitude
        self.radius = radius

    def __eq__(self, other):
        if not isinstance(other, SiteOfInterest):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.altitude == other.altitude and
            self.radius == other.radius
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.altitude, self.radius))

    def __repr__(self):
        altitude = '(Not specified)' if self.altitude is None else self.altitude
        return (
            f'<SiteOfInterest lat={self.latitude} lon={self.longitude} '
            f'alt={altitude} radius={self.radius}>'
        )

    @classmethod
    def from_text(
        cls,
        latitude: str,
        longitude: str,
        altitude: str = '',
        radius: str = str(DEFAULT_RADIUS),
    ):
        """
        Creates a SiteOfInterest from free-text fields, as typed into a form.

        A blank altitude means "not specified".

        Args:
            latitude, longitude:
                Decimal degrees

            altitude:
                (Default blank) Meters above the ellipsoid

            radius:
                (Default 200) Meters

        Returns:
            SiteOfInterest
        """
        def parse(name: str, text: str) -> float:
            try:
                return float(text.strip())
            except ValueError:
                raise ValueError(f'invalid {name} value: {text!r}') from None

        return SiteOfInterest(
            parse('latitude', latitude),
            parse('longitude', longitude),
            parse('altitude', altitude) if altitude.strip() else None,
            parse('radius', radius),
        )

    @property
    def point(self) -> GeographicPoint:
        """The site as a GeographicPoint; an unspecified altitude becomes 0"""
        return GeographicPoint(self.latitude, self.longitude, self.altitude or 0.0)

    def to_cartesian(self) -> CartesianPoint:
        return self.point.to_cartesian()

    def tiles_within(self, tiles: Iterable[Tile], key: str = 'boundary') -> List[Tile]:
        """Selects the tiles lying within this site's radius, nearest first"""
        return tiles_within(self.to_cartesian(), tiles, self.radius, key=key)
