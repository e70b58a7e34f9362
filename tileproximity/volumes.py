"""
Bounding volumes describing the spatial extent of a tile in a hierarchical tiled
3D dataset
"""

__all__ = ['BoundingVolume', 'Box', 'Region', 'Sphere', 'Tile']

from typing import Sequence, Tuple, Union

import numpy as np

from tileproximity.coordinates import CartesianPoint
from tileproximity.exceptions import UnsupportedGeometry


class Box:
    """
    An oriented box: a center plus three half-axis vectors, all in EPSG:4978 meters.

    Args:
        center:
            The center of the box

        half_axes:
            Three mutually perpendicular 3-vectors, each running from the center to the
            middle of a face. Zero-length axes describe a flattened box.
    """

    def __init__(self, center: CartesianPoint, half_axes: Sequence[Sequence[float]]):
        axes = np.array(half_axes, dtype=float)
        if axes.shape != (3, 3):
            raise ValueError(f'Box requires three 3-dimensional half-axes, got shape {axes.shape}')

        lengths = np.linalg.norm(axes, axis=1)
        gram = axes @ axes.T
        off_diagonal = np.abs(gram - np.diag(np.diag(gram)))
        if np.any(off_diagonal > 1e-9 * np.outer(lengths, lengths)):
            raise ValueError('Box half-axes must be mutually perpendicular')

        axes.flags.writeable = False
        self.center = center
        self.half_axes = axes

    def __eq__(self, other):
        if not isinstance(other, Box):
            return False

        return self.center == other.center and np.array_equal(self.half_axes, other.half_axes)

    def __hash__(self):
        return hash((self.center, self.half_axes.tobytes()))

    def __repr__(self):
        return f'<Box center={self.center!r} half_axes={self.half_axes.tolist()}>'

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """
        Creates a Box from the 12-element array layout used by 3D Tiles:
        [cx, cy, cz, xx, xy, xz, yx, yy, yz, zx, zy, zz]
        """
        if len(values) != 12:
            raise ValueError(f'Box arrays must contain 12 values, got {len(values)}')

        return Box(
            CartesianPoint(*values[:3]),
            [values[3:6], values[6:9], values[9:12]],
        )


class Sphere:
    """A sphere: a center in EPSG:4978 meters and a radius in meters"""

    def __init__(self, center: CartesianPoint, radius: float):
        if radius < 0:
            raise ValueError(f'Sphere radius must not be negative, got {radius}')

        self.center = center
        self.radius = float(radius)

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return False

        return self.center == other.center and self.radius == other.radius

    def __hash__(self):
        return hash((self.center, self.radius))

    def __repr__(self):
        return f'<Sphere center={self.center!r} radius={self.radius}>'

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """Creates a Sphere from a 4-element array [cx, cy, cz, radius]"""
        if len(values) != 4:
            raise ValueError(f'Sphere arrays must contain 4 values, got {len(values)}')

        return Sphere(CartesianPoint(*values[:3]), values[3])


class Region:
    """
    A geographic region bounded by longitudes/latitudes (radians) and heights (meters).

    A west bound greater than the east bound denotes a region that crosses the
    antimeridian.
    """

    def __init__(
        self,
        west: float,
        south: float,
        east: float,
        north: float,
        min_height: float = 0.0,
        max_height: float = 0.0,
    ):
        if south > north:
            raise ValueError(f'Region south bound {south} must not exceed north bound {north}')

        if min_height > max_height:
            raise ValueError(
                f'Region minimum height {min_height} must not exceed maximum height {max_height}'
            )

        self.west = float(west)
        self.south = float(south)
        self.east = float(east)
        self.north = float(north)
        self.min_height = float(min_height)
        self.max_height = float(max_height)

    def __eq__(self, other):
        if not isinstance(other, Region):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f'<Region({", ".join(map(str, self.to_tuple()))})>'

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """
        Creates a Region from the 6-element array layout used by 3D Tiles:
        [west, south, east, north, min_height, max_height]
        """
        if len(values) != 6:
            raise ValueError(f'Region arrays must contain 6 values, got {len(values)}')

        return Region(*values)

    @property
    def wraps(self) -> bool:
        """True if the region crosses the antimeridian"""
        return self.west > self.east

    def to_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (
            self.west, self.south, self.east, self.north, self.min_height, self.max_height
        )


BoundingVolume = Union[Box, Sphere, Region]


class Tile:
    """A node of a tiled dataset, reduced to the one thing proximity needs: its volume"""

    def __init__(self, bounding_volume: BoundingVolume):
        if not isinstance(bounding_volume, (Box, Sphere, Region)):
            raise UnsupportedGeometry(
                f'Tiles require a Box, Sphere or Region bounding volume, '
                f'not {type(bounding_volume).__name__}'
            )

        self.bounding_volume = bounding_volume

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return False

        return self.bounding_volume == other.bounding_volume

    def __hash__(self):
        return hash(self.bounding_volume)

    def __repr__(self):
        return f'<Tile {self.bounding_volume!r}>'
