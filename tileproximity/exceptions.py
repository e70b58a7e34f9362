"""
Exceptions raised by tileproximity
"""

__all__ = ['NonConvergent', 'TileProximityError', 'UnsupportedGeometry']

from typing import Any, Optional


class TileProximityError(Exception):
    """Base class for all tileproximity errors"""


class UnsupportedGeometry(TileProximityError, NotImplementedError):
    """
    Raised when a bounding volume is not one of Box, Sphere or Region, or when the
    requested operation is not implemented for the given volume type.
    """


class NonConvergent(TileProximityError, ArithmeticError):
    """
    Raised when the iterative ECEF -> geodetic inversion fails to settle within its
    iteration cap.

    Args:
        iterations:
            The number of iterations performed before giving up

        point:
            The Cartesian point being inverted, if available
    """

    def __init__(self, iterations: int, point: Optional[Any] = None):
        self.iterations = iterations
        self.point = point
        super().__init__(
            f'Geodetic latitude did not converge after {iterations} iterations'
            + (f' for {point!r}' if point is not None else '')
        )
