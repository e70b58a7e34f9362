"""
Internal module defining the oriented-box geometry used by tileproximity
"""

__all__ = ['box_closest_point', 'box_contains', 'box_local_coordinates']

import numpy as np

from tileproximity.coordinates import CartesianPoint
from tileproximity.volumes import Box


def box_local_coordinates(box: Box, point: CartesianPoint) -> np.ndarray:
    """
    Expresses a point in the box's own frame, scaled so that each face of the box lies at
    -1 or +1 along its axis.

    Args:
        box:
            The oriented Box

        point:
            A CartesianPoint

    Returns:
        numpy array [u, v, w]; a degenerate (zero-length) axis yields 0 on that axis
    """
    offset = point.to_array() - box.center.to_array()
    sq_lengths = np.einsum('ij,ij->i', box.half_axes, box.half_axes)
    projections = box.half_axes @ offset
    return np.divide(
        projections, sq_lengths,
        out=np.zeros(3), where=sq_lengths > 0
    )


def box_contains(box: Box, point: CartesianPoint) -> bool:
    """Test whether a point lies inside or on the surface of an oriented box"""
    local = box_local_coordinates(box, point)
    if not np.all(np.abs(local) <= 1.0):
        return False

    if np.all(box.half_axes.any(axis=1)):
        return True

    # Flattened box; the point must also lie in the plane/line the axes span
    residual = point.to_array() - (box.center.to_array() + local @ box.half_axes)
    return bool(np.allclose(residual, 0.0, atol=1e-6))


def box_closest_point(box: Box, point: CartesianPoint) -> CartesianPoint:
    """
    Finds the point of the box nearest to `point` by clamping its local coordinates to
    the half-extents. Points inside the box are returned unchanged.

    Args:
        box:
            The oriented Box

        point:
            A CartesianPoint

    Returns:
        CartesianPoint
    """
    clamped = np.clip(box_local_coordinates(box, point), -1.0, 1.0)
    return CartesianPoint.from_array(box.center.to_array() + clamped @ box.half_axes)
