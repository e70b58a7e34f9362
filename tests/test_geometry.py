import numpy as np

from tileproximity import Box, CartesianPoint
from tileproximity._geometry import box_closest_point, box_contains, box_local_coordinates

ORIGIN = CartesianPoint(0., 0., 0.)


def test_box_local_coordinates():
    box = Box(ORIGIN, np.diag([1., 2., 3.]))
    assert np.array_equal(
        box_local_coordinates(box, CartesianPoint(2., 1., -3.)),
        np.array([2., 0.5, -1.])
    )

    # Offset center
    box = Box(CartesianPoint(10., 10., 10.), np.diag([1., 2., 3.]))
    assert np.array_equal(
        box_local_coordinates(box, CartesianPoint(10., 12., 10.)),
        np.array([0., 1., 0.])
    )


def test_box_contains():
    box = Box(ORIGIN, np.diag([1., 2., 3.]))
    assert box_contains(box, ORIGIN)
    assert box_contains(box, CartesianPoint(0.5, -1.5, 2.5))
    assert box_contains(box, CartesianPoint(1., 2., 3.))  # corner
    assert not box_contains(box, CartesianPoint(1.1, 0., 0.))
    assert not box_contains(box, CartesianPoint(0., 0., -3.1))

    # Box rotated 45 degrees about the z axis
    box = Box(ORIGIN, [[1., 1., 0.], [-1., 1., 0.], [0., 0., 1.]])
    assert box_contains(box, CartesianPoint(1., 0., 0.))
    assert box_contains(box, CartesianPoint(1.5, 0.4, 0.))
    assert not box_contains(box, CartesianPoint(1.5, -0.6, 0.))
    assert not box_contains(box, CartesianPoint(3., 0., 0.))


def test_box_contains_flat():
    box = Box(ORIGIN, [[1., 0., 0.], [0., 1., 0.], [0., 0., 0.]])
    assert box_contains(box, CartesianPoint(0.5, 0.5, 0.))
    assert not box_contains(box, CartesianPoint(0.5, 0.5, 0.1))
    assert not box_contains(box, CartesianPoint(1.5, 0.5, 0.))


def test_box_closest_point():
    box = Box(ORIGIN, np.diag([1., 2., 3.]))
    assert box_closest_point(box, CartesianPoint(2., 1., -3.)) == CartesianPoint(1., 1., -3.)
    assert box_closest_point(box, CartesianPoint(5., 5., 5.)) == CartesianPoint(1., 2., 3.)

    # Points inside are their own closest point
    assert box_closest_point(box, CartesianPoint(0.5, 0.5, 1.5)) == CartesianPoint(0.5, 0.5, 1.5)

    box = Box(ORIGIN, [[1., 1., 0.], [-1., 1., 0.], [0., 0., 1.]])
    assert box_closest_point(box, CartesianPoint(3., 0., 0.)) == CartesianPoint(2., 0., 0.)

    box = Box(ORIGIN, [[1., 0., 0.], [0., 1., 0.], [0., 0., 0.]])
    assert box_closest_point(box, CartesianPoint(0.5, 0.5, 0.1)) == CartesianPoint(0.5, 0.5, 0.)
