import math

import numpy as np
import pytest
from pytest import approx

from tileproximity import CartesianPoint, GeographicPoint
from tileproximity._const import WGS84_A

from tests.functions import assert_geographic_points_equal


def test_geographic_point_init():
    p = GeographicPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.
    assert p.altitude == 0.

    p = GeographicPoint('1.0', '0.0', '12.5')
    assert (p.latitude, p.longitude, p.altitude) == (1., 0., 12.5)

    # Test longitude adjustment
    assert GeographicPoint(0, 181.) == GeographicPoint(0, -179.)
    assert GeographicPoint(0, 361.) == GeographicPoint(0., 1.)
    assert GeographicPoint(0, -181) == GeographicPoint(0, 179)
    assert GeographicPoint(0, 540) == GeographicPoint(0, 180)

    # Longitudes are bounded to (-180, 180]
    assert GeographicPoint(0, -180.).longitude == 180.
    assert GeographicPoint(0, 180.).longitude == 180.

    # Test latitude adjustment
    assert GeographicPoint(91, 1) == GeographicPoint(89, -179)
    assert GeographicPoint(271, 1) == GeographicPoint(-89, 1)
    assert GeographicPoint(-91, 1) == GeographicPoint(-89, -179)

    # Test unbounded points don't auto-adjust
    p = GeographicPoint(180, 360, _bounded=False)
    assert (p.latitude, p.longitude) == (180., 360.)


@pytest.mark.parametrize('lat, lon', [
    (float('nan'), 0.),
    (0., float('nan')),
    (float('inf'), 0.),
    (0., float('-inf')),
])
def test_geographic_point_init_non_finite(lat, lon):
    with pytest.raises(ValueError):
        GeographicPoint(lat, lon)


def test_geographic_point_from_radians_non_finite():
    with pytest.raises(ValueError):
        GeographicPoint.from_radians(float('nan'), 0.)


def test_geographic_point_init_large_values():
    p = GeographicPoint(1e20, 1e20)
    assert -90 <= p.latitude <= 90
    assert -180 < p.longitude <= 180

    p = GeographicPoint(-1e20, -1e20)
    assert -90 <= p.latitude <= 90
    assert -180 < p.longitude <= 180

    # Many turns around the globe land in the same place as one
    assert GeographicPoint(0., 360. * 1000 + 10.) == GeographicPoint(0., 10.)
    assert GeographicPoint(360. * 1000 + 10., 0.) == GeographicPoint(10., 0.)


def test_geographic_point_eq_hash():
    points = [
        GeographicPoint(0., 0.),
        GeographicPoint(0., 0., 0.),
        GeographicPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeographicPoint(0., 0.) != GeographicPoint(0., 0., 1.)
    assert GeographicPoint(0., 0.) != (0., 0.)


def test_geographic_point_repr():
    assert repr(GeographicPoint(1., 2.)) == '<GeographicPoint(1.0, 2.0, 0.0)>'


def test_geographic_point_radians():
    lat, lon, alt = GeographicPoint(90., 180., 5.).to_radians()
    assert lat == approx(math.pi / 2)
    assert lon == approx(math.pi)
    assert alt == 5.

    assert_geographic_points_equal(
        GeographicPoint.from_radians(math.pi / 4, -math.pi / 2, 10.),
        GeographicPoint(45., -90., 10.)
    )


def test_geographic_point_to_cartesian():
    assert GeographicPoint(0., 0.).to_cartesian() == CartesianPoint(WGS84_A, 0., 0.)


def test_geographic_point_to_projection():
    x, y = GeographicPoint(0.026949, 0.017966).to_projection('EPSG:3857')
    assert x == approx(1999.965972, abs=1e-5)
    assert y == approx(2999.949068, abs=1e-5)


def test_cartesian_point():
    p = CartesianPoint(1, 2, 3)
    assert (p.x, p.y, p.z) == (1., 2., 3.)
    assert repr(p) == '<CartesianPoint(1.0, 2.0, 3.0)>'
    assert p == CartesianPoint(1., 2., 3.)
    assert p != CartesianPoint(1., 2., 4.)
    assert p != (1., 2., 3.)
    assert len({p, CartesianPoint(1., 2., 3.)}) == 1


def test_cartesian_point_arrays():
    p = CartesianPoint.from_array(np.array([1., 2., 3.]))
    assert p == CartesianPoint(1., 2., 3.)
    assert np.array_equal(p.to_array(), np.array([1., 2., 3.]))

    with pytest.raises(ValueError):
        CartesianPoint.from_array([1., 2.])


def test_cartesian_point_to_geographic():
    assert_geographic_points_equal(
        CartesianPoint(WGS84_A, 0., 0.).to_geographic(),
        GeographicPoint(0., 0.)
    )
    assert_geographic_points_equal(
        GeographicPoint(-33.5, 151.25, 40.).to_cartesian().to_geographic(),
        GeographicPoint(-33.5, 151.25, 40.)
    )
