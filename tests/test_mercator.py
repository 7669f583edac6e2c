"""
Tests for the Mercator projector.
"""
import math

import pytest

from projectors import MercatorProjector


def test_equator_and_central_meridian(mercator_sphere):
    x, y = mercator_sphere.project(0.0, 0.0)
    assert x == pytest.approx(0.0, abs=1e-6)
    assert y == pytest.approx(0.0, abs=1e-6)
    x, _ = mercator_sphere.project(90.0, 0.0)
    assert x == pytest.approx(6370000.0 * math.pi / 2)


def test_sphere_northing(mercator_sphere):
    _, y = mercator_sphere.project(0.0, 45.0)
    assert y == pytest.approx(6370000.0 * math.log(math.tan(math.pi / 4 + math.radians(22.5))))


@pytest.mark.parametrize("axes", [(6370000.0, 6370000.0), (6378137.0, 6356752.3)])
@pytest.mark.parametrize("longitude, latitude", [
    (0.0, 0.0), (-60.0, 45.0), (120.0, -70.0), (179.0, 85.0), (-179.0, -10.0),
])
def test_round_trip(axes, longitude, latitude):
    mercator = MercatorProjector(*axes, -60.0, 100.0, 200.0)
    x, y = mercator.project(longitude, latitude)
    assert mercator.unproject(x, y) == pytest.approx((longitude, latitude), abs=1e-6)


def test_poles_stay_finite(mercator_sphere):
    x, y = mercator_sphere.project(10.0, 90.0)
    assert math.isfinite(y) and y > 0.0
    _, latitude = mercator_sphere.unproject(x, y)
    assert latitude == pytest.approx(90.0, abs=1e-3)


def test_output_longitude_is_wrapped(mercator_sphere):
    """A raw longitude of 185 degrees is reported as -175."""
    x = math.radians(185.0) * 6370000.0
    longitude, latitude = mercator_sphere.unproject(x, 0.0)
    assert longitude == pytest.approx(-175.0)
    assert latitude == pytest.approx(0.0)


def test_central_latitude_is_equator(mercator_sphere):
    assert mercator_sphere.central_latitude == 0.0
    assert mercator_sphere.name == "Mercator"
