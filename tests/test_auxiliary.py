"""
Unit tests for numerics.auxiliary module.
"""
import math

import numpy as np
import pytest

from common.constants import (
    CONVERGENCE_TOLERANCE,
    MAXIMUM_ITERATIONS,
    REFERENCE_ELLIPSOIDS,
)
from numerics.auxiliary import (
    latitude_sphere,
    latitude_wgs84,
    msfn,
    phi1_iterate,
    phi1_iterate_with_count,
    phi2_iterate,
    phi2_iterate_with_count,
    qsfn,
    ssfn,
    tsfn,
)
from numerics.ellipsoid import Ellipsoid


LATITUDES = np.radians([-89.0, -60.0, -30.0, -1.0, 0.0, 1.0, 30.0, 45.0, 60.0, 89.0])
WGS84_E = Ellipsoid(6378137.0, 6356752.3).eccentricity


def test_msfn_sphere_is_cosine():
    phi = math.radians(35.0)
    assert msfn(math.sin(phi), math.cos(phi), 0.0) == pytest.approx(math.cos(phi))


def test_msfn_is_one_at_equator():
    assert msfn(0.0, 1.0, WGS84_E ** 2) == pytest.approx(1.0)


def test_tsfn_sphere():
    phi = math.radians(40.0)
    assert tsfn(phi, math.sin(phi), 0.0) == pytest.approx(math.tan(math.pi / 4 - phi / 2))


def test_ssfn_sphere():
    phi = math.radians(40.0)
    assert ssfn(phi, math.sin(phi), 0.0) == pytest.approx(math.tan(math.pi / 4 + phi / 2))


def test_qsfn_sphere():
    assert qsfn(0.5, 0.0, 1.0) == 2 * 0.5 == qsfn(0.5, 1e-12, 1.0)


def test_qsfn_ellipsoid_is_odd():
    one_es = 1.0 - WGS84_E ** 2
    assert qsfn(-0.3, WGS84_E, one_es) == pytest.approx(-qsfn(0.3, WGS84_E, one_es))


@pytest.mark.parametrize("call", [
    lambda: msfn(0.5, 0.5, 2.0),
    lambda: msfn(1.5, 0.5, 0.0),
    lambda: tsfn(0.1, 0.1, -0.1),
    lambda: qsfn(0.2, float("nan"), 1.0),
])
def test_preconditions_raise(call):
    with pytest.raises(ValueError):
        call()


@pytest.mark.parametrize(
    "eccentricity",
    sorted({0.0, 0.05, 0.1} | {
        Ellipsoid(r.major_semiaxis, r.minor_semiaxis).eccentricity
        for r in REFERENCE_ELLIPSOIDS.values()
    }),
)
def test_phi2_iterate_converges_within_cap(eccentricity):
    for phi in LATITUDES:
        ts = tsfn(phi, math.sin(phi), eccentricity)
        result, iterations = phi2_iterate_with_count(ts, eccentricity)
        assert not math.isnan(result)
        assert 1 <= iterations < MAXIMUM_ITERATIONS
        assert result == pytest.approx(phi, abs=1e-10)


def test_phi2_iterate_matches_counted_form():
    ts = tsfn(0.7, math.sin(0.7), WGS84_E)
    assert phi2_iterate(ts, WGS84_E) == phi2_iterate_with_count(ts, WGS84_E)[0]


def test_phi2_iterate_is_bounded_for_extreme_eccentricity():
    result, iterations = phi2_iterate_with_count(1e-3, 0.999)
    assert not math.isnan(result)
    assert iterations <= MAXIMUM_ITERATIONS


def test_phi1_iterate_inverts_qsfn():
    one_es = 1.0 - WGS84_E ** 2
    for phi in LATITUDES:
        q = qsfn(math.sin(phi), WGS84_E, one_es)
        result, iterations = phi1_iterate_with_count(q, WGS84_E, one_es)
        assert result == pytest.approx(phi, abs=1e-9)
        assert iterations <= MAXIMUM_ITERATIONS
    assert phi1_iterate(0.0, WGS84_E, one_es) == pytest.approx(0.0, abs=CONVERGENCE_TOLERANCE)


def test_phi1_iterate_sphere_is_closed_form():
    result, iterations = phi1_iterate_with_count(2 * math.sin(0.4), 0.0, 1.0)
    assert iterations == 0
    assert result == pytest.approx(0.4)


def test_latitude_adjustment_round_trip():
    assert latitude_wgs84(0.0) == 0.0
    assert latitude_wgs84(45.0) > 45.0
    assert latitude_sphere(45.0) < 45.0
    for latitude in (-80.0, -12.5, 33.3, 70.0):
        assert latitude_sphere(latitude_wgs84(latitude)) == pytest.approx(latitude, abs=1e-9)
