"""
Unit tests for numerics.validation and numerics.ellipsoid modules.
"""
import dataclasses

import numpy as np
import pytest

from common.constants import REFERENCE_ELLIPSOIDS, reference_ellipsoid
from numerics.ellipsoid import Ellipsoid
from numerics.validation import (
    is_valid_ellipsoid,
    is_valid_latitude,
    is_valid_longitude,
    is_valid_longitude_latitude,
    valid_longitudes_and_latitudes,
)


@pytest.mark.parametrize("major, minor, expected", [
    (6378137.0, 6356752.3, True),
    (6370000.0, 6370000.0, True),
    (1.0, 1.0, True),
    (1.0, 2.0, False),
    (0.0, 0.0, False),
    (1.0, 0.0, False),
    (-2.0, -3.0, False),
    (float("inf"), 1.0, False),
    (float("nan"), 1.0, False),
    (1.0, float("nan"), False),
    (1e200, 1e200, True),
    (1e-200, 1e-200, False),
])
def test_is_valid_ellipsoid(major, minor, expected):
    assert is_valid_ellipsoid(major, minor) is expected


def test_every_reference_ellipsoid_is_valid():
    for record in REFERENCE_ELLIPSOIDS.values():
        assert is_valid_ellipsoid(record.major_semiaxis, record.minor_semiaxis), record.name


@pytest.mark.parametrize("longitude, expected", [
    (-180.0, True), (180.0, True), (0.0, True), (180.0001, False), (float("nan"), False),
])
def test_is_valid_longitude(longitude, expected):
    assert is_valid_longitude(longitude) is expected


@pytest.mark.parametrize("latitude, expected", [
    (-90.0, True), (90.0, True), (-90.5, False), (float("nan"), False),
])
def test_is_valid_latitude(latitude, expected):
    assert is_valid_latitude(latitude) is expected


def test_is_valid_longitude_latitude():
    assert is_valid_longitude_latitude(-78.7268, 35.9611)
    assert not is_valid_longitude_latitude(35.9611, -178.7268)


def test_valid_longitudes_and_latitudes():
    lons = np.array([[-100.0, 0.0], [179.0, -180.0]])
    lats = np.array([[40.0, -90.0], [90.0, 0.0]])
    assert valid_longitudes_and_latitudes(lons, lats)


def test_valid_longitudes_and_latitudes_rejects_bad_input():
    assert not valid_longitudes_and_latitudes(np.array([]), np.array([]))
    assert not valid_longitudes_and_latitudes(np.zeros(3), np.zeros(4))
    assert not valid_longitudes_and_latitudes(np.array([0.0, np.nan]), np.zeros(2))
    assert not valid_longitudes_and_latitudes(np.zeros(2), np.array([0.0, 91.0]))


def test_sphere_has_zero_eccentricity():
    sphere = Ellipsoid(6370000.0, 6370000.0)
    assert sphere.is_sphere
    assert sphere.eccentricity == 0.0


def test_wgs84_eccentricity():
    wgs84 = Ellipsoid.from_reference("wgs_1984")
    assert not wgs84.is_sphere
    assert wgs84.eccentricity == pytest.approx(0.0818191908, abs=1e-6)
    assert wgs84.eccentricity_squared == pytest.approx(0.00669438, abs=1e-6)


def test_invalid_ellipsoid_raises():
    with pytest.raises(ValueError, match="Invalid ellipsoid"):
        Ellipsoid(1.0, 2.0)


def test_ellipsoid_is_immutable():
    ellipsoid = Ellipsoid(2.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ellipsoid.major_semiaxis = 3.0


def test_reference_lookup():
    assert reference_ellipsoid(" mm5 ").major_semiaxis == 6370997.0
    assert reference_ellipsoid("MM5").is_sphere
    with pytest.raises(KeyError, match="Unknown reference ellipsoid"):
        reference_ellipsoid("FLAT_EARTH")
