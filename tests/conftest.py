"""
Pytest configuration and fixtures.
"""
import pytest

from projectors import (
    AlbersProjector,
    LambertProjector,
    MercatorProjector,
    StereographicProjector,
)


SPHERE = (6370000.0, 6370000.0)
WGS84 = (6378137.0, 6356752.3)


@pytest.fixture
def lambert_sphere():
    """The CMAQ-style Lambert grid over the continental US."""
    return LambertProjector(*SPHERE, 30.0, 60.0, -100.0, 40.0, 0.0, 0.0)


@pytest.fixture
def lambert_wgs84():
    return LambertProjector(*WGS84, 33.0, 45.0, -97.0, 40.0, 500000.0, 250000.0)


@pytest.fixture
def albers_wgs84():
    return AlbersProjector(*WGS84, 29.5, 45.5, -96.0, 23.0, 0.0, 0.0)


@pytest.fixture
def stereographic_north():
    return StereographicProjector(*WGS84, -98.0, 90.0, 60.0, 0.0, 0.0)


@pytest.fixture
def mercator_sphere():
    return MercatorProjector(*SPHERE, 0.0)


def make_all_projectors():
    """One projector of every variant, ellipsoidal and spherical."""
    return [
        LambertProjector(*SPHERE, 30.0, 60.0, -100.0, 40.0, 0.0, 0.0),
        LambertProjector(*WGS84, 33.0, 45.0, -97.0, 40.0, 1000.0, -2000.0),
        AlbersProjector(*SPHERE, 29.5, 45.5, -96.0, 23.0, 0.0, 0.0),
        AlbersProjector(*WGS84, -45.0, -20.0, 130.0, -30.0, 10.0, 20.0),
        StereographicProjector(*SPHERE, -98.0, 90.0, 60.0),
        StereographicProjector(*WGS84, 10.0, 50.0, 50.0, 100.0, 200.0),
        MercatorProjector(*SPHERE, 0.0),
        MercatorProjector(*WGS84, -60.0, 5.0, 5.0),
    ]


@pytest.fixture(params=range(len(make_all_projectors())),
                ids=lambda i: repr(make_all_projectors()[i]))
def any_projector(request):
    """Every variant in turn."""
    return make_all_projectors()[request.param]
