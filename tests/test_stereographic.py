"""
Tests for the Stereographic projector.
"""
import pytest

from projectors import Aspect, StereographicProjector


SPHERE = (6370000.0, 6370000.0)
WGS84 = (6378137.0, 6356752.3)


@pytest.mark.parametrize("central_latitude, aspect", [
    (90.0, Aspect.NORTH_POLE),
    (-90.0, Aspect.SOUTH_POLE),
    (0.0, Aspect.EQUATORIAL),
    (45.0, Aspect.OBLIQUE),
    (-30.0, Aspect.OBLIQUE),
])
def test_aspect(central_latitude, aspect):
    stereographic = StereographicProjector(*WGS84, 0.0, central_latitude, 60.0)
    assert stereographic.aspect is aspect
    assert stereographic.aspect.is_polar == (abs(central_latitude) == 90.0)


CASES = [
    # central_longitude, central_latitude, secant_latitude, points
    (-98.0, 90.0, 60.0, [(-98.0, 60.0), (-150.0, 45.0), (10.0, 80.0), (170.0, 20.0)]),
    (-98.0, 90.0, 90.0, [(-98.0, 60.0), (0.0, 75.0)]),
    (0.0, -90.0, -71.0, [(0.0, -60.0), (-120.0, -80.0), (100.0, -30.0)]),
    (0.0, -90.0, -90.0, [(45.0, -70.0)]),
    (10.0, 50.0, 50.0, [(10.0, 50.0), (0.0, 40.0), (30.0, 65.0), (-20.0, 30.0)]),
    (-60.0, 0.0, 0.0, [(-60.0, 0.0), (-30.0, 20.0), (-90.0, -40.0)]),
    (140.0, -35.0, 0.0, [(140.0, -35.0), (150.0, -20.0), (120.0, -50.0)]),
]


@pytest.mark.parametrize("axes", [SPHERE, WGS84], ids=["sphere", "wgs84"])
@pytest.mark.parametrize("central_longitude, central_latitude, secant_latitude, points", CASES)
def test_round_trip(axes, central_longitude, central_latitude, secant_latitude, points):
    stereographic = StereographicProjector(
        *axes, central_longitude, central_latitude, secant_latitude, 1000.0, -1000.0
    )
    for longitude, latitude in points:
        x, y = stereographic.project(longitude, latitude)
        assert stereographic.unproject(x, y) == pytest.approx((longitude, latitude), abs=1e-6)


@pytest.mark.parametrize("axes", [SPHERE, WGS84], ids=["sphere", "wgs84"])
@pytest.mark.parametrize("central_latitude", [90.0, -90.0, 0.0, 50.0, -35.0])
def test_center_projects_to_false_offsets(axes, central_latitude):
    stereographic = StereographicProjector(*axes, 25.0, central_latitude, 60.0, 5000.0, 7000.0)
    x, y = stereographic.project(25.0, central_latitude)
    assert x == pytest.approx(5000.0, abs=1e-2)
    assert y == pytest.approx(7000.0, abs=1e-2)


@pytest.mark.parametrize("axes", [SPHERE, WGS84], ids=["sphere", "wgs84"])
def test_false_offsets_unproject_to_center(axes):
    stereographic = StereographicProjector(*axes, 25.0, 50.0, 60.0, 5000.0, 7000.0)
    assert stereographic.unproject(5000.0, 7000.0) == pytest.approx((25.0, 50.0), abs=1e-9)


def test_north_polar_grid_orientation(stereographic_north):
    # Points on the central meridian lie straight below the pole.
    x, y = stereographic_north.project(-98.0, 60.0)
    assert x == pytest.approx(0.0, abs=1e-6)
    assert y < 0.0
    # East of the central meridian is +x.
    x, _ = stereographic_north.project(-8.0, 60.0)
    assert x > 0.0


def test_polar_distance_increases_away_from_pole(stereographic_north):
    distances = [abs(stereographic_north.project(-98.0, latitude)[1])
                 for latitude in (85.0, 70.0, 50.0, 30.0)]
    assert distances == sorted(distances)


def test_pole_unprojects_to_pole(stereographic_north):
    longitude, latitude = stereographic_north.unproject(0.0, 0.0)
    assert latitude == pytest.approx(90.0)
    assert longitude == pytest.approx(-98.0)


def test_constructor_validation():
    with pytest.raises(ValueError) as excinfo:
        StereographicProjector(*WGS84, 0.0, 91.0, -95.0)
    message = str(excinfo.value)
    assert "central_latitude" in message
    assert "secant_latitude" in message


def test_accessors(stereographic_north):
    assert stereographic_north.name == "Stereographic"
    assert stereographic_north.secant_latitude == 60.0
    assert stereographic_north.central_latitude == 90.0
    assert "+proj=stere +lat_0=90.0 +lat_ts=60.0" in stereographic_north.proj4_string


@pytest.mark.parametrize("axes", [SPHERE, WGS84], ids=["sphere", "wgs84"])
def test_antipode_of_center_projects_to_false_offsets(axes):
    stereographic = StereographicProjector(*axes, 0.0, 0.0, 0.0, 300.0, 400.0)
    x, y = stereographic.project(180.0, 0.0)
    assert (x, y) == (300.0, 400.0)
    x, y = stereographic.project(-180.0, 0.0)
    assert (x, y) == (300.0, 400.0)
