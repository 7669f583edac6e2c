"""
Domain Checks for Ellipsoids and Geodetic Coordinates.

Scalar predicates used by projector preconditions, plus an array check for
the batch helpers.
"""

import numpy as np

from numerics.comparison import is_nan


def is_valid_ellipsoid(major_semiaxis: float, minor_semiaxis: float) -> bool:
    """Is (major, minor) a usable oblate ellipsoid or sphere?

    Both semiaxes must be finite, positive and ``major >= minor``. Their
    squares must stay positive, so vanishingly small axes are refused.
    """
    if is_nan(major_semiaxis) or is_nan(minor_semiaxis):
        return False
    if not (np.isfinite(major_semiaxis) and np.isfinite(minor_semiaxis)):
        return False
    if not (major_semiaxis > 0.0 and minor_semiaxis > 0.0):
        return False
    if major_semiaxis < minor_semiaxis:
        return False
    major_squared = float(major_semiaxis) * float(major_semiaxis)
    minor_squared = float(minor_semiaxis) * float(minor_semiaxis)
    return major_squared > 0.0 and minor_squared > 0.0


def is_valid_longitude(longitude: float) -> bool:
    """Is longitude in [-180, 180] degrees?"""
    return -180.0 <= longitude <= 180.0


def is_valid_latitude(latitude: float) -> bool:
    """Is latitude in [-90, 90] degrees?"""
    return -90.0 <= latitude <= 90.0


def is_valid_longitude_latitude(longitude: float, latitude: float) -> bool:
    return is_valid_longitude(longitude) and is_valid_latitude(latitude)


def valid_longitudes_and_latitudes(longitudes, latitudes) -> bool:
    """Are all (longitude, latitude) pairs valid?

    Parameters
    ----------
    longitudes, latitudes : array_like
        Degrees, same shape.

    Returns
    -------
    bool
        False for empty or mismatched arrays, or if any pair is out of range
        (NaN included).
    """
    lons = np.asarray(longitudes, dtype=np.float64)
    lats = np.asarray(latitudes, dtype=np.float64)

    if lons.size == 0 or lons.shape != lats.shape:
        return False

    # NaN fails both comparisons, so it is rejected here too.
    lons_ok = (lons >= -180.0) & (lons <= 180.0)
    lats_ok = (lats >= -90.0) & (lats <= 90.0)
    return bool(np.all(lons_ok & lats_ok))
