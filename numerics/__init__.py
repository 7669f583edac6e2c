"""
Numeric core for the projection engine.

This package provides:
- NaN-free arithmetic and tolerance-aware comparison
- Domain checks for ellipsoids and geodetic coordinates
- The Ellipsoid value type
- Auxiliary latitude functions and bounded inverse-latitude solvers
"""

from numerics.comparison import (
    is_nan,
    is_finite,
    safe_difference,
    safe_quotient,
    within_tolerance,
    about_equal,
    radians,
    degrees,
)
from numerics.validation import (
    is_valid_ellipsoid,
    is_valid_longitude,
    is_valid_latitude,
    is_valid_longitude_latitude,
    valid_longitudes_and_latitudes,
)
from numerics.ellipsoid import Ellipsoid
from numerics.auxiliary import (
    msfn,
    tsfn,
    qsfn,
    ssfn,
    phi1_iterate,
    phi1_iterate_with_count,
    phi2_iterate,
    phi2_iterate_with_count,
    latitude_wgs84,
    latitude_sphere,
)

__all__ = [
    "is_nan",
    "is_finite",
    "safe_difference",
    "safe_quotient",
    "within_tolerance",
    "about_equal",
    "radians",
    "degrees",
    "is_valid_ellipsoid",
    "is_valid_longitude",
    "is_valid_latitude",
    "is_valid_longitude_latitude",
    "valid_longitudes_and_latitudes",
    "Ellipsoid",
    "msfn",
    "tsfn",
    "qsfn",
    "ssfn",
    "phi1_iterate",
    "phi1_iterate_with_count",
    "phi2_iterate",
    "phi2_iterate_with_count",
    "latitude_wgs84",
    "latitude_sphere",
]
