"""
Auxiliary Latitude Functions.

Scalar building blocks shared by the projectors: the scale/isometric
functions ``msfn``, ``tsfn``, ``qsfn`` and ``ssfn``, and the two bounded
inverse-latitude solvers.

Scientific Context
------------------
Conformal projections (Lambert, Stereographic, Mercator) work on the
conformal latitude, reached through ``tsfn``/``ssfn`` and inverted with
``phi2_iterate``. The equal-area Albers projection works on the authalic
latitude, reached through ``qsfn`` and inverted with ``phi1_iterate``.

Both solvers are best effort: when ``MAXIMUM_ITERATIONS`` is exhausted the
last estimate is returned and a DEBUG record is logged. Callers always
receive an answer.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. Eq. 3-1, 7-9,
  14-15, 15-9.
- USGS PROJ library, pj_msfn.c, pj_tsfn.c, pj_qsfn.c, pj_phi2.c.
"""

from typing import Tuple

import numpy as np

from common.constants import (
    PI_OVER_2,
    PROJECTION_TOLERANCE,
    CONVERGENCE_TOLERANCE,
    MAXIMUM_ITERATIONS,
)
from common.logging_config import get_logger
from numerics.comparison import degrees, is_nan, radians


logger = get_logger(__name__)

# Squared axis ratios of WGS84, used to move between geocentric
# (sphere) and geodetic (WGS84) latitudes.
WGS84_AXIS_RATIO_SQUARED_INVERSE = 1.006739496756587
WGS84_AXIS_RATIO_SQUARED = 0.9933056199957391


def _require_eccentricity(e: float, name: str = "eccentricity") -> None:
    if is_nan(e) or not 0.0 <= e <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {e}")


def _require_unit(value: float, name: str) -> None:
    if is_nan(value) or not -1.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [-1, 1], got {value}")


def _conformal_factor(sine_phi: float, e: float) -> float:
    """((1 - e sinφ) / (1 + e sinφ)) ^ (e/2)."""
    con = e * sine_phi
    denominator = 1.0 + con
    if denominator == 0.0:
        raise ValueError("Conformal factor undefined for e * sin(phi) == -1")
    return float(np.power((1.0 - con) / denominator, 0.5 * e))


def msfn(sine_phi: float, cosine_phi: float, es: float) -> float:
    """Parallel radius ratio m = cosφ / sqrt(1 - e² sin²φ).

    Parameters
    ----------
    sine_phi, cosine_phi : float
        Sine and cosine of the same latitude.
    es : float
        Eccentricity squared, in [0, 1].
    """
    _require_unit(sine_phi, "sine_phi")
    _require_unit(cosine_phi, "cosine_phi")
    _require_eccentricity(es, "eccentricity squared")
    denominator = 1.0 - es * sine_phi * sine_phi
    if denominator <= 0.0:
        raise ValueError("msfn undefined for e² sin²(phi) >= 1")
    return float(cosine_phi / np.sqrt(denominator))


def tsfn(phi: float, sine_phi: float, e: float) -> float:
    """Isometric term t = tan((π/2 - φ)/2) / ((1 - e sinφ)/(1 + e sinφ))^(e/2).

    With ``e == 0`` this is the spherical ``tan(π/4 - φ/2)``.
    """
    _require_unit(sine_phi, "sine_phi")
    _require_eccentricity(e)
    factor = _conformal_factor(sine_phi, e)
    if factor == 0.0:
        raise ValueError("tsfn undefined for e * sin(phi) == 1")
    return float(np.tan(0.5 * (PI_OVER_2 - phi)) / factor)


def ssfn(phi: float, sine_phi: float, e: float) -> float:
    """Stereographic conformal term tan((π/2 + φ)/2) · ((1 - e sinφ)/(1 + e sinφ))^(e/2)."""
    _require_unit(sine_phi, "sine_phi")
    _require_eccentricity(e)
    return float(np.tan(0.5 * (PI_OVER_2 + phi)) * _conformal_factor(sine_phi, e))


def qsfn(sine_phi: float, e: float, one_es: float) -> float:
    """Authalic term q.

    Parameters
    ----------
    sine_phi : float
        Sine of the latitude.
    e : float
        Eccentricity.
    one_es : float
        ``1 - e²``.

    Returns
    -------
    float
        ``2 sinφ`` for a sphere, otherwise
        ``(1 - e²)(sinφ/(1 - e² sin²φ) - 1/(2e) ln((1 - e sinφ)/(1 + e sinφ)))``.
    """
    _require_unit(sine_phi, "sine_phi")
    _require_eccentricity(e)

    if e < PROJECTION_TOLERANCE:
        return 2.0 * sine_phi

    con = e * sine_phi
    if con * con >= 1.0:
        raise ValueError("qsfn undefined for |e * sin(phi)| >= 1")
    return float(
        one_es * (sine_phi / (1.0 - con * con)
                  - (0.5 / e) * np.log((1.0 - con) / (1.0 + con)))
    )


def phi1_iterate_with_count(phi: float, e: float, one_es: float) -> Tuple[float, int]:
    """Invert ``qsfn``: geodetic latitude (radians) from authalic term q.

    Returns
    -------
    tuple
        (latitude, iterations used). Iterations is 0 for a sphere.
    """
    _require_eccentricity(e)
    result = float(np.arcsin(np.clip(0.5 * phi, -1.0, 1.0)))
    iterations = 0

    if e > PROJECTION_TOLERANCE:
        while True:
            sine_phi = np.sin(result)
            cosine_phi = np.cos(result)
            con = e * sine_phi
            com = 1.0 - con * con
            delta = (0.5 * com * com / cosine_phi
                     * (phi / one_es - sine_phi / com
                        + (0.5 / e) * np.log((1.0 - con) / (1.0 + con))))
            result = float(result + delta)
            iterations += 1

            if abs(delta) < CONVERGENCE_TOLERANCE:
                break
            if iterations >= MAXIMUM_ITERATIONS:
                logger.debug(
                    f"phi1_iterate: no convergence after {iterations} iterations "
                    f"(q={phi}, e={e}, last step={delta:.3e}); using last estimate"
                )
                break

    return result, iterations


def phi1_iterate(phi: float, e: float, one_es: float) -> float:
    return phi1_iterate_with_count(phi, e, one_es)[0]


def phi2_iterate_with_count(ts: float, e: float) -> Tuple[float, int]:
    """Invert ``tsfn``: geodetic latitude (radians) from isometric term t.

    Returns
    -------
    tuple
        (latitude, iterations used), with iterations in
        ``[1, MAXIMUM_ITERATIONS]``.
    """
    _require_eccentricity(e)
    half_e = 0.5 * e
    result = float(PI_OVER_2 - 2.0 * np.arctan(ts))
    iterations = 0

    while True:
        con = e * np.sin(result)
        delta = (PI_OVER_2
                 - 2.0 * np.arctan(ts * np.power((1.0 - con) / (1.0 + con), half_e))
                 - result)
        result = float(result + delta)
        iterations += 1

        if abs(delta) < CONVERGENCE_TOLERANCE:
            break
        if iterations >= MAXIMUM_ITERATIONS:
            logger.debug(
                f"phi2_iterate: no convergence after {iterations} iterations "
                f"(ts={ts}, e={e}, last step={delta:.3e}); using last estimate"
            )
            break

    return result, iterations


def phi2_iterate(ts: float, e: float) -> float:
    return phi2_iterate_with_count(ts, e)[0]


def latitude_wgs84(latitude_sphere: float) -> float:
    """Geodetic WGS84 latitude (degrees) of a spherical (geocentric) latitude."""
    return degrees(np.arctan(np.tan(radians(latitude_sphere))
                             * WGS84_AXIS_RATIO_SQUARED_INVERSE))


def latitude_sphere(latitude_wgs84: float) -> float:
    """Spherical (geocentric) latitude (degrees) of a geodetic WGS84 latitude."""
    return degrees(np.arctan(np.tan(radians(latitude_wgs84))
                             * WGS84_AXIS_RATIO_SQUARED))
