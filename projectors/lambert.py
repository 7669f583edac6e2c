"""
Lambert Conformal Conic Projection.

Conformal: preserves angles, so wind directions and storm shapes are kept
locally. The usual choice for mid-latitude regional grids (CMAQ, WRF).

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual, pp. 104-110.
- USGS PROJ library, PJ_lcc.c.
"""

from dataclasses import dataclass

import numpy as np

from common.constants import PI_OVER_2, PI_OVER_4, PROJECTION_TOLERANCE
from numerics.auxiliary import msfn, phi2_iterate, tsfn
from numerics.comparison import radians
from numerics.ellipsoid import Ellipsoid
from projectors.conic import ConicProjector, is_tangent


@dataclass(frozen=True)
class LambertTerms:
    eccentricity: float
    n: float
    c: float
    rho0: float
    lambda0: float


class LambertProjector(ConicProjector):
    """Lambert Conformal Conic projector.

    Parameters
    ----------
    major_semiaxis, minor_semiaxis : float
        Ellipsoid semiaxes in meters, e.g. 6370000.0 for the MM5 sphere.
    lower_latitude, upper_latitude : float
        Standard parallels in degrees, e.g. 30.0 and 60.0.
    central_longitude, central_latitude : float
        Degrees; this point projects to the false offsets.
    false_easting, false_northing : float
        Meters.

    Examples
    --------
    >>> lambert = LambertProjector(6370000.0, 6370000.0, 30.0, 60.0, -100.0, 40.0)
    >>> x, y = lambert.project(-78.7268, 35.9611)  # ~(1852180.85, -189978.52)
    """

    variant_name = "Lambert"

    def _compute_terms(self, ellipsoid: Ellipsoid) -> LambertTerms:
        e = ellipsoid.eccentricity
        phi0 = radians(self._central_latitude)
        phi1 = radians(self._lower_latitude)
        phi2 = radians(self._upper_latitude)
        sine_phi1 = float(np.sin(phi1))
        cosine_phi1 = float(np.cos(phi1))
        tangent = is_tangent(phi1, phi2)
        at_pole = abs(abs(phi0) - PI_OVER_2) < PROJECTION_TOLERANCE
        n = sine_phi1

        if not ellipsoid.is_sphere:
            es = e * e
            m1 = msfn(sine_phi1, cosine_phi1, es)
            ml1 = tsfn(phi1, sine_phi1, e)

            if not tangent:
                sine_phi2 = float(np.sin(phi2))
                n = (np.log(m1 / msfn(sine_phi2, float(np.cos(phi2)), es))
                     / np.log(ml1 / tsfn(phi2, sine_phi2, e)))

            c = m1 * np.power(ml1, -n) / n
            rho0 = 0.0 if at_pole else c * np.power(tsfn(phi0, float(np.sin(phi0)), e), n)
        else:
            denominator = np.tan(PI_OVER_4 + 0.5 * phi1)

            if not tangent:
                n = (np.log(cosine_phi1 / np.cos(phi2))
                     / np.log(np.tan(PI_OVER_4 + 0.5 * phi2) / denominator))

            c = cosine_phi1 * np.power(denominator, n) / n
            rho0 = 0.0 if at_pole else c * np.power(np.tan(PI_OVER_4 + 0.5 * phi0), -n)

        return LambertTerms(
            eccentricity=float(e),
            n=float(n),
            c=float(c),
            rho0=float(rho0),
            lambda0=radians(self._central_longitude),
        )

    def _radius(self, phi: float) -> float:
        terms = self._terms
        return float(terms.c * np.power(tsfn(phi, float(np.sin(phi)), terms.eccentricity), terms.n))

    def _latitude_from_radius(self, rho: float) -> float:
        terms = self._terms
        if self._ellipsoid.is_sphere:
            return float(2.0 * np.arctan(np.power(terms.c / rho, 1.0 / terms.n)) - PI_OVER_2)
        return phi2_iterate(float(np.power(rho / terms.c, 1.0 / terms.n)), terms.eccentricity)

    @property
    def proj4_string(self) -> str:
        self._require_ready()
        return (
            f"+proj=lcc +lat_1={self._lower_latitude!r} +lat_2={self._upper_latitude!r} "
            f"+lat_0={self._central_latitude!r} +lon_0={self._central_longitude!r} "
            + self._proj4_common()
        )
