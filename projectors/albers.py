"""
Albers Equal-Area Conic Projection.

Equal-area: preserves area, so gridded totals (emissions, damage extent)
integrate correctly. Shapes are distorted away from the standard parallels.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual, pp. 98-103.
- USGS PROJ library, PJ_aea.c.
"""

from dataclasses import dataclass

import numpy as np

from common.constants import PI_OVER_2, PROJECTION_TOLERANCE
from numerics.auxiliary import msfn, phi1_iterate, qsfn
from numerics.comparison import radians
from numerics.ellipsoid import Ellipsoid
from projectors.conic import ConicProjector, is_tangent


@dataclass(frozen=True)
class AlbersTerms:
    eccentricity: float
    one_es: float
    n: float
    n2: float
    c: float
    dd: float
    rho0: float
    ec: float
    lambda0: float


class AlbersProjector(ConicProjector):
    """Albers Equal-Area Conic projector.

    Takes the same parameters as :class:`~projectors.lambert.LambertProjector`.
    """

    variant_name = "Albers"

    def _compute_terms(self, ellipsoid: Ellipsoid) -> AlbersTerms:
        e = ellipsoid.eccentricity
        es = e * e
        one_es = 1.0 - es
        phi0 = radians(self._central_latitude)
        phi1 = radians(self._lower_latitude)
        phi2 = radians(self._upper_latitude)
        sine_phi1 = float(np.sin(phi1))
        cosine_phi1 = float(np.cos(phi1))
        tangent = is_tangent(phi1, phi2)
        n = sine_phi1

        if not ellipsoid.is_sphere:
            m1 = msfn(sine_phi1, cosine_phi1, es)
            ml1 = qsfn(sine_phi1, e, one_es)

            if not tangent:
                sine_phi2 = float(np.sin(phi2))
                m2 = msfn(sine_phi2, float(np.cos(phi2)), es)
                ml2 = qsfn(sine_phi2, e, one_es)
                n = (m1 * m1 - m2 * m2) / (ml2 - ml1)

            ec = 1.0 - 0.5 * one_es * np.log((1.0 - e) / (1.0 + e)) / e
            c = m1 * m1 + n * ml1
            dd = 1.0 / n
            rho0 = dd * np.sqrt(c - n * qsfn(float(np.sin(phi0)), e, one_es))
            n2 = 2.0 * n
        else:
            if not tangent:
                n = 0.5 * (sine_phi1 + float(np.sin(phi2)))

            n2 = n + n
            c = cosine_phi1 * cosine_phi1 + n2 * sine_phi1
            dd = 1.0 / n
            rho0 = dd * np.sqrt(c - n2 * np.sin(phi0))
            ec = 0.0

        return AlbersTerms(
            eccentricity=float(e),
            one_es=float(one_es),
            n=float(n),
            n2=float(n2),
            c=float(c),
            dd=float(dd),
            rho0=float(rho0),
            ec=float(ec),
            lambda0=radians(self._central_longitude),
        )

    def _radius(self, phi: float) -> float:
        terms = self._terms
        q = qsfn(float(np.sin(phi)), terms.eccentricity, terms.one_es)
        # Points beyond the cone's reach map onto its apex.
        return float(terms.dd * np.sqrt(max(terms.c - terms.n * q, 0.0)))

    def _latitude_from_radius(self, rho: float) -> float:
        terms = self._terms
        phi = rho / terms.dd

        if not self._ellipsoid.is_sphere:
            phi = (terms.c - phi * phi) / terms.n
            if abs(terms.ec - abs(phi)) > PROJECTION_TOLERANCE:
                return phi1_iterate(phi, terms.eccentricity, terms.one_es)
            return PI_OVER_2 if phi >= 0.0 else -PI_OVER_2

        phi = (terms.c - phi * phi) / terms.n2
        if abs(phi) < 1.0:
            return float(np.arcsin(phi))
        return PI_OVER_2 if phi >= 0.0 else -PI_OVER_2

    @property
    def proj4_string(self) -> str:
        self._require_ready()
        return (
            f"+proj=aea +lat_1={self._lower_latitude!r} +lat_2={self._upper_latitude!r} "
            f"+lat_0={self._central_latitude!r} +lon_0={self._central_longitude!r} "
            + self._proj4_common()
        )
