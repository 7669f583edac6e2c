"""
Mercator Projection.

Normal-aspect conformal cylindrical projection, true scale at the equator.
Used for tropical model grids and for display.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual, pp. 38-47.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from common.constants import PI_OVER_2, PI_OVER_4, TOLERANCE
from numerics.auxiliary import phi2_iterate, tsfn
from numerics.comparison import radians
from numerics.ellipsoid import Ellipsoid
from projectors.base import (
    Projector,
    common_parameter_errors,
    normalize_longitude_delta,
    raise_if_invalid,
)


@dataclass(frozen=True)
class MercatorTerms:
    eccentricity: float
    lambda0: float


class MercatorProjector(Projector):
    """Mercator projector.

    The central latitude is always 0 (the equator).

    Parameters
    ----------
    major_semiaxis, minor_semiaxis : float
        Ellipsoid semiaxes in meters.
    central_longitude : float
        Degrees; projects to ``false_easting``.
    false_easting, false_northing : float
        Meters.
    """

    variant_name = "Mercator"

    def __init__(
        self,
        major_semiaxis: float,
        minor_semiaxis: float,
        central_longitude: float,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
    ):
        raise_if_invalid(
            self.variant_name,
            common_parameter_errors(
                major_semiaxis, minor_semiaxis, central_longitude, false_easting, false_northing
            ),
        )
        super().__init__(
            major_semiaxis, minor_semiaxis, central_longitude, 0.0,
            false_easting, false_northing,
        )

    @property
    def name(self) -> str:
        return self.variant_name

    def _compute_terms(self, ellipsoid: Ellipsoid) -> MercatorTerms:
        return MercatorTerms(
            eccentricity=ellipsoid.eccentricity,
            lambda0=radians(self._central_longitude),
        )

    def _forward(self, lambda_: float, phi: float) -> Tuple[float, float]:
        terms = self._terms
        a = self._ellipsoid.major_semiaxis

        # Poles project to infinity; stay just inside them.
        if not -PI_OVER_2 + TOLERANCE <= phi <= PI_OVER_2 - TOLERANCE:
            phi += TOLERANCE * -np.sign(phi)
        if not -np.pi + TOLERANCE <= lambda_ <= np.pi - TOLERANCE:
            lambda_ += TOLERANCE * -np.sign(lambda_)

        x = normalize_longitude_delta(lambda_ - terms.lambda0) * a + self._false_easting

        if terms.eccentricity == 0.0:
            y = np.log(np.tan(PI_OVER_4 + 0.5 * phi))
        else:
            y = -np.log(tsfn(phi, float(np.sin(phi)), terms.eccentricity))

        return float(x), float(y * a + self._false_northing)

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        terms = self._terms
        one_over_a = 1.0 / self._ellipsoid.major_semiaxis
        exp_yp = float(np.exp(-(y - self._false_northing) * one_over_a))
        lambda_ = (x - self._false_easting) * one_over_a + terms.lambda0

        if terms.eccentricity == 0.0:
            phi = PI_OVER_2 - 2.0 * float(np.arctan(exp_yp))
        else:
            phi = phi2_iterate(exp_yp, terms.eccentricity)

        return lambda_, phi

    def _arguments(self) -> Dict[str, float]:
        return {
            "major_semiaxis": self._ellipsoid.major_semiaxis,
            "minor_semiaxis": self._ellipsoid.minor_semiaxis,
            "central_longitude": self._central_longitude,
            "false_easting": self._false_easting,
            "false_northing": self._false_northing,
        }

    @property
    def proj4_string(self) -> str:
        self._require_ready()
        return f"+proj=merc +lon_0={self._central_longitude!r} " + self._proj4_common()
