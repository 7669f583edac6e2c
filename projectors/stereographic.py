"""
Stereographic Projection.

Conformal azimuthal projection. The polar aspect is the standard grid for
high-latitude models; oblique and equatorial aspects are supported too.

Scientific Context
------------------
The aspect follows from ``central_latitude``: within tolerance of ±90° it
is polar, within tolerance of 0° equatorial, otherwise oblique. The secant
latitude ``φts`` fixes the true-scale parallel through
``k0 = (1 + sin|φts|) / 2``.

Ellipsoidal formulas work on the conformal latitude ``X``; the inverse
recovers geodetic latitude with the same bounded iteration policy as the
conic projectors (last estimate on cap exhaustion).

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual, pp. 154-163.
- USGS PROJ library, PJ_stere.c.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np

from common.constants import (
    PI_OVER_2,
    PI_OVER_4,
    PROJECTION_TOLERANCE,
    CONVERGENCE_TOLERANCE,
    MAXIMUM_ITERATIONS,
)
from common.logging_config import get_logger
from numerics.auxiliary import ssfn, tsfn
from numerics.comparison import is_nan, radians
from numerics.ellipsoid import Ellipsoid
from numerics.validation import is_valid_latitude
from projectors.base import Projector, common_parameter_errors, raise_if_invalid


logger = get_logger(__name__)


class Aspect(Enum):
    NORTH_POLE = "north_pole"
    SOUTH_POLE = "south_pole"
    EQUATORIAL = "equatorial"
    OBLIQUE = "oblique"

    @property
    def is_polar(self) -> bool:
        return self in (Aspect.NORTH_POLE, Aspect.SOUTH_POLE)


def aspect_of(phi0: float) -> Aspect:
    """Aspect for a central latitude in radians."""
    if abs(abs(phi0) - PI_OVER_2) < PROJECTION_TOLERANCE:
        return Aspect.SOUTH_POLE if phi0 < 0.0 else Aspect.NORTH_POLE
    if abs(phi0) <= PROJECTION_TOLERANCE:
        return Aspect.EQUATORIAL
    return Aspect.OBLIQUE


@dataclass(frozen=True)
class StereographicTerms:
    eccentricity: float
    aspect: Aspect
    phits: float
    k0: float
    akm1: float
    sine_x1: float
    cosine_x1: float
    phi0: float
    lambda0: float


def _clamp(value: float, limit: float) -> float:
    if value > limit:
        return limit
    if value < -limit:
        return -limit
    return value


class StereographicProjector(Projector):
    """Stereographic projector.

    Parameters
    ----------
    major_semiaxis, minor_semiaxis : float
        Ellipsoid semiaxes in meters.
    central_longitude : float
        Degrees, in [-180, 180].
    central_latitude : float
        Degrees, in [-90, 90]. ±90 selects a polar aspect.
    secant_latitude : float
        Latitude of true scale in degrees, e.g. 60.0 for polar grids.
    false_easting, false_northing : float
        Meters.
    """

    variant_name = "Stereographic"

    def __init__(
        self,
        major_semiaxis: float,
        minor_semiaxis: float,
        central_longitude: float,
        central_latitude: float,
        secant_latitude: float,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
    ):
        errors: List[str] = common_parameter_errors(
            major_semiaxis, minor_semiaxis, central_longitude, false_easting, false_northing
        )
        if not is_valid_latitude(central_latitude):
            errors.append(f"central_latitude {central_latitude} not in [-90, 90]")
        if not is_valid_latitude(secant_latitude):
            errors.append(f"secant_latitude {secant_latitude} not in [-90, 90]")
        raise_if_invalid(self.variant_name, errors)

        self._secant_latitude = float(secant_latitude)
        super().__init__(
            major_semiaxis, minor_semiaxis, central_longitude, central_latitude,
            false_easting, false_northing,
        )

    @property
    def name(self) -> str:
        return self.variant_name

    @property
    def secant_latitude(self) -> float:
        self._require_ready()
        return self._secant_latitude

    @property
    def aspect(self) -> Aspect:
        self._require_ready()
        return self._terms.aspect

    def _compute_terms(self, ellipsoid: Ellipsoid) -> StereographicTerms:
        e = ellipsoid.eccentricity
        phits = abs(radians(self._secant_latitude))
        phi0 = radians(self._central_latitude)
        aspect = aspect_of(phi0)
        k0 = 0.5 * (1.0 + np.sin(phits))
        secant_at_pole = abs(phits - PI_OVER_2) < PROJECTION_TOLERANCE
        sine_x1 = 0.0
        cosine_x1 = 1.0

        if not ellipsoid.is_sphere:
            if aspect is Aspect.OBLIQUE:
                sine_phi0 = float(np.sin(phi0))
                x1 = 2.0 * np.arctan(ssfn(phi0, sine_phi0, e)) - PI_OVER_2
                t = e * sine_phi0
                akm1 = 2.0 * k0 * np.cos(phi0) / np.sqrt(1.0 - t * t)
                sine_x1 = float(np.sin(x1))
                cosine_x1 = float(np.cos(x1))
            elif aspect is Aspect.EQUATORIAL:
                akm1 = 2.0 * k0
            elif secant_at_pole:
                akm1 = 2.0 * k0 / np.sqrt(
                    np.power(1.0 + e, 1.0 + e) * np.power(1.0 - e, 1.0 - e)
                )
            else:
                sine_phits = float(np.sin(phits))
                t = e * sine_phits
                akm1 = np.cos(phits) / tsfn(phits, sine_phits, e) / np.sqrt(1.0 - t * t)
        else:
            if aspect is Aspect.OBLIQUE:
                akm1 = 2.0 * k0
                sine_x1 = float(np.sin(phi0))
                cosine_x1 = float(np.cos(phi0))
            elif aspect is Aspect.EQUATORIAL:
                akm1 = 2.0 * k0
            elif secant_at_pole:
                akm1 = 2.0 * k0
            else:
                akm1 = np.cos(phits) / np.tan(PI_OVER_4 - 0.5 * phits)

        return StereographicTerms(
            eccentricity=float(e),
            aspect=aspect,
            phits=float(phits),
            k0=float(k0),
            akm1=float(akm1),
            sine_x1=sine_x1,
            cosine_x1=cosine_x1,
            phi0=float(phi0),
            lambda0=radians(self._central_longitude),
        )

    # ------------------------------------------------------------------
    # Forward
    # ------------------------------------------------------------------

    def _forward(self, lambda_: float, phi: float) -> Tuple[float, float]:
        terms = self._terms
        lambda_ = _clamp(lambda_, np.pi - PROJECTION_TOLERANCE)
        phi = _clamp(phi, PI_OVER_2 - PROJECTION_TOLERANCE)
        lambda_delta = lambda_ - terms.lambda0

        if self._ellipsoid.is_sphere:
            x, y = self._forward_sphere(lambda_delta, phi)
        else:
            x, y = self._forward_ellipsoid(lambda_delta, phi)

        a = self._ellipsoid.major_semiaxis
        return float(x * a + self._false_easting), float(y * a + self._false_northing)

    def _forward_ellipsoid(self, lambda_delta: float, phi: float) -> Tuple[float, float]:
        terms = self._terms
        e = terms.eccentricity
        sine_lambda = np.sin(lambda_delta)
        cosine_lambda = np.cos(lambda_delta)
        sine_phi = float(np.sin(phi))

        if terms.aspect is Aspect.SOUTH_POLE:
            x = terms.akm1 * tsfn(-phi, -sine_phi, e)
            y = x * cosine_lambda
        elif terms.aspect is Aspect.NORTH_POLE:
            x = terms.akm1 * tsfn(phi, sine_phi, e)
            y = -x * cosine_lambda
        else:
            conformal = 2.0 * np.arctan(ssfn(phi, sine_phi, e)) - PI_OVER_2
            sine_x = np.sin(conformal)
            cosine_x = np.cos(conformal)
            denominator = terms.cosine_x1 * (
                1.0 + terms.sine_x1 * sine_x + terms.cosine_x1 * cosine_x * cosine_lambda
            )
            # The antipode of the center has no image.
            if denominator == 0.0:
                return 0.0, 0.0
            scale = terms.akm1 / denominator
            y = scale * (terms.cosine_x1 * sine_x - terms.sine_x1 * cosine_x * cosine_lambda)
            x = scale * cosine_x

        return x * sine_lambda, y

    def _forward_sphere(self, lambda_delta: float, phi: float) -> Tuple[float, float]:
        terms = self._terms
        sine_lambda = np.sin(lambda_delta)
        cosine_lambda = np.cos(lambda_delta)
        sine_phi = np.sin(phi)
        cosine_phi = np.cos(phi)

        if terms.aspect is Aspect.NORTH_POLE:
            if abs(phi - PI_OVER_2) < PROJECTION_TOLERANCE:
                return 0.0, 0.0
            y = terms.akm1 * np.tan(PI_OVER_4 - 0.5 * phi)
            return sine_lambda * y, -cosine_lambda * y

        if terms.aspect is Aspect.SOUTH_POLE:
            if abs(phi + PI_OVER_2) < PROJECTION_TOLERANCE:
                return 0.0, 0.0
            y = terms.akm1 * np.tan(PI_OVER_4 + 0.5 * phi)
            return sine_lambda * y, cosine_lambda * y

        y = 1.0 + terms.sine_x1 * sine_phi + terms.cosine_x1 * cosine_phi * cosine_lambda
        # The antipode of the center has no image.
        if y == 0.0:
            return 0.0, 0.0
        y = terms.akm1 / y
        x = y * cosine_phi * sine_lambda
        y *= terms.cosine_x1 * sine_phi - terms.sine_x1 * cosine_phi * cosine_lambda
        return x, y

    # ------------------------------------------------------------------
    # Inverse
    # ------------------------------------------------------------------

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        one_over_a = 1.0 / self._ellipsoid.major_semiaxis
        xp = (x - self._false_easting) * one_over_a
        yp = (y - self._false_northing) * one_over_a

        if self._ellipsoid.is_sphere:
            lambda_, phi = self._inverse_sphere(xp, yp)
        else:
            lambda_, phi = self._inverse_ellipsoid(xp, yp)

        return lambda_ + self._terms.lambda0, phi

    def _inverse_ellipsoid(self, xp: float, yp: float) -> Tuple[float, float]:
        terms = self._terms
        e = terms.eccentricity
        rho = float(np.hypot(xp, yp))

        if rho == 0.0:
            return 0.0, terms.phi0

        if terms.aspect.is_polar:
            if terms.aspect is Aspect.NORTH_POLE:
                yp = -yp
            tp = -rho / terms.akm1
            phi_l = PI_OVER_2 - 2.0 * np.arctan(tp)
            half_pi = -PI_OVER_2
            half_e = -0.5 * e
        else:
            tp = 2.0 * np.arctan2(rho * terms.cosine_x1, terms.akm1)
            cosine_tp = np.cos(tp)
            sine_tp = np.sin(tp)
            phi_l = np.arcsin(np.clip(
                cosine_tp * terms.sine_x1 + yp * sine_tp * terms.cosine_x1 / rho, -1.0, 1.0
            ))
            tp = np.tan(0.5 * (PI_OVER_2 + phi_l))
            xp *= sine_tp
            yp = rho * terms.cosine_x1 * cosine_tp - yp * terms.sine_x1 * sine_tp
            half_pi = PI_OVER_2
            half_e = 0.5 * e

        phi = phi_l
        for iteration in range(1, MAXIMUM_ITERATIONS + 1):
            sine_phi = e * np.sin(phi_l)
            phi = 2.0 * np.arctan(
                tp * np.power((1.0 + sine_phi) / (1.0 - sine_phi), half_e)
            ) - half_pi
            if abs(phi_l - phi) < CONVERGENCE_TOLERANCE:
                break
            phi_l = phi
        else:
            logger.debug(
                f"Stereographic inverse: no convergence after {MAXIMUM_ITERATIONS} "
                f"iterations at ({xp}, {yp}); using last estimate"
            )

        if terms.aspect is Aspect.SOUTH_POLE:
            phi = -phi

        lambda_ = 0.0 if xp == 0.0 and yp == 0.0 else float(np.arctan2(xp, yp))
        return lambda_, float(phi)

    def _inverse_sphere(self, xp: float, yp: float) -> Tuple[float, float]:
        terms = self._terms
        rho = float(np.hypot(xp, yp))
        c = 2.0 * np.arctan(rho / terms.akm1)
        sine_c = np.sin(c)
        cosine_c = np.cos(c)
        lambda_ = 0.0

        if terms.aspect.is_polar:
            if terms.aspect is Aspect.NORTH_POLE:
                yp = -yp
            if rho <= PROJECTION_TOLERANCE:
                phi = terms.phi0
            elif terms.aspect is Aspect.SOUTH_POLE:
                phi = np.arcsin(-cosine_c)
            else:
                phi = np.arcsin(cosine_c)
            if xp != 0.0 or yp != 0.0:
                lambda_ = float(np.arctan2(xp, yp))
            return lambda_, float(phi)

        if rho <= PROJECTION_TOLERANCE:
            phi = terms.phi0
        else:
            phi = np.arcsin(np.clip(
                cosine_c * terms.sine_x1 + yp * sine_c * terms.cosine_x1 / rho, -1.0, 1.0
            ))
        cc = cosine_c - terms.sine_x1 * np.sin(phi)
        if cc != 0.0 or xp != 0.0:
            lambda_ = float(np.arctan2(xp * sine_c * terms.cosine_x1, cc * rho))
        return lambda_, float(phi)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _comparable_fields(self) -> Tuple[float, ...]:
        return super()._comparable_fields() + (self._secant_latitude,)

    def _arguments(self) -> Dict[str, float]:
        return {
            "major_semiaxis": self._ellipsoid.major_semiaxis,
            "minor_semiaxis": self._ellipsoid.minor_semiaxis,
            "central_longitude": self._central_longitude,
            "central_latitude": self._central_latitude,
            "secant_latitude": self._secant_latitude,
            "false_easting": self._false_easting,
            "false_northing": self._false_northing,
        }

    def invariant(self) -> bool:
        if self._disposed:
            return True
        return bool(
            super().invariant()
            and is_valid_latitude(self._secant_latitude)
            and not is_nan(self._terms.akm1)
            and self._terms.akm1 != 0.0
        )

    @property
    def proj4_string(self) -> str:
        self._require_ready()
        terms = self._terms
        if terms.aspect.is_polar:
            lat_0 = 90.0 if terms.aspect is Aspect.NORTH_POLE else -90.0
            lat_ts = abs(self._secant_latitude) * (1.0 if lat_0 > 0.0 else -1.0)
            definition = f"+proj=stere +lat_0={lat_0!r} +lat_ts={lat_ts!r} "
        else:
            definition = (
                f"+proj=stere +lat_0={self._central_latitude!r} +k_0={terms.k0!r} "
            )
        return (
            definition
            + f"+lon_0={self._central_longitude!r} "
            + self._proj4_common()
        )
