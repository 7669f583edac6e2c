"""
Shared Conic Projection Machinery.

Lambert Conformal Conic and Albers Equal-Area Conic share their parameter
contract, their tangent/secant policy and most of the forward and inverse
steps. Only the radius of a parallel and its inverse differ, so those are
the two hooks a conic variant implements.

Notes
-----
Both standard parallels must lie in the same hemisphere, within [1, 89]
degrees of latitude (or [-89, -1]), with ``lower <= upper``. When they are
within ``PROJECTION_TOLERANCE`` radians of each other the cone is tangent
and ``n = sin(lower)``.
"""

from abc import abstractmethod
from typing import Dict, List, Tuple

import numpy as np

from common.constants import PI_OVER_2, PROJECTION_TOLERANCE
from numerics.comparison import is_nan
from numerics.validation import is_valid_latitude
from projectors.base import (
    Projector,
    common_parameter_errors,
    normalize_longitude_delta,
    raise_if_invalid,
)


_POLE_NUDGE = float(np.sqrt(PROJECTION_TOLERANCE))


def _in_hemisphere_band(latitude: float) -> bool:
    if latitude >= 0.0:
        return 1.0 <= latitude <= 89.0
    return -89.0 <= latitude <= -1.0


def conic_parameter_errors(
    major_semiaxis: float,
    minor_semiaxis: float,
    lower_latitude: float,
    upper_latitude: float,
    central_longitude: float,
    central_latitude: float,
    false_easting: float,
    false_northing: float,
) -> List[str]:
    """Every violated conic constraint, empty when the parameters are valid."""
    errors = common_parameter_errors(
        major_semiaxis, minor_semiaxis, central_longitude, false_easting, false_northing
    )

    for label, latitude in (("lower_latitude", lower_latitude),
                            ("upper_latitude", upper_latitude)):
        if not is_valid_latitude(latitude):
            errors.append(f"{label} {latitude} not in [-90, 90]")
        elif not _in_hemisphere_band(latitude):
            errors.append(f"{label} {latitude} not in [1, 89] or [-89, -1]")

    if is_nan(lower_latitude) or is_nan(upper_latitude) or lower_latitude > upper_latitude:
        errors.append(
            f"lower_latitude {lower_latitude} must not exceed upper_latitude {upper_latitude}"
        )
    elif np.sign(lower_latitude) != np.sign(upper_latitude):
        errors.append("lower_latitude and upper_latitude must be in the same hemisphere")

    if is_nan(central_latitude) or not -89.0 <= central_latitude <= 89.0:
        errors.append(f"central_latitude {central_latitude} not in [-89, 89]")
    return errors


def nudge_from_pole(phi: float) -> float:
    """Pull a latitude within tolerance of a pole back toward the equator."""
    if not -PI_OVER_2 + PROJECTION_TOLERANCE <= phi <= PI_OVER_2 - PROJECTION_TOLERANCE:
        phi += _POLE_NUDGE * -np.sign(phi)
    return float(phi)


def nudge_from_antimeridian(lambda_: float) -> float:
    """Pull a longitude within tolerance of ±π back toward zero.

    Keeps ``unproject`` from reporting the central longitude instead of the
    original one.
    """
    if not -np.pi + PROJECTION_TOLERANCE <= lambda_ <= np.pi - PROJECTION_TOLERANCE:
        lambda_ += _POLE_NUDGE * -np.sign(lambda_)
    return float(lambda_)


def is_tangent(phi1: float, phi2: float) -> bool:
    return phi1 + PROJECTION_TOLERANCE >= phi2


class ConicProjector(Projector):
    """Base for conic projectors with two standard parallels.

    The derived terms of a subclass must provide ``n``, ``rho0`` and
    ``lambda0``.
    """

    def __init__(
        self,
        major_semiaxis: float,
        minor_semiaxis: float,
        lower_latitude: float,
        upper_latitude: float,
        central_longitude: float,
        central_latitude: float,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
    ):
        raise_if_invalid(
            self.variant_name,
            conic_parameter_errors(
                major_semiaxis, minor_semiaxis, lower_latitude, upper_latitude,
                central_longitude, central_latitude, false_easting, false_northing,
            ),
        )
        self._lower_latitude = float(lower_latitude)
        self._upper_latitude = float(upper_latitude)
        super().__init__(
            major_semiaxis, minor_semiaxis, central_longitude, central_latitude,
            false_easting, false_northing,
        )

    variant_name = "conic"

    @property
    def name(self) -> str:
        return self.variant_name

    @property
    def lower_latitude(self) -> float:
        self._require_ready()
        return self._lower_latitude

    @property
    def upper_latitude(self) -> float:
        self._require_ready()
        return self._upper_latitude

    @abstractmethod
    def _radius(self, phi: float) -> float:
        """Unit-sphere radius of the parallel at ``phi`` (radians)."""
        pass

    @abstractmethod
    def _latitude_from_radius(self, rho: float) -> float:
        """Inverse of ``_radius`` for a sign-corrected, nonzero ``rho``."""
        pass

    def _forward(self, lambda_: float, phi: float) -> Tuple[float, float]:
        terms = self._terms
        a = self._ellipsoid.major_semiaxis
        rho = self._radius(nudge_from_pole(phi))
        lambda_delta = normalize_longitude_delta(nudge_from_antimeridian(lambda_) - terms.lambda0)
        n_lambda_delta = terms.n * lambda_delta
        x = rho * np.sin(n_lambda_delta) * a + self._false_easting
        y = (terms.rho0 - rho * np.cos(n_lambda_delta)) * a + self._false_northing
        return float(x), float(y)

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        terms = self._terms
        one_over_a = 1.0 / self._ellipsoid.major_semiaxis
        xp = (x - self._false_easting) * one_over_a
        yp = (y - self._false_northing) * one_over_a
        yp_delta = terms.rho0 - yp
        rho = float(np.hypot(xp, yp_delta))
        lambda_ = 0.0

        if rho != 0.0:
            # Southern cones open the other way.
            if terms.n < 0.0:
                rho = -rho
                xp = -xp
                yp_delta = -yp_delta
            phi = self._latitude_from_radius(rho)
            lambda_ = float(np.arctan2(xp, yp_delta)) / terms.n
        else:
            phi = PI_OVER_2 if terms.n > 0.0 else -PI_OVER_2

        return lambda_ + terms.lambda0, phi

    def _comparable_fields(self) -> Tuple[float, ...]:
        return super()._comparable_fields() + (self._lower_latitude, self._upper_latitude)

    def _arguments(self) -> Dict[str, float]:
        return {
            "major_semiaxis": self._ellipsoid.major_semiaxis,
            "minor_semiaxis": self._ellipsoid.minor_semiaxis,
            "lower_latitude": self._lower_latitude,
            "upper_latitude": self._upper_latitude,
            "central_longitude": self._central_longitude,
            "central_latitude": self._central_latitude,
            "false_easting": self._false_easting,
            "false_northing": self._false_northing,
        }

    def invariant(self) -> bool:
        if self._disposed:
            return True
        return bool(
            super().invariant()
            and _in_hemisphere_band(self._lower_latitude)
            and _in_hemisphere_band(self._upper_latitude)
            and self._lower_latitude <= self._upper_latitude
            and -89.0 <= self._central_latitude <= 89.0
            and self._terms.n != 0.0
        )
