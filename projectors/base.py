"""
Projector Capability.

Every projection variant implements the :class:`Projector` interface so that
callers can hold mixed collections of projectors and use them uniformly.

Lifecycle
---------
A projector is ``Ready`` after its validating constructor returns. Each
mutation (``set_ellipsoid``, ``set_false_easting``, ``set_false_northing``)
computes a fresh, immutable set of derived terms and swaps it in only on
success, so a failed mutation leaves the projector unchanged. ``dispose()``
(or leaving a ``with`` block) is terminal: any later use raises
:class:`ProjectorDisposedError`.

Conventions
-----------
- Geodetic coordinates are in degrees, longitude first.
- Projected coordinates are in meters.
- Output longitudes are wrapped into [-180, 180].
- Floating-point parameters are compared with ``about_equal``, never ``==``.
"""

from abc import ABC, abstractmethod
from dataclasses import fields
from typing import Any, Dict, List, Tuple

import numpy as np
from pyproj import CRS

from common.logging_config import get_logger
from numerics.comparison import about_equal, degrees, is_finite, is_nan, radians
from numerics.ellipsoid import Ellipsoid
from numerics.validation import (
    is_valid_ellipsoid,
    is_valid_latitude,
    is_valid_longitude,
    is_valid_longitude_latitude,
)


logger = get_logger(__name__)


class ProjectorDisposedError(RuntimeError):
    """Raised when a disposed projector is used."""


def wrap_longitude(longitude: float) -> float:
    """Wrap a longitude in degrees into [-180, 180].

    >>> wrap_longitude(185.0)
    -175.0
    """
    while longitude < -180.0:
        longitude += 360.0
    while longitude > 180.0:
        longitude -= 360.0
    return longitude


def normalize_longitude_delta(lambda_delta: float) -> float:
    """Bring a longitude difference in radians into (-π, π]."""
    while abs(lambda_delta) > np.pi:
        if lambda_delta < 0.0:
            lambda_delta += 2.0 * np.pi
        else:
            lambda_delta -= 2.0 * np.pi
    if lambda_delta == -np.pi:
        lambda_delta = np.pi
    return lambda_delta


def common_parameter_errors(
    major_semiaxis: float,
    minor_semiaxis: float,
    central_longitude: float,
    false_easting: float,
    false_northing: float,
) -> List[str]:
    """Constraint violations shared by every variant."""
    errors = []
    if not is_valid_ellipsoid(major_semiaxis, minor_semiaxis):
        errors.append(
            f"ellipsoid ({major_semiaxis}, {minor_semiaxis}) must have finite, "
            "positive semiaxes with major >= minor"
        )
    if not is_valid_longitude(central_longitude):
        errors.append(f"central_longitude {central_longitude} not in [-180, 180]")
    if not is_finite(false_easting):
        errors.append(f"false_easting {false_easting} must be finite")
    if not is_finite(false_northing):
        errors.append(f"false_northing {false_northing} must be finite")
    return errors


def raise_if_invalid(variant: str, errors: List[str]) -> None:
    if errors:
        raise ValueError(f"Invalid {variant} parameters: " + "; ".join(errors))


class Projector(ABC):
    """Abstract base class for cartographic projectors.

    Subclasses validate their own parameters, call this constructor, and
    implement ``_compute_terms``, ``_forward`` and ``_inverse``.

    Parameters
    ----------
    major_semiaxis, minor_semiaxis : float
        Ellipsoid semiaxes in meters.
    central_longitude, central_latitude : float
        Projection center in degrees.
    false_easting, false_northing : float
        Offsets in meters added to projected coordinates.
    """

    def __init__(
        self,
        major_semiaxis: float,
        minor_semiaxis: float,
        central_longitude: float,
        central_latitude: float,
        false_easting: float = 0.0,
        false_northing: float = 0.0,
    ):
        self._disposed = False
        self._ellipsoid = Ellipsoid(major_semiaxis, minor_semiaxis)
        self._central_longitude = float(central_longitude)
        self._central_latitude = float(central_latitude)
        self._false_easting = float(false_easting)
        self._false_northing = float(false_northing)
        self._terms = self._compute_terms(self._ellipsoid)
        logger.debug(f"Constructed {self!r}")
        assert self.invariant()

    # ------------------------------------------------------------------
    # Variant hooks
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Fixed variant name, e.g. ``"Lambert"``."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string describing the same projection."""
        pass

    @abstractmethod
    def _compute_terms(self, ellipsoid: Ellipsoid) -> Any:
        """Derive the cached terms for ``ellipsoid`` and current parameters."""
        pass

    @abstractmethod
    def _forward(self, lambda_: float, phi: float) -> Tuple[float, float]:
        """Project (radians) to (x, y) in meters including false offsets."""
        pass

    @abstractmethod
    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        """Unproject meters to (lambda, phi) in radians, lambda unwrapped."""
        pass

    @abstractmethod
    def _arguments(self) -> Dict[str, float]:
        """Constructor keyword arguments that rebuild this projector."""
        pass

    def _comparable_fields(self) -> Tuple[float, ...]:
        return (
            self._ellipsoid.major_semiaxis,
            self._ellipsoid.minor_semiaxis,
            self._central_longitude,
            self._central_latitude,
            self._false_easting,
            self._false_northing,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _require_ready(self) -> None:
        if self._disposed:
            raise ProjectorDisposedError(f"{type(self).__name__} has been disposed")

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Release the projector. Repeated calls are harmless."""
        if not self._disposed:
            logger.debug(f"Disposing {type(self).__name__}")
            self._disposed = True
            self._terms = None

    def __enter__(self):
        self._require_ready()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.dispose()
        return False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def ellipsoid(self) -> Ellipsoid:
        self._require_ready()
        return self._ellipsoid

    @property
    def false_easting(self) -> float:
        self._require_ready()
        return self._false_easting

    @property
    def false_northing(self) -> float:
        self._require_ready()
        return self._false_northing

    @property
    def central_longitude(self) -> float:
        self._require_ready()
        return self._central_longitude

    @property
    def central_latitude(self) -> float:
        self._require_ready()
        return self._central_latitude

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_ellipsoid(self, major_semiaxis: float, minor_semiaxis: float) -> None:
        """Replace the ellipsoid and recompute the derived terms.

        Raises
        ------
        ValueError
            If the semiaxes are not a valid ellipsoid. The projector is
            left unchanged.
        """
        self._require_ready()
        if not is_valid_ellipsoid(major_semiaxis, minor_semiaxis):
            raise ValueError(
                f"Invalid ellipsoid ({major_semiaxis}, {minor_semiaxis}): semiaxes "
                "must be finite, positive and major >= minor"
            )
        ellipsoid = Ellipsoid(major_semiaxis, minor_semiaxis)
        terms = self._compute_terms(ellipsoid)
        self._ellipsoid = ellipsoid
        self._terms = terms
        logger.debug(f"Recomputed derived terms of {self.name} for {ellipsoid}")
        assert self.invariant()

    def set_false_easting(self, false_easting: float) -> None:
        self._require_ready()
        if not is_finite(false_easting):
            raise ValueError(f"false_easting {false_easting} must be finite")
        self._false_easting = float(false_easting)
        assert self.invariant()

    def set_false_northing(self, false_northing: float) -> None:
        self._require_ready()
        if not is_finite(false_northing):
            raise ValueError(f"false_northing {false_northing} must be finite")
        self._false_northing = float(false_northing)
        assert self.invariant()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def project(self, longitude: float, latitude: float) -> Tuple[float, float]:
        """Project a geodetic point.

        Parameters
        ----------
        longitude, latitude : float
            Degrees, in [-180, 180] and [-90, 90].

        Returns
        -------
        Tuple[float, float]
            (x, y) in meters.
        """
        self._require_ready()
        if not is_valid_longitude_latitude(longitude, latitude):
            raise ValueError(
                f"Invalid point ({longitude}, {latitude}): longitude must be in "
                "[-180, 180] and latitude in [-90, 90]"
            )
        x, y = self._forward(radians(longitude), radians(latitude))
        assert not (is_nan(x) or is_nan(y))
        return float(x), float(y)

    def unproject(self, x: float, y: float) -> Tuple[float, float]:
        """Unproject a point in meters.

        Returns
        -------
        Tuple[float, float]
            (longitude, latitude) in degrees, longitude wrapped into
            [-180, 180].
        """
        self._require_ready()
        if not (is_finite(x) and is_finite(y)):
            raise ValueError(f"Invalid point ({x}, {y}): coordinates must be finite")
        lambda_, phi = self._inverse(float(x), float(y))
        longitude = wrap_longitude(degrees(lambda_))
        latitude = degrees(phi)
        assert is_valid_longitude(longitude) and not is_nan(latitude)
        return longitude, latitude

    def invariant(self) -> bool:
        """Self-check of the stored parameters and derived terms."""
        if self._disposed:
            return True
        terms_ok = self._terms is not None and all(
            not is_nan(value)
            for value in (getattr(self._terms, f.name) for f in fields(self._terms))
            if isinstance(value, float)
        )
        return bool(
            terms_ok
            and is_valid_ellipsoid(
                self._ellipsoid.major_semiaxis, self._ellipsoid.minor_semiaxis
            )
            and is_valid_longitude(self._central_longitude)
            and is_valid_latitude(self._central_latitude)
            and is_finite(self._false_easting)
            and is_finite(self._false_northing)
        )

    def equal(self, other: "Projector") -> bool:
        """Same variant with all parameters ``about_equal``."""
        self._require_ready()
        if type(other) is not type(self):
            return False
        other._require_ready()
        return all(
            about_equal(mine, theirs)
            for mine, theirs in zip(self._comparable_fields(), other._comparable_fields())
        )

    def clone(self) -> "Projector":
        """Independent copy that is ``equal`` to this projector."""
        self._require_ready()
        return type(self)(**self._arguments())

    def to_crs(self) -> CRS:
        """Equivalent :class:`pyproj.CRS`, for grid-mapping metadata."""
        return CRS.from_proj4(self.proj4_string)

    def _proj4_common(self) -> str:
        return (
            f"+x_0={self._false_easting!r} +y_0={self._false_northing!r} "
            f"+a={self._ellipsoid.major_semiaxis!r} +b={self._ellipsoid.minor_semiaxis!r} "
            "+units=m +no_defs"
        )

    def __repr__(self) -> str:
        arguments = ", ".join(f"{key}={value!r}" for key, value in self._arguments().items())
        return f"{type(self).__name__}({arguments})"
