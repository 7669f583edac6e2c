"""
Ellipsoid Model.

A projector owns exactly one :class:`Ellipsoid`. Spheres are ellipsoids with
equal semiaxes and zero eccentricity; every projector switches to its closed
spherical formulas when ``is_sphere`` holds.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual, p. 13.
"""

from dataclasses import dataclass

import numpy as np

from common.constants import reference_ellipsoid
from numerics.comparison import safe_difference, safe_quotient
from numerics.validation import is_valid_ellipsoid


@dataclass(frozen=True)
class Ellipsoid:
    """Oblate spheroid defined by its semiaxes.

    Attributes
    ----------
    major_semiaxis : float
        Equatorial radius in meters.
    minor_semiaxis : float
        Polar radius in meters.

    Derived Parameters
    ------------------
    eccentricity : float
        e = sqrt(a² - b²) / a, in [0, 1].
    """
    major_semiaxis: float
    minor_semiaxis: float

    def __post_init__(self):
        if not is_valid_ellipsoid(self.major_semiaxis, self.minor_semiaxis):
            raise ValueError(
                "Invalid ellipsoid: semiaxes must be finite, positive and "
                f"major >= minor, got ({self.major_semiaxis}, {self.minor_semiaxis})"
            )
        object.__setattr__(self, "major_semiaxis", float(self.major_semiaxis))
        object.__setattr__(self, "minor_semiaxis", float(self.minor_semiaxis))

    @property
    def is_sphere(self) -> bool:
        return self.major_semiaxis == self.minor_semiaxis

    @property
    def eccentricity(self) -> float:
        """First eccentricity, exactly 0.0 for a sphere."""
        if self.is_sphere:
            return 0.0
        a = self.major_semiaxis
        b = self.minor_semiaxis
        result = safe_quotient(float(np.sqrt(safe_difference(a * a, b * b))), a)
        return min(result, 1.0)

    @property
    def eccentricity_squared(self) -> float:
        e = self.eccentricity
        return e * e

    @classmethod
    def from_reference(cls, name: str) -> "Ellipsoid":
        """Build from the named reference table, e.g. ``"WGS_1984"``."""
        record = reference_ellipsoid(name)
        return cls(record.major_semiaxis, record.minor_semiaxis)
