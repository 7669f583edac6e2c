"""
Numeric and Geodetic Constants for the Projection Engine.

This module holds the tolerances, iteration limits and reference ellipsoids
that every projector depends on. The values are contractual: projected
datasets already on disk were produced with exactly these numbers, so they
must not be changed.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- USGS PROJ library, ellipsoid definitions (pj_ellps.c).
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping


# =========================================================================
# Tolerances and iteration limits
# =========================================================================

PI_OVER_2: Final[float] = 1.57079632679489661923
PI_OVER_4: Final[float] = 0.78539816339744830962

TOLERANCE: Final[float] = 1e-6
"""Default tolerance of ``about_equal``."""

PROJECTION_TOLERANCE: Final[float] = 1e-10
"""Closeness to a pole/antimeridian/tangent that triggers special handling."""

CONVERGENCE_TOLERANCE: Final[float] = 1e-12
"""Latitude step (radians) below which the inverse solvers stop."""

MAXIMUM_ITERATIONS: Final[int] = 15
"""Hard cap on inverse-latitude solver iterations."""


@dataclass(frozen=True)
class ReferenceEllipsoid:
    """A named planet approximation with provenance.

    Attributes
    ----------
    name : str
        Lookup key, e.g. ``"WGS_1984"``.
    major_semiaxis : float
        Equatorial radius in meters.
    minor_semiaxis : float
        Polar radius in meters. Equal to ``major_semiaxis`` for spheres.
    source : str
        Where the value comes from.
    """
    name: str
    major_semiaxis: float
    minor_semiaxis: float
    source: str = "USGS PROJ library"

    @property
    def is_sphere(self) -> bool:
        return self.major_semiaxis == self.minor_semiaxis


def _sphere(name: str, radius: float, source: str) -> ReferenceEllipsoid:
    return ReferenceEllipsoid(name, radius, radius, source)


_ELLIPSOIDS = (
    ReferenceEllipsoid("AIRY_1830", 6377563.4, 6356256.9),
    ReferenceEllipsoid("MODIFIED_AIRY", 6377340.2, 6356034.4),
    ReferenceEllipsoid("ANDRAE_1876", 6377104.4, 6355847.4),
    ReferenceEllipsoid("APPLIED_PHYSICS_1965", 6378137.0, 6356751.8),
    ReferenceEllipsoid("AUSTRALIAN_NATL_SA_1969", 6378160.0, 6356774.7),
    ReferenceEllipsoid("BESSEL_1841", 6377397.2, 6356079.0),
    ReferenceEllipsoid("BESSEL_NAMIBIA_1841", 6377483.9, 6356165.4),
    ReferenceEllipsoid("CLARKE_1866", 6378206.4, 6356583.8),
    ReferenceEllipsoid("CLARKE_1880", 6378249.1, 6356515.0),
    ReferenceEllipsoid("COMM_DES_POIDS_ET_MESURES_1799", 6375738.7, 6356666.2),
    ReferenceEllipsoid("DELAMBRE_1810_BELGIUM", 6376428.0, 6355957.9),
    ReferenceEllipsoid("ENGELIS_1985", 6378136.1, 6356751.3),
    ReferenceEllipsoid("EVEREST_1830", 6377276.3, 6356075.4),
    ReferenceEllipsoid("EVEREST_1948", 6377304.1, 6356103.0),
    ReferenceEllipsoid("EVEREST_1956", 6377301.2, 6356100.2),
    ReferenceEllipsoid("EVEREST_1969", 6377295.7, 6356094.7),
    ReferenceEllipsoid("EVEREST_SABAH_SARAWAK", 6377298.6, 6356097.6),
    ReferenceEllipsoid("FISCHER_MERCURY_DATUM_1960", 6378166.0, 6356784.3),
    ReferenceEllipsoid("MODIFIED_FISCHER_1960", 6378155.0, 6356773.3),
    ReferenceEllipsoid("FISCHER_1968", 6378150.0, 6356768.3),
    ReferenceEllipsoid("GRS_IUGG_1967", 6378160.0, 6352363.3),
    ReferenceEllipsoid("GRS_IUGG_1980", 6378137.0, 6356752.3),
    ReferenceEllipsoid("HELMERT_1906", 6378200.0, 6356818.2),
    ReferenceEllipsoid("HOUGH", 6378270.0, 6356794.3),
    ReferenceEllipsoid("IAU_1976", 6378140.0, 6356755.3),
    ReferenceEllipsoid("INTL_HAYFORD_1909", 6378388.0, 6356911.9),
    ReferenceEllipsoid("KRASSOVSKY_1942", 6378245.0, 6356863.0),
    ReferenceEllipsoid("KAULA_1961", 6378163.0, 6356777.0),
    ReferenceEllipsoid("LERCH_1979", 6378139.0, 6356754.3),
    ReferenceEllipsoid("MAUPERTIUS_1738", 6397300.0, 6363806.3),
    ReferenceEllipsoid("MERIT_1983", 6378137.0, 6356752.3),
    ReferenceEllipsoid("NAVAL_WEAPONS_LAB_1965", 6378145.0, 6356759.8),
    ReferenceEllipsoid("NEW_INTERNATIONAL_1967", 6378157.5, 6356772.2),
    ReferenceEllipsoid("PLESSIS_1817", 6376523.0, 6355863.0),
    ReferenceEllipsoid("SGS_1985", 6378136.0, 6356751.3),
    ReferenceEllipsoid("SOUTHEAST_ASIA", 6378155.0, 6356773.0),
    ReferenceEllipsoid("WALBECK", 6376896.0, 6355835.0),
    ReferenceEllipsoid("WGS_1960", 6378165.0, 6356783.3),
    ReferenceEllipsoid("WGS_1966", 6378145.0, 6356759.8),
    ReferenceEllipsoid("WGS_1972", 6378135.0, 6356750.5),
    ReferenceEllipsoid("WGS_1984", 6378137.0, 6356752.3, "WGS84, NIMA TR8350.2"),
    # Spheres used by weather-model grids and other bodies.
    _sphere("MM5", 6370997.0, "MM5/WRF sphere"),
    _sphere("MCIDAS", 6371230.0, "McIDAS sphere"),
    _sphere("MOON", 1738000.0, "Lunar mean radius"),
    ReferenceEllipsoid("MARS", 3394500.0, 3376400.0, "Mars reference ellipsoid"),
    _sphere("VENUS", 6051000.0, "Venus mean radius"),
)

REFERENCE_ELLIPSOIDS: Final[Mapping[str, ReferenceEllipsoid]] = MappingProxyType(
    {ellipsoid.name: ellipsoid for ellipsoid in _ELLIPSOIDS}
)


def reference_ellipsoid(name: str) -> ReferenceEllipsoid:
    """Look up a reference ellipsoid by name.

    Parameters
    ----------
    name : str
        Table key, case-insensitive (``"wgs_1984"`` works).

    Returns
    -------
    ReferenceEllipsoid
        The matching record.

    Raises
    ------
    KeyError
        If no ellipsoid has that name.
    """
    key = name.strip().upper()
    if key not in REFERENCE_ELLIPSOIDS:
        raise KeyError(
            f"Unknown reference ellipsoid '{name}'. "
            f"Known: {', '.join(sorted(REFERENCE_ELLIPSOIDS))}"
        )
    return REFERENCE_ELLIPSOIDS[key]
