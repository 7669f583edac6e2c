"""
Common infrastructure for the projection engine.

This package provides foundational components used across all modules:
- Contractual tolerances and iteration limits
- The named reference-ellipsoid table
- Logging setup
"""

from common.constants import (
    PI_OVER_2,
    PI_OVER_4,
    TOLERANCE,
    PROJECTION_TOLERANCE,
    CONVERGENCE_TOLERANCE,
    MAXIMUM_ITERATIONS,
    REFERENCE_ELLIPSOIDS,
    ReferenceEllipsoid,
    reference_ellipsoid,
)
from common.logging_config import get_logger, set_log_level

__all__ = [
    "PI_OVER_2",
    "PI_OVER_4",
    "TOLERANCE",
    "PROJECTION_TOLERANCE",
    "CONVERGENCE_TOLERANCE",
    "MAXIMUM_ITERATIONS",
    "REFERENCE_ELLIPSOIDS",
    "ReferenceEllipsoid",
    "reference_ellipsoid",
    "get_logger",
    "set_log_level",
]
