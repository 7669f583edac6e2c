"""
Cartographic projectors.

This package provides:
- The Projector capability (project, unproject, clone, equal, dispose)
- Lambert Conformal Conic, Albers Equal-Area Conic, Stereographic and
  Mercator variants
- A factory keyed by variant name
- Array and grid helpers returning xarray datasets
"""

from projectors.base import Projector, ProjectorDisposedError, wrap_longitude
from projectors.lambert import LambertProjector
from projectors.albers import AlbersProjector
from projectors.stereographic import Aspect, StereographicProjector
from projectors.mercator import MercatorProjector
from projectors.factory import PROJECTORS, new_projector
from projectors.batch import (
    project_points,
    unproject_points,
    grid_cell_centers,
    grid_cell_corners,
)

__all__ = [
    "Projector",
    "ProjectorDisposedError",
    "wrap_longitude",
    "LambertProjector",
    "AlbersProjector",
    "Aspect",
    "StereographicProjector",
    "MercatorProjector",
    "PROJECTORS",
    "new_projector",
    "project_points",
    "unproject_points",
    "grid_cell_centers",
    "grid_cell_corners",
]
