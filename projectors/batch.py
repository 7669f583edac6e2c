"""
Array and Grid Helpers.

Projectors work point by point. These helpers apply them to numpy arrays
and to regular projected grids, returning ``xarray`` datasets ready to be
written as NetCDF alongside model output.
"""

from typing import Tuple

import numpy as np
import xarray as xr
from numpy.typing import NDArray

from common.logging_config import get_logger
from numerics.validation import valid_longitudes_and_latitudes
from projectors.base import Projector


logger = get_logger(__name__)


def project_points(
    projector: Projector,
    longitudes: NDArray[np.float64],
    latitudes: NDArray[np.float64],
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Project arrays of coordinates.

    Parameters
    ----------
    projector : Projector
        Projection to use.
    longitudes, latitudes : ndarray
        Degrees, same shape.

    Returns
    -------
    Tuple[ndarray, ndarray]
        (x, y) in meters, same shape as the inputs.
    """
    lons = np.asarray(longitudes, dtype=np.float64)
    lats = np.asarray(latitudes, dtype=np.float64)
    if not valid_longitudes_and_latitudes(lons, lats):
        raise ValueError(
            "longitudes and latitudes must be non-empty, of equal shape, "
            "and within [-180, 180] x [-90, 90]"
        )

    xs = np.empty_like(lons)
    ys = np.empty_like(lats)
    for index in np.ndindex(lons.shape):
        xs[index], ys[index] = projector.project(lons[index], lats[index])
    return xs, ys


def unproject_points(
    projector: Projector,
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Unproject arrays of projected coordinates to (longitudes, latitudes)."""
    x_values = np.asarray(xs, dtype=np.float64)
    y_values = np.asarray(ys, dtype=np.float64)
    if x_values.shape != y_values.shape:
        raise ValueError(f"Shape mismatch: xs {x_values.shape} vs ys {y_values.shape}")
    if not (np.all(np.isfinite(x_values)) and np.all(np.isfinite(y_values))):
        raise ValueError("xs and ys must be finite")

    lons = np.empty_like(x_values)
    lats = np.empty_like(y_values)
    for index in np.ndindex(x_values.shape):
        lons[index], lats[index] = projector.unproject(x_values[index], y_values[index])
    return lons, lats


def _check_grid(cell_width: float, cell_height: float, rows: int, columns: int) -> None:
    errors = []
    if not (np.isfinite(cell_width) and cell_width > 0.0):
        errors.append(f"cell_width {cell_width} must be finite and positive")
    if not (np.isfinite(cell_height) and cell_height > 0.0):
        errors.append(f"cell_height {cell_height} must be finite and positive")
    if rows < 1:
        errors.append(f"rows {rows} must be at least 1")
    if columns < 1:
        errors.append(f"columns {columns} must be at least 1")
    if errors:
        raise ValueError("Invalid grid: " + "; ".join(errors))


def _lattice_dataset(
    projector: Projector,
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    kind: str,
) -> xr.Dataset:
    xx, yy = np.meshgrid(x, y)
    lons, lats = unproject_points(projector, xx, yy)

    return xr.Dataset(
        {
            'longitude': (('row', 'column'), lons, {'units': 'degrees_east'}),
            'latitude': (('row', 'column'), lats, {'units': 'degrees_north'}),
        },
        coords={
            'y': ('row', y, {'units': 'm'}),
            'x': ('column', x, {'units': 'm'}),
        },
        attrs={
            'projection': projector.name,
            'proj4': projector.proj4_string,
            'lattice': kind,
        }
    )


def grid_cell_centers(
    projector: Projector,
    x_minimum: float,
    y_minimum: float,
    cell_width: float,
    cell_height: float,
    rows: int,
    columns: int,
) -> xr.Dataset:
    """Longitude/latitude of every cell center of a regular projected grid.

    Parameters
    ----------
    projector : Projector
        Projection of the grid.
    x_minimum, y_minimum : float
        Lower-left corner of the grid in meters.
    cell_width, cell_height : float
        Cell size in meters.
    rows, columns : int
        Grid dimensions.

    Returns
    -------
    xr.Dataset
        ``longitude`` and ``latitude`` on ``(row, column)``, with the
        projected center coordinates ``x`` and ``y``.

    Examples
    --------
    >>> centers = grid_cell_centers(lambert, -2556000.0, -1728000.0, 12000.0, 12000.0, 299, 459)
    >>> centers.longitude.shape
    (299, 459)
    """
    _check_grid(cell_width, cell_height, rows, columns)
    x = (x_minimum - 0.5 * cell_width) + (np.arange(columns) + 1.0) * cell_width
    y = (y_minimum - 0.5 * cell_height) + (np.arange(rows) + 1.0) * cell_height
    logger.debug(f"Unprojecting {rows}x{columns} cell centers with {projector.name}")
    return _lattice_dataset(projector, x, y, 'centers')


def grid_cell_corners(
    projector: Projector,
    x_minimum: float,
    y_minimum: float,
    cell_width: float,
    cell_height: float,
    rows: int,
    columns: int,
) -> xr.Dataset:
    """Same as :func:`grid_cell_centers` for the (rows + 1) x (columns + 1) corner lattice."""
    _check_grid(cell_width, cell_height, rows, columns)
    x = x_minimum + np.arange(columns + 1) * cell_width
    y = y_minimum + np.arange(rows + 1) * cell_height
    logger.debug(f"Unprojecting {rows + 1}x{columns + 1} cell corners with {projector.name}")
    return _lattice_dataset(projector, x, y, 'corners')
