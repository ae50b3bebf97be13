"""Grid point generation for the editor canvas."""

import numpy as np

from constants import GRID_SIZE, GRID_HALF_COLUMNS, GRID_HALF_ROWS


def grid_points(grid_size=GRID_SIZE, half_columns=GRID_HALF_COLUMNS, half_rows=GRID_HALF_ROWS) -> np.ndarray:
    """World positions of every grid point, both extents inclusive.

    Args:
        grid_size: Spacing between points in world units
        half_columns: Columns on each side of the origin
        half_rows: Rows on each side of the origin

    Returns:
        Nx2 numpy array [[x, y], ...], ordered column by column
    """
    xs = np.arange(-half_columns, half_columns + 1) * grid_size
    ys = np.arange(-half_rows, half_rows + 1) * grid_size
    gx, gy = np.meshgrid(xs, ys, indexing='ij')
    return np.column_stack((gx.ravel(), gy.ravel())).astype(float)
