"""
Vertical column extraction.

A column is the list of cells sharing the same horizontal (I, J) position,
ordered by increasing K (depth). For a full ``nx × ny × nz`` grid, column
``i + j * nx`` holds the cells ``i + j * nx + k * nx * ny`` for k = 0..nz-1.

The grid is duck typed. It must expose:

- ``dimensions``: logical sizes (nx, ny, nz)
- ``global_cell``: logical index of each active cell

and may expose ``vertical_connections()`` returning (upper, lower) active cell
pairs, which are then checked against the logical layout.
"""

import logging
from typing import List

import numpy as np

from .exceptions import GridTopologyError
from .grid import adjacency_from_connections

logger = logging.getLogger(__name__)


def _logical_coordinates(grid):
    nx, ny, nz = (int(n) for n in grid.dimensions)
    g = np.asarray(grid.global_cell, dtype=int)
    if g.size and (g.min() < 0 or g.max() >= nx * ny * nz):
        raise GridTopologyError("global_cell refers to cells outside the grid dimensions")
    layer = nx * ny
    return nx, g % nx, (g % layer) // nx, g // layer


def check_vertical_connections(connections, i, j, k):
    """
    Check that vertical connections describe single-file columns.

    Parameters
    ----------
    connections : array_like
        ``(n, 2)`` pairs of (upper, lower) cell ids.
    i, j, k : np.ndarray
        Logical coordinates of every cell.

    Raises
    ------
    GridTopologyError
        If a cell has more than one cell directly below or above it, if a
        connection is repeated, or if a connection leaves its (I, J) column
        or does not go downwards.
    """
    connections = np.asarray(connections, dtype=int).reshape(-1, 2)
    if connections.size == 0:
        return
    n = len(i)
    if connections.min() < 0 or connections.max() >= n:
        raise GridTopologyError("Vertical connection refers to an unknown cell")

    adjacency = adjacency_from_connections(connections, n)
    if np.any(adjacency.data > 1):
        raise GridTopologyError("Repeated vertical connection")
    below = adjacency.getnnz(axis=1)
    above = adjacency.getnnz(axis=0)
    for count, direction in ((below, "below"), (above, "above")):
        bad = np.flatnonzero(count > 1)
        if bad.size:
            raise GridTopologyError(
                f"Cell {bad[0]} has {count[bad[0]]} cells directly {direction} it"
            )

    upper, lower = connections[:, 0], connections[:, 1]
    aligned = (i[upper] == i[lower]) & (j[upper] == j[lower]) & (k[lower] > k[upper])
    if not np.all(aligned):
        c = np.flatnonzero(~aligned)[0]
        raise GridTopologyError(
            f"Vertical connection {upper[c]} -> {lower[c]} does not go down a column"
        )


def extract_columns(grid) -> List[List[int]]:
    """
    Partition the active cells of a grid into vertical columns.

    Parameters
    ----------
    grid : object
        Grid exposing ``dimensions`` and ``global_cell`` (see module doc).

    Returns
    -------
    list of list of int
        One column per (I, J) position holding at least one active cell,
        in ascending ``i + j * nx`` order. Cells within a column are sorted
        by strictly increasing K.

    Raises
    ------
    GridTopologyError
        If two cells share the same logical position or the vertical
        connectivity is inconsistent.
    """
    nx, i, j, k = _logical_coordinates(grid)
    if len(i) == 0:
        return []

    if hasattr(grid, "vertical_connections"):
        check_vertical_connections(grid.vertical_connections(), i, j, k)

    key = i + j * nx
    order = np.lexsort((k, key))
    sorted_key = key[order]
    sorted_k = k[order]
    same_column = sorted_key[1:] == sorted_key[:-1]
    if np.any(same_column & (sorted_k[1:] == sorted_k[:-1])):
        raise GridTopologyError("Two cells share the same logical position")

    columns = np.split(order, np.flatnonzero(~same_column) + 1)
    logger.debug("Extracted %d columns from %d cells", len(columns), len(i))
    return [column.tolist() for column in columns]


def column_index(grid) -> np.ndarray:
    """
    Column of each active cell.

    Returns
    -------
    np.ndarray
        ``result[c]`` is the position of the column holding cell ``c`` in
        the output of ``extract_columns(grid)``.
    """
    columns = extract_columns(grid)
    result = np.full(sum(len(column) for column in columns), -1, dtype=int)
    for n, column in enumerate(columns):
        result[column] = n
    return result
