"""
Minimal structured grid topology.

Cells of an ``nx × ny × nz`` grid are numbered logically as

    g = i + j * nx + k * nx * ny

with k increasing downwards. Only active cells get a (compressed) cell id;
``global_cell[c]`` maps an active cell id back to its logical index.

Vertical connections link an active cell to the active cell directly below it.
An inactive cell has no faces, so the cells above and below it are not
connected.
"""

import logging
from typing import Optional, Tuple

import numpy as np
from scipy import sparse

from .exceptions import GridTopologyError

logger = logging.getLogger(__name__)


class CartesianGrid:
    """
    Structured grid with an optional active cell mask.

    Parameters
    ----------
    nx, ny, nz : int
        Number of cells along I, J and K.
    actnum : array_like of bool, optional
        Active flag per logical cell (``nx * ny * nz`` entries, logical
        ordering). All cells are active when omitted.
    """

    def __init__(self, nx: int, ny: int, nz: int, actnum=None):
        if min(nx, ny, nz) < 1:
            raise GridTopologyError(f"Invalid grid dimensions ({nx}, {ny}, {nz})")
        self.nx, self.ny, self.nz = int(nx), int(ny), int(nz)
        size = self.nx * self.ny * self.nz
        if actnum is None:
            actnum = np.ones(size, dtype=bool)
        else:
            actnum = np.asarray(actnum, dtype=bool).ravel()
            if actnum.size != size:
                raise GridTopologyError(
                    f"actnum has {actnum.size} entries, expected {size}"
                )
        self.actnum = actnum
        self.global_cell = np.flatnonzero(actnum)
        self._active_index = np.full(size, -1, dtype=int)
        self._active_index[self.global_cell] = np.arange(self.global_cell.size)
        logger.debug(
            "Grid %dx%dx%d with %d active cells",
            self.nx, self.ny, self.nz, self.global_cell.size,
        )

    @property
    def dimensions(self) -> Tuple[int, int, int]:
        return self.nx, self.ny, self.nz

    @property
    def number_of_cells(self) -> int:
        """Number of active cells."""
        return int(self.global_cell.size)

    def logical_index(self, i: int, j: int, k: int) -> int:
        return i + j * self.nx + k * self.nx * self.ny

    def active_index(self, i: int, j: int, k: int) -> int:
        """Active cell id at (i, j, k), -1 if that cell is inactive."""
        return int(self._active_index[self.logical_index(i, j, k)])

    def logical_ijk(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Logical coordinates of every active cell, as three arrays."""
        g = self.global_cell
        layer = self.nx * self.ny
        return g % self.nx, (g % layer) // self.nx, g // layer

    def cell_ijk(self, cell: int) -> Tuple[int, int, int]:
        g = int(self.global_cell[cell])
        layer = self.nx * self.ny
        return g % self.nx, (g % layer) // self.nx, g // layer

    def vertical_connections(self) -> np.ndarray:
        """
        Vertical connections between active cells.

        Returns
        -------
        np.ndarray
            ``(n, 2)`` integer array of (upper, lower) active cell ids.
        """
        layer = self.nx * self.ny
        upper = self.global_cell[self.global_cell // layer < self.nz - 1]
        lower = upper + layer
        keep = self.actnum[lower]
        return np.column_stack(
            [self._active_index[upper[keep]], self._active_index[lower[keep]]]
        ).astype(int)

    def vertical_adjacency(self) -> sparse.csr_matrix:
        """Vertical connections as a sparse matrix, row upper and column lower."""
        return adjacency_from_connections(self.vertical_connections(), self.number_of_cells)


def adjacency_from_connections(
    connections: np.ndarray, number_of_cells: Optional[int] = None
) -> sparse.csr_matrix:
    """
    Build a sparse (upper, lower) adjacency matrix from a connection list.

    Duplicate connections are summed, so an entry above 1 flags a repeated face.
    """
    connections = np.asarray(connections, dtype=int).reshape(-1, 2)
    n = number_of_cells
    if n is None:
        n = int(connections.max()) + 1 if connections.size else 0
    data = np.ones(len(connections), dtype=int)
    return sparse.coo_matrix(
        (data, (connections[:, 0], connections[:, 1])), shape=(n, n)
    ).tocsr()
