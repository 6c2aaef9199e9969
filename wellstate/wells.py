"""
Well collection with flattened connection layout.

Each well is an injector or a producer perforated in an ordered list of grid
cells, the first one being the top connection. Connections of all wells are
flattened well by well: connection c of well w sits at flat position
``connection_positions[w] + c``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Sequence

import numpy as np

from .controls import WellControls
from .exceptions import MalformedWellError


class WellType(Enum):
    """Well role."""

    INJECTOR = "injector"
    PRODUCER = "producer"


@dataclass
class Well:
    """
    A single well.

    Attributes
    ----------
    name : str
        Well name.
    type : WellType
        Injector or producer.
    cells : np.ndarray
        Perforated cell ids, top connection first.
    controls : WellControls
        Control stack.
    """
    name: str
    type: WellType
    cells: np.ndarray
    controls: WellControls = field(default_factory=WellControls)

    @property
    def number_of_connections(self) -> int:
        return len(self.cells)

    @property
    def is_injector(self) -> bool:
        return self.type is WellType.INJECTOR

    @property
    def first_cell(self) -> int:
        """Cell of the top connection."""
        if len(self.cells) == 0:
            raise MalformedWellError(f"Well {self.name!r} has no connections.")
        return int(self.cells[0])


class Wells:
    """
    Ordered set of wells sharing the same number of phases.

    Parameters
    ----------
    number_of_phases : int
        Number of fluid phases, sets the width of per-well rate rows.
    """

    def __init__(self, number_of_phases: int):
        if number_of_phases < 1:
            raise MalformedWellError(
                f"number_of_phases must be >= 1, got {number_of_phases}"
            )
        self.number_of_phases = number_of_phases
        self._wells: List[Well] = []

    def add_well(
        self,
        name: str,
        type: WellType,
        cells: Sequence[int],
    ) -> Well:
        """
        Append a well with an empty, open control stack.

        Parameters
        ----------
        name : str
            Well name.
        type : WellType
            Injector or producer.
        cells : sequence of int
            Perforated cells, top connection first.

        Returns
        -------
        Well
            The new well; fill ``well.controls`` to set its controls.
        """
        if not isinstance(type, WellType):
            raise MalformedWellError(f"Well {name!r}: unknown well type {type!r}")
        raw = np.asarray(cells, dtype=float).ravel()
        if np.any(raw != np.round(raw)):
            raise MalformedWellError(f"Well {name!r}: non integral cell ids in {cells!r}")
        cells = raw.astype(int)
        well = Well(
            name=name,
            type=type,
            cells=cells,
            controls=WellControls(number_of_phases=self.number_of_phases),
        )
        self._wells.append(well)
        return well

    @property
    def number_of_wells(self) -> int:
        return len(self._wells)

    def __len__(self) -> int:
        return len(self._wells)

    def __iter__(self) -> Iterator[Well]:
        return iter(self._wells)

    def __getitem__(self, w: int) -> Well:
        return self._wells[w]

    @property
    def names(self) -> List[str]:
        return [well.name for well in self._wells]

    @property
    def connection_positions(self) -> np.ndarray:
        """Cumulative connection counts, ``nw + 1`` entries starting at 0."""
        counts = [well.number_of_connections for well in self._wells]
        return np.concatenate([[0], np.cumsum(counts, dtype=int)]).astype(int)

    @property
    def total_connections(self) -> int:
        return int(self.connection_positions[-1])

    @property
    def well_cells(self) -> np.ndarray:
        """Perforated cells of all wells, flattened in well order."""
        if not self._wells:
            return np.zeros(0, dtype=int)
        return np.concatenate([well.cells for well in self._wells]).astype(int)

    def first_cell(self, w: int) -> int:
        return self._wells[w].first_cell
