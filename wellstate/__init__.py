"""
Per-well dynamic state of a reservoir flow simulation.

This package provides modules for:
- config: Centralized configuration with all constants
- controls: Well control stacks (BHP, THP, reservoir rate, surface rate)
- wells: Injectors / producers and their flattened connections
- grid: Minimal structured grid topology with active cells
- columns: Vertical column extraction over a structured grid
- state: Well state arrays and their initialization from controls
- restart: Restart record layout (offsets, pack / unpack)
- plots: Diagnostic visualization
"""

from .config import Config, DEFAULT_CONFIG
from .exceptions import (
    WellStateError,
    MalformedWellError,
    ControlError,
    GridTopologyError,
    RestartLayoutError,
)
from .controls import ControlKind, WellControl, WellControls
from .wells import WellType, Well, Wells
from .grid import CartesianGrid
from .columns import extract_columns, column_index
from .state import WellState, initialize_well_state
from .restart import RestartOffsets, restart_offsets, pack_restart, unpack_restart
from . import plots

__version__ = "1.0.0"
__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "WellStateError",
    "MalformedWellError",
    "ControlError",
    "GridTopologyError",
    "RestartLayoutError",
    "ControlKind",
    "WellControl",
    "WellControls",
    "WellType",
    "Well",
    "Wells",
    "CartesianGrid",
    "extract_columns",
    "column_index",
    "WellState",
    "initialize_well_state",
    "RestartOffsets",
    "restart_offsets",
    "pack_restart",
    "unpack_restart",
    "plots",
]
