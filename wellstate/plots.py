"""
Diagnostic plots for well states and grid columns.

1. Bar plot of initial bhp / thp per well
2. Map view of column lengths over (I, J)
"""

from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt

from .config import Config, DEFAULT_CONFIG
from .wells import Wells, WellType


def plot_well_state(
    state,
    wells: Optional[Wells] = None,
    config: Optional[Config] = None,
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[float, float] = (8, 5),
) -> plt.Figure:
    """
    Plot bhp and thp of every well.

    Unset pressures are left out. Injectors are drawn in blue and producers
    in red when ``wells`` is given.

    Parameters
    ----------
    state : WellState
        Initialized well state
    wells : Wells, optional
        Wells used to label and color the bars
    config : Config, optional
        Configuration object (for the unset marker)
    ax : plt.Axes, optional
        Axes to plot on (creates new figure if None)
    figsize : tuple, optional
        Figure size

    Returns
    -------
    plt.Figure
        The figure object
    """
    if config is None:
        config = DEFAULT_CONFIG

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    nw = state.number_of_wells
    x = np.arange(nw)
    bhp = np.where(state.bhp == config.UNSET_PRESSURE, np.nan, state.bhp) / 1e6
    thp = np.where(state.thp == config.UNSET_PRESSURE, np.nan, state.thp) / 1e6

    if wells is not None:
        colors = ['blue' if well.type is WellType.INJECTOR else 'red' for well in wells]
        labels = wells.names
    else:
        colors = ['gray'] * nw
        labels = [str(w) for w in range(nw)]

    ax.bar(x - 0.2, bhp, 0.35, color=colors, alpha=0.7, edgecolor='black', label='BHP')
    ax.bar(x + 0.2, thp, 0.35, color=colors, alpha=0.3, edgecolor='black', hatch='//', label='THP')
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_xlabel('Well', fontsize=12)
    ax.set_ylabel('Pressure [MPa]', fontsize=12)
    ax.set_title('Initial Well Pressures', fontsize=14, fontweight='bold')
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()
    return fig


def plot_columns(
    grid,
    columns: Sequence[Sequence[int]],
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[float, float] = (6, 6),
) -> plt.Figure:
    """
    Map view of the number of active cells in each column.

    Parameters
    ----------
    grid : CartesianGrid
        Grid the columns were extracted from
    columns : list of list of int
        Output of ``extract_columns(grid)``
    ax : plt.Axes, optional
        Axes to plot on
    figsize : tuple, optional
        Figure size

    Returns
    -------
    plt.Figure
        The figure object
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    nx, ny, nz = grid.dimensions
    lengths = np.zeros((ny, nx))
    global_cell = np.asarray(grid.global_cell)
    for column in columns:
        g = global_cell[column[0]]
        lengths[(g % (nx * ny)) // nx, g % nx] = len(column)

    image = ax.imshow(lengths, origin='lower', cmap='viridis', vmin=0, vmax=nz)
    plt.colorbar(image, ax=ax, label='Active cells in column', pad=0.02)
    ax.set_xlabel('I', fontsize=12)
    ax.set_ylabel('J', fontsize=12)
    ax.set_title(f'{len(columns)} Columns', fontsize=14, fontweight='bold')

    plt.tight_layout()
    return fig
