"""
Smoke tests for diagnostic plots.
"""

import matplotlib.pyplot as plt

from wellstate.columns import extract_columns
from wellstate.grid import CartesianGrid
from wellstate.plots import plot_columns, plot_well_state
from wellstate.state import initialize_well_state


class TestPlots:
    """Plots return a figure without error."""

    def test_plot_well_state(self, mixed_wells, pressure):
        state = initialize_well_state(mixed_wells, pressure)

        fig = plot_well_state(state, mixed_wells)
        fig.canvas.draw()

        assert isinstance(fig, plt.Figure)
        labels = [t.get_text() for t in fig.axes[0].get_xticklabels()]
        assert labels == mixed_wells.names
        plt.close(fig)

    def test_plot_well_state_on_axes(self, mixed_wells, pressure):
        state = initialize_well_state(mixed_wells, pressure)
        fig, ax = plt.subplots()

        assert plot_well_state(state, ax=ax) is fig
        plt.close(fig)

    def test_plot_columns(self):
        grid = CartesianGrid(4, 3, 5, actnum=[k % 7 != 0 for k in range(60)])
        columns = extract_columns(grid)

        fig = plot_columns(grid, columns)

        assert isinstance(fig, plt.Figure)
        assert fig.axes[0].get_title() == f"{len(columns)} Columns"
        plt.close(fig)
