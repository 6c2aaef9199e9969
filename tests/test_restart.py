"""
Unit tests for the restart record layout.
"""

import numpy as np
import pytest

from wellstate.exceptions import RestartLayoutError
from wellstate.restart import RESTART_FIELDS, pack_restart, restart_offsets, unpack_restart
from wellstate.state import WellState, initialize_well_state


class TestRestartOffsets:
    """Test the offset computation."""

    def test_field_order(self):
        """The record order is fixed."""
        assert RESTART_FIELDS == ("bhp", "perf_press", "perf_rates", "temperature", "well_rates")

    def test_cumulative_sizes(self):
        offsets = restart_offsets(3, 7, 7, 3, 9)

        assert offsets.bhp == 0
        assert offsets.perf_press == 3
        assert offsets.perf_rates == 10
        assert offsets.temperature == 17
        assert offsets.well_rates == 20
        assert offsets.size == 29

    def test_independent_of_thp(self, mixed_wells, pressure):
        """thp does not take part in the record."""
        state = initialize_well_state(mixed_wells, pressure)
        before = state.restart_offsets()
        state.thp = np.zeros(100)

        assert state.restart_offsets() == before

    def test_negative_size(self):
        with pytest.raises(RestartLayoutError):
            restart_offsets(1, -1, 0, 0, 0)


class TestPackUnpack:
    """Test restart record packing."""

    def test_pack_layout(self, mixed_wells, pressure):
        state = initialize_well_state(mixed_wells, pressure)
        record = pack_restart(state)
        offsets = state.restart_offsets()

        assert record.size == offsets.size
        assert np.array_equal(record[:offsets.perf_press], state.bhp)
        assert np.all(record[offsets.perf_press:offsets.perf_rates] == state.config.UNSET_PRESSURE)
        assert np.array_equal(record[offsets.well_rates:], state.well_rates)

    def test_unpack_in_place(self, mixed_wells, pressure):
        """Solver updates survive a pack / unpack cycle into a fresh state."""
        state = initialize_well_state(mixed_wells, pressure)
        state.perf_rates[:] = np.arange(10.0)
        state.temperature[2] = 350.0
        record = pack_restart(state)

        restored = initialize_well_state(mixed_wells, pressure)
        rates = restored.well_rates
        unpack_restart(record, restored)

        assert rates is restored.well_rates
        assert np.array_equal(restored.perf_rates, np.arange(10.0))
        assert restored.temperature[2] == 350.0

    def test_size_mismatch(self, mixed_wells, pressure):
        state = initialize_well_state(mixed_wells, pressure)

        with pytest.raises(RestartLayoutError):
            unpack_restart(np.zeros(3), state)

    def test_empty_state(self):
        assert pack_restart(WellState()).size == 0
