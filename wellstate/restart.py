"""
Restart record layout of a well state.

A restart record is the concatenation of five state arrays in this fixed order:

    bhp | perf_press | perf_rates | temperature | well_rates

The order is shared with restart writers and readers and must not change.
thp is not part of the record.
"""

from typing import NamedTuple

import numpy as np

from .exceptions import RestartLayoutError


RESTART_FIELDS = ("bhp", "perf_press", "perf_rates", "temperature", "well_rates")


class RestartOffsets(NamedTuple):
    """Start of each field in a restart record, and the record size."""

    bhp: int
    perf_press: int
    perf_rates: int
    temperature: int
    well_rates: int
    size: int


def restart_offsets(
    bhp_size: int,
    perf_press_size: int,
    perf_rates_size: int,
    temperature_size: int,
    well_rates_size: int,
) -> RestartOffsets:
    """
    Cumulative offsets of the restart fields.

    Parameters
    ----------
    bhp_size, perf_press_size, perf_rates_size, temperature_size, well_rates_size : int
        Length of each array, in record order.

    Returns
    -------
    RestartOffsets
        Offsets of each field, plus the total record size.
    """
    sizes = (bhp_size, perf_press_size, perf_rates_size, temperature_size, well_rates_size)
    if any(size < 0 for size in sizes):
        raise RestartLayoutError(f"Negative array size in {sizes}")
    ends = np.cumsum(sizes, dtype=int)
    return RestartOffsets(0, *(int(end) for end in ends))


def pack_restart(state) -> np.ndarray:
    """Concatenate the restart fields of a state into one flat record."""
    return np.concatenate([np.asarray(getattr(state, name), dtype=float) for name in RESTART_FIELDS])


def unpack_restart(record, state):
    """
    Copy a flat restart record back into the arrays of a state.

    The state must already have the array sizes of the record (for example
    after ``init`` with the same wells). Arrays are written in place.

    Raises
    ------
    RestartLayoutError
        If the record size does not match the state layout.
    """
    record = np.asarray(record, dtype=float).ravel()
    offsets = state.restart_offsets()
    if record.size != offsets.size:
        raise RestartLayoutError(
            f"Restart record has {record.size} values, state layout expects {offsets.size}"
        )
    bounds = list(offsets)
    for n, name in enumerate(RESTART_FIELDS):
        getattr(state, name)[:] = record[bounds[n]:bounds[n + 1]]
    return state
