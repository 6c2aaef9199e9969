"""
Per-well dynamic state and its initialization from well controls.

The state holds flat arrays shared with the flow solver, which mutates them
in place at every time step:

- bhp, thp, temperature: one value per well
- well_rates: one value per (well, phase), row-major by well
- perf_rates, perf_press: one value per connection, flattened well by well

Initial values are derived from each well's control stack and from the
ambient pressure of its top connection cell:

Stopped wells:
    rates = 0
    current BHP control     -> bhp = target (thp left at 0)
    current THP control     -> thp = target (bhp left at 0)
    otherwise               -> bhp = p[first cell], thp = unset

Open wells:
    current surface rate    -> rates = target * distribution
    otherwise               -> rates = ±SMALL_RATE (+ injector, - producer)
    bhp, thp = targets of BHP / THP controls anywhere in the stack, else unset
    current control neither BHP nor THP
                            -> bhp = 1.01 p[first cell] (injector)
                                     0.99 p[first cell] (producer)

Connection rates start at zero and connection pressures at the unset value.
They are not consistent with bhp and well_rates until the solver runs.
"""

import logging
import warnings
from typing import Optional

import numpy as np
import pandas as pd

from .config import Config, DEFAULT_CONFIG
from .controls import ControlKind
from .exceptions import ControlError, MalformedWellError
from .restart import RestartOffsets, restart_offsets
from .wells import Well, Wells, WellType

logger = logging.getLogger(__name__)


def _pressure_array(pressure) -> np.ndarray:
    """Accept a pressure array or a reservoir state exposing ``pressure``."""
    if hasattr(pressure, "pressure"):
        pressure = pressure.pressure
        if callable(pressure):
            pressure = pressure()
    return np.asarray(pressure, dtype=float).ravel()


def _ambient_pressure(pressure: np.ndarray, well: Well) -> float:
    cell = well.first_cell
    if not 0 <= cell < pressure.size:
        raise MalformedWellError(
            f"Well {well.name!r}: no ambient pressure for cell {cell} "
            f"(pressure field has {pressure.size} cells)"
        )
    return float(pressure[cell])


class WellState:
    """
    The state of a set of wells.

    Parameters
    ----------
    config : Config, optional
        Constants used by ``init`` (defaults to DEFAULT_CONFIG).
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.number_of_phases = 0
        self._reset(0, 0, 0)

    def _reset(self, nw: int, nph: int, nperf: int):
        self.number_of_phases = nph
        self.bhp = np.zeros(nw)
        self.thp = np.zeros(nw)
        self.temperature = np.full(nw, self.config.STANDARD_TEMPERATURE_K)
        self.well_rates = np.zeros(nw * nph)
        self.perf_rates = np.zeros(nperf)
        self.perf_press = np.full(nperf, self.config.UNSET_PRESSURE)

    @property
    def number_of_wells(self) -> int:
        return len(self.bhp)

    def well_rates_by_well(self) -> np.ndarray:
        """``(nw, np)`` view on ``well_rates``."""
        return self.well_rates.reshape(self.number_of_wells, self.number_of_phases)

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------
    def init(self, wells: Optional[Wells], pressure) -> "WellState":
        """
        Allocate every array and give useful initial values to bhp, thp and
        well_rates depending on controls.

        Parameters
        ----------
        wells : Wells or None
            Wells to initialize. None or an empty set gives empty arrays.
        pressure : array_like or object with a ``pressure`` attribute
            Ambient pressure per cell [Pa]; must cover every top connection
            cell used.

        Returns
        -------
        WellState
            self, populated.

        Raises
        ------
        MalformedWellError
            Unknown well type, well without connections, or pressure field
            not covering a top connection cell. The state is left unchanged.
        """
        if wells is None:
            self._reset(0, 0, 0)
            return self

        # populate a scratch state so that a failure leaves self untouched
        staged = WellState(self.config)
        staged._populate(wells, pressure)
        self.number_of_phases = staged.number_of_phases
        self.bhp = staged.bhp
        self.thp = staged.thp
        self.temperature = staged.temperature
        self.well_rates = staged.well_rates
        self.perf_rates = staged.perf_rates
        self.perf_press = staged.perf_press
        return self

    def _populate(self, wells: Wells, pressure):
        nw = len(wells)
        nph = wells.number_of_phases
        self._reset(nw, nph, 0)
        if nw:
            pressure = _pressure_array(pressure)

        for w, well in enumerate(wells):
            if not isinstance(well.type, WellType):
                raise MalformedWellError(f"Well {well.name!r}: unknown well type {well.type!r}")
            rates = self.well_rates[nph * w:nph * (w + 1)]
            if well.controls.is_stopped:
                self._init_stopped_well(w, well, rates, pressure)
            else:
                self._init_open_well(w, well, rates, pressure)
            logger.debug(
                "Well %s (%s, %s): bhp=%g thp=%g rates=%s",
                well.name,
                well.type.value,
                "stopped" if well.controls.is_stopped else "open",
                self.bhp[w],
                self.thp[w],
                rates,
            )

        nperf = wells.total_connections
        self.perf_rates = np.zeros(nperf)
        self.perf_press = np.full(nperf, self.config.UNSET_PRESSURE)
        logger.info("Initialized state of %d wells with %d connections", nw, nperf)

    def _init_stopped_well(self, w: int, well: Well, rates: np.ndarray, pressure: np.ndarray):
        ctrl = well.controls
        rates[:] = 0.0
        kind = ctrl.current_kind
        if kind is ControlKind.BHP:
            self.bhp[w] = ctrl.current_target
            self._warn_zero_pressure(well, "thp")
        elif kind is ControlKind.THP:
            self.thp[w] = ctrl.current_target
            self._warn_zero_pressure(well, "bhp")
        elif kind is None or kind in (ControlKind.RESERVOIR_RATE, ControlKind.SURFACE_RATE):
            self.bhp[w] = _ambient_pressure(pressure, well)
            self.thp[w] = self.config.UNSET_PRESSURE
        else:
            raise ControlError(f"Well {well.name!r}: unhandled control kind {kind!r}")

    def _init_open_well(self, w: int, well: Well, rates: np.ndarray, pressure: np.ndarray):
        cfg = self.config
        ctrl = well.controls
        kind = ctrl.current_kind

        # 1. rates
        if kind is ControlKind.SURFACE_RATE:
            distribution = ctrl.current_distribution
            if distribution is None or len(distribution) != len(rates):
                raise ControlError(
                    f"Well {well.name!r}: surface rate distribution does not match "
                    f"{len(rates)} phases"
                )
            rates[:] = ctrl.current_target * np.asarray(distribution)
        else:
            sign = 1.0 if well.type is WellType.INJECTOR else -1.0
            rates[:] = sign * cfg.SMALL_RATE

        # 2. pressure targets anywhere in the stack, the last one wins
        self.bhp[w] = cfg.UNSET_PRESSURE
        self.thp[w] = cfg.UNSET_PRESSURE
        for control in ctrl.controls:
            if control.kind is ControlKind.BHP:
                self.bhp[w] = control.target
            elif control.kind is ControlKind.THP:
                self.thp[w] = control.target

        # 3. bhp slightly above (injector) or below (producer) reservoir pressure
        if kind is not None and kind.is_pressure:
            return
        if kind is None or kind in (ControlKind.RESERVOIR_RATE, ControlKind.SURFACE_RATE):
            if well.type is WellType.INJECTOR:
                factor = cfg.INJECTOR_BHP_FACTOR
            else:
                factor = cfg.PRODUCER_BHP_FACTOR
            self.bhp[w] = factor * _ambient_pressure(pressure, well)
        else:
            raise ControlError(f"Well {well.name!r}: unhandled control kind {kind!r}")

    def _warn_zero_pressure(self, well: Well, name: str):
        if self.config.WARN_ON_ZERO_PRESSURE:
            warnings.warn(
                f"Stopped well {well.name!r}: {name} left at 0 under a pressure control.",
                RuntimeWarning,
            )

    # -------------------------------------------------------------------------
    # Restart layout
    # -------------------------------------------------------------------------
    def restart_offsets(self) -> RestartOffsets:
        return restart_offsets(
            len(self.bhp),
            len(self.perf_press),
            len(self.perf_rates),
            len(self.temperature),
            len(self.well_rates),
        )

    @property
    def restart_bhp_offset(self) -> int:
        return self.restart_offsets().bhp

    @property
    def restart_perf_press_offset(self) -> int:
        return self.restart_offsets().perf_press

    @property
    def restart_perf_rates_offset(self) -> int:
        return self.restart_offsets().perf_rates

    @property
    def restart_temperature_offset(self) -> int:
        return self.restart_offsets().temperature

    @property
    def restart_well_rates_offset(self) -> int:
        return self.restart_offsets().well_rates

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------
    def to_dataframe(self, wells: Optional[Wells] = None) -> pd.DataFrame:
        """
        One row per well with bhp, thp, temperature and phase rates.

        Unset pressures appear as NaN. Rows are indexed by well name when
        ``wells`` is given, by well number otherwise.
        """
        unset = self.config.UNSET_PRESSURE
        data = {
            "bhp": np.where(self.bhp == unset, np.nan, self.bhp),
            "thp": np.where(self.thp == unset, np.nan, self.thp),
            "temperature": self.temperature,
        }
        rates = self.well_rates_by_well()
        for p in range(self.number_of_phases):
            data[f"rate_{p}"] = rates[:, p]
        index = pd.Index(wells.names if wells is not None else range(self.number_of_wells), name="well")
        return pd.DataFrame(data, index=index)


def initialize_well_state(
    wells: Optional[Wells],
    pressure,
    config: Optional[Config] = None,
) -> WellState:
    """
    Build a new, initialized well state.

    Parameters
    ----------
    wells : Wells or None
        Wells to initialize.
    pressure : array_like
        Ambient pressure per cell [Pa].
    config : Config, optional
        Configuration object

    Returns
    -------
    WellState
        Freshly allocated state (see ``WellState.init``).
    """
    return WellState(config).init(wells, pressure)
