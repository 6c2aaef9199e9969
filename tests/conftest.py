"""
Shared fixtures for the wellstate test suite.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from wellstate.controls import ControlKind
from wellstate.wells import Wells, WellType


@pytest.fixture
def pressure():
    """Ambient pressure of a 10 cell reservoir [Pa]."""
    return np.linspace(100e5, 190e5, 10)


@pytest.fixture
def mixed_wells():
    """
    Two-phase well set covering every initialization branch.

    0 INJ   open,    surface rate 100 [0.3, 0.7], BHP 300e5 in stack
    1 PROD  open,    BHP 80e5 current
    2 PROD  stopped, BHP 5000 current
    3 INJ   stopped, reservoir rate current
    4 PROD  open,    reservoir rate current, THP 20e5 in stack
    5 INJ   stopped, THP 30e5 current
    """
    wells = Wells(number_of_phases=2)

    w = wells.add_well("INJ1", WellType.INJECTOR, [3, 4])
    w.controls.add(ControlKind.SURFACE_RATE, 100.0, [0.3, 0.7])
    w.controls.add(ControlKind.BHP, 300e5)

    w = wells.add_well("PROD1", WellType.PRODUCER, [5])
    w.controls.add(ControlKind.BHP, 80e5)

    w = wells.add_well("PROD2", WellType.PRODUCER, [6, 7, 8])
    w.controls.add(ControlKind.BHP, 5000.0)
    w.controls.stop()

    w = wells.add_well("INJ2", WellType.INJECTOR, [1])
    w.controls.add(ControlKind.RESERVOIR_RATE, 50.0)
    w.controls.stop()

    w = wells.add_well("PROD3", WellType.PRODUCER, [9, 0])
    w.controls.add(ControlKind.RESERVOIR_RATE, -20.0)
    w.controls.add(ControlKind.THP, 20e5)

    w = wells.add_well("INJ3", WellType.INJECTOR, [2])
    w.controls.add(ControlKind.THP, 30e5)
    w.controls.stop()

    return wells
