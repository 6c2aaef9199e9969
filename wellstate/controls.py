"""
Well control stacks.

A well holds an ordered list of controls (operating constraints) and operates
under exactly one of them at a time, the current control. A control is a kind
(BHP, THP, reservoir rate or surface rate), a scalar target and, for surface
rate controls, a per-phase distribution that sums to one.

A stack can also be stopped: the well is shut in but keeps its controls and
its current control index.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from .exceptions import ControlError


# Tolerance on the sum of a surface rate distribution
DISTRIBUTION_TOL = 1e-10


class ControlKind(Enum):
    """Closed set of control kinds."""

    BHP = "bhp"
    THP = "thp"
    RESERVOIR_RATE = "reservoir_rate"
    SURFACE_RATE = "surface_rate"

    @property
    def is_pressure(self) -> bool:
        """True for BHP and THP controls."""
        return self in (ControlKind.BHP, ControlKind.THP)


@dataclass
class WellControl:
    """
    One operating constraint.

    Attributes
    ----------
    kind : ControlKind
        Control kind.
    target : float
        Target value [Pa] for pressure controls, [m³/s] for rate controls.
    distribution : np.ndarray, optional
        Per-phase fractions of the target (surface rate controls).
    """
    kind: ControlKind
    target: float
    distribution: Optional[np.ndarray] = None


def _check_distribution(distribution, number_of_phases: Optional[int]) -> np.ndarray:
    distr = np.asarray(distribution, dtype=float)
    if distr.ndim != 1 or distr.size == 0:
        raise ControlError(f"Distribution must be a non empty 1D sequence, got {distribution!r}")
    if number_of_phases is not None and distr.size != number_of_phases:
        raise ControlError(
            f"Distribution has {distr.size} entries but the well set has "
            f"{number_of_phases} phases."
        )
    if np.any(distr < 0.0):
        raise ControlError(f"Distribution entries must be non negative, got {distr}")
    if abs(distr.sum() - 1.0) > DISTRIBUTION_TOL:
        raise ControlError(f"Distribution must sum to 1, got {distr.sum()}")
    return distr


@dataclass
class WellControls:
    """
    Ordered control stack of a single well.

    Attributes
    ----------
    number_of_phases : int, optional
        When given, every distribution is checked against it.
    controls : list of WellControl
        Controls in insertion order.
    current : int
        Index of the active control, -1 when none is active.
    stopped : bool
        Shut-in flag.
    """
    number_of_phases: Optional[int] = None
    controls: List[WellControl] = field(default_factory=list)
    current: int = -1
    stopped: bool = False

    def add(
        self,
        kind: ControlKind,
        target: float,
        distribution: Optional[Sequence[float]] = None,
    ) -> int:
        """
        Append a control to the stack.

        The first control added becomes the current one.

        Returns
        -------
        int
            Index of the new control in the stack.
        """
        if not isinstance(kind, ControlKind):
            raise ControlError(f"Unknown control kind: {kind!r}")
        if distribution is not None:
            distribution = _check_distribution(distribution, self.number_of_phases)
        elif kind is ControlKind.SURFACE_RATE:
            raise ControlError("A surface rate control needs a phase distribution.")
        self.controls.append(WellControl(kind, float(target), distribution))
        if self.current < 0:
            self.current = 0
        return len(self.controls) - 1

    def clear(self):
        """Remove every control; the stack keeps its stopped flag."""
        self.controls.clear()
        self.current = -1

    def set_current(self, index: int):
        if not 0 <= index < len(self.controls):
            raise ControlError(
                f"Control index {index} out of range for a stack of {len(self.controls)}"
            )
        self.current = index

    def stop(self):
        self.stopped = True

    def open(self):
        self.stopped = False

    @property
    def is_stopped(self) -> bool:
        return self.stopped

    def __len__(self) -> int:
        return len(self.controls)

    def _get(self, index: int) -> WellControl:
        if not 0 <= index < len(self.controls):
            raise ControlError(
                f"Control index {index} out of range for a stack of {len(self.controls)}"
            )
        return self.controls[index]

    def iget_kind(self, index: int) -> ControlKind:
        return self._get(index).kind

    def iget_target(self, index: int) -> float:
        return self._get(index).target

    def iget_distribution(self, index: int) -> Optional[np.ndarray]:
        return self._get(index).distribution

    @property
    def current_control(self) -> Optional[WellControl]:
        """The active control, None if no control is active."""
        if self.current < 0:
            return None
        return self.controls[self.current]

    @property
    def current_kind(self) -> Optional[ControlKind]:
        control = self.current_control
        return None if control is None else control.kind

    @property
    def current_target(self) -> float:
        control = self.current_control
        if control is None:
            raise ControlError("No current control.")
        return control.target

    @property
    def current_distribution(self) -> Optional[np.ndarray]:
        control = self.current_control
        if control is None:
            raise ControlError("No current control.")
        return control.distribution
