"""
Exceptions raised on malformed input.

All of them derive from ValueError: they report bad wells, control stacks,
grids or restart records, never a transient condition.
"""


class WellStateError(ValueError):
    """Base class for every error raised by this package."""


class MalformedWellError(WellStateError):
    """A well has an unknown type, no connections, or no ambient pressure."""


class ControlError(WellStateError):
    """Invalid operation on a well control stack."""


class GridTopologyError(WellStateError):
    """Grid dimensions or vertical connectivity are inconsistent."""


class RestartLayoutError(WellStateError):
    """A restart record does not match the state it is read into."""
