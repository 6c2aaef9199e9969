"""
Centralized configuration for well state initialization.

All constants used when deriving initial per-well values live here.
Units are SI (Pascals, Kelvin, m³/s) unless otherwise noted.

Configuration Groups:
    - Sentinels: out-of-range markers for values that are not applicable
    - Rate seeding: magnitude of the signed placeholder rate
    - Pressure seeding: BHP offsets from ambient pressure by well role
    - Temperature: default well temperature
    - Diagnostics: optional warnings
"""

from dataclasses import dataclass


@dataclass
class Config:
    """
    Centralized configuration with all constants for well state initialization.

    Attributes
    ----------
    Sentinels:
        UNSET_PRESSURE : float
            Marker for a pressure that is not applicable [Pa] (default: -1e100)

    Rate seeding:
        SMALL_RATE : float
            Magnitude of the signed placeholder rate given to open wells whose
            current control is not a surface rate [m³/s] (default: 1e-14)

    Pressure seeding:
        INJECTOR_BHP_FACTOR : float
            Multiplier applied to the first connection cell pressure for an
            open injector without an active pressure control (default: 1.01)
        PRODUCER_BHP_FACTOR : float
            Same for producers (default: 0.99)

    Temperature:
        STANDARD_TEMPERATURE_C : float
            Temperature given to every well [°C] (default: 20.0)

    Diagnostics:
        WARN_ON_ZERO_PRESSURE : bool
            Emit a RuntimeWarning when a stopped well under a BHP or THP
            control keeps the other pressure at zero (default: False)
    """

    # =========================================================================
    # Sentinels
    # =========================================================================
    UNSET_PRESSURE: float = -1e100          # Pa (not applicable)

    # =========================================================================
    # Rate seeding
    # =========================================================================
    SMALL_RATE: float = 1e-14               # m³/s (sign carrier only)

    # =========================================================================
    # Pressure seeding
    # =========================================================================
    INJECTOR_BHP_FACTOR: float = 1.01       # [-] above reservoir pressure
    PRODUCER_BHP_FACTOR: float = 0.99       # [-] below reservoir pressure

    # =========================================================================
    # Temperature
    # =========================================================================
    STANDARD_TEMPERATURE_C: float = 20.0    # °C

    # =========================================================================
    # Diagnostics
    # =========================================================================
    WARN_ON_ZERO_PRESSURE: bool = False

    # =========================================================================
    # Derived Properties
    # =========================================================================
    @property
    def STANDARD_TEMPERATURE_K(self) -> float:
        """Default well temperature [K]."""
        return self.STANDARD_TEMPERATURE_C + 273.15

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.SMALL_RATE <= 0.0:
            raise ValueError(
                f"SMALL_RATE ({self.SMALL_RATE}) must be > 0, "
                "its sign is applied per well role."
            )

        if self.INJECTOR_BHP_FACTOR <= 1.0:
            raise ValueError(
                f"INJECTOR_BHP_FACTOR ({self.INJECTOR_BHP_FACTOR}) must be > 1 "
                "so that injector BHP starts above reservoir pressure."
            )

        if not 0.0 < self.PRODUCER_BHP_FACTOR < 1.0:
            raise ValueError(
                f"PRODUCER_BHP_FACTOR ({self.PRODUCER_BHP_FACTOR}) must be in (0, 1) "
                "so that producer BHP starts below reservoir pressure."
            )

        if self.UNSET_PRESSURE >= 0.0:
            raise ValueError(
                f"UNSET_PRESSURE ({self.UNSET_PRESSURE}) must be negative "
                "to stay outside any physical pressure range."
            )


# Default configuration instance
DEFAULT_CONFIG = Config()
