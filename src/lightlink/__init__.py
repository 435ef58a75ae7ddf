from .observation import (
    LightTimeCalculator,
    LightTimeSolution,
    LightTimeConvergenceError,
    LightTimeCorrection,
    LightTimeCorrectionFunctionWrapper,
    LightTimeCorrectionList,
)
from .propagation import (
    determine_ephemeris_update_order,
    EphemerisUpdateOrderError,
)

__all__ = [
    "LightTimeCalculator",
    "LightTimeSolution",
    "LightTimeConvergenceError",
    "LightTimeCorrection",
    "LightTimeCorrectionFunctionWrapper",
    "LightTimeCorrectionList",
    "determine_ephemeris_update_order",
    "EphemerisUpdateOrderError",
]
