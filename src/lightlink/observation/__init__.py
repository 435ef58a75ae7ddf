from .corrections import (
    LightTimeCorrection,
    LightTimeCorrectionType,
    LightTimeCorrectionFunctionWrapper,
    LightTimeCorrectionList,
    ConstantLightTimeCorrection,
    FirstOrderRelativisticCorrection,
)
from .light_time import (
    LightTimeCalculator,
    LightTimeSolution,
    LightTimeConvergenceError,
)
from .interface import (
    LightTimeSettingsGenerator,
    light_time_calculator_from_config,
)

__all__ = [
    "LightTimeCorrection",
    "LightTimeCorrectionType",
    "LightTimeCorrectionFunctionWrapper",
    "LightTimeCorrectionList",
    "ConstantLightTimeCorrection",
    "FirstOrderRelativisticCorrection",
    "LightTimeCalculator",
    "LightTimeSolution",
    "LightTimeConvergenceError",
    "LightTimeSettingsGenerator",
    "light_time_calculator_from_config",
]
