from .interface import LightTimeSetup
from .convergence import LightTimeConvergence
from .corrections import (
    LightTimeCorrectionsSetup,
    TroposphericCorrectionSetup,
    RelativisticCorrectionSetup,
)
from .precision import LightTimePrecisionSetup

__all__ = [
    "LightTimeSetup",
    "LightTimeConvergence",
    "LightTimeCorrectionsSetup",
    "TroposphericCorrectionSetup",
    "RelativisticCorrectionSetup",
    "LightTimePrecisionSetup",
]
