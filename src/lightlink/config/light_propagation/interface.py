from ..core import SetupBase

from .convergence import LightTimeConvergence
from .corrections import LightTimeCorrectionsSetup
from .precision import LightTimePrecisionSetup


class LightTimeSetup(SetupBase):

    corrections: LightTimeCorrectionsSetup
    convergence: LightTimeConvergence
    precision: LightTimePrecisionSetup
    present: bool = True
