from ..core import SetupBase
import numpy as np


class LightTimePrecisionSetup(SetupBase):

    observation: np.dtype
    time: np.dtype
    state: np.dtype
    present: bool = True
