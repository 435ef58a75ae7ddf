from ..core import SetupBase
from ...epochs import Epoch
import numpy as np


class BodyEphemeridesSetup(SetupBase):

    model: str
    ephemeris_frame_origin: str
    ephemeris_frame_orientation: str
    state: np.ndarray
    reference_epoch: Epoch
    radius: float
    period: float
    phase: float = 0.0
    present: bool = True


class BodyGravitySetup(SetupBase):

    gravitational_parameter: float
    present: bool = True


class ReferencePointsSetup(SetupBase):

    positions: dict[str, np.ndarray]
    present: bool = True


class BodySetup(SetupBase):

    central_body: str
    ephemerides: BodyEphemeridesSetup
    gravity: BodyGravitySetup
    reference_points: ReferencePointsSetup
    present: bool = True
