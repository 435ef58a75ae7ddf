from .general import EnvironmentSetup, EnvironmentGeneralSetup
from .bodies import (
    BodySetup,
    BodyEphemeridesSetup,
    BodyGravitySetup,
    ReferencePointsSetup,
)

__all__ = [
    "EnvironmentSetup",
    "EnvironmentGeneralSetup",
    "BodySetup",
    "BodyEphemeridesSetup",
    "BodyGravitySetup",
    "ReferencePointsSetup",
]
