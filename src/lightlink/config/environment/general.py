from ..core import SetupBase
from .bodies import BodySetup


class EnvironmentGeneralSetup(SetupBase):

    global_frame_origin: str
    global_frame_orientation: str


class EnvironmentSetup(SetupBase):

    general: EnvironmentGeneralSetup
    bodies: dict[str, BodySetup]
