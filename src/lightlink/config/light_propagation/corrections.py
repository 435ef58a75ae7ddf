from ..core import SetupBase


class TroposphericCorrectionSetup(SetupBase):

    model: str
    delay: float
    present: bool = True


class RelativisticCorrectionSetup(SetupBase):

    model: str
    bodies: list[str]
    ppn_gamma: float = 1.0
    present: bool = True


class LightTimeCorrectionsSetup(SetupBase):

    tropospheric: TroposphericCorrectionSetup
    relativistic: RelativisticCorrectionSetup
    present: bool = True
