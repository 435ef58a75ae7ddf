from .core import SetupBase


class LinkEndSetup(SetupBase):

    body: str
    reference_point: str = "origin"


class LinkSetup(SetupBase):

    transmitter: LinkEndSetup
    receiver: LinkEndSetup
    present: bool = True
