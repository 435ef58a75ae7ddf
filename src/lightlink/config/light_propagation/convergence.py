from ..core import SetupBase


class LightTimeConvergence(SetupBase):

    iterate_corrections: bool = False
    max_iterations: int = 20
    tolerance: float = 0.0
    present: bool = True
