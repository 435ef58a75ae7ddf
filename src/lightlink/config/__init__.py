from .core import SetupBase, ConfigurationError
from .general import CaseSetup, SimulationIntervalSetup

__all__ = [
    "SetupBase",
    "ConfigurationError",
    "CaseSetup",
    "SimulationIntervalSetup",
]
