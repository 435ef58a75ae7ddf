from .command_line import CommandLineParserRunner
from .light_time import LightTimeOutput

__all__ = [
    "CommandLineParserRunner",
    "LightTimeOutput",
]
