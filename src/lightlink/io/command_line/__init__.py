from .core import CommandLineInput, CommandLineParser
from .runner import CommandLineInputRunner, CommandLineParserRunner

__all__ = [
    "CommandLineInput",
    "CommandLineParser",
    "CommandLineInputRunner",
    "CommandLineParserRunner",
]
