from .core import CommandLineInput, CommandLineParser
from pathlib import Path
import typing


class CommandLineInputRunner(CommandLineInput):

    config_files: list[Path]
    at_transmission: bool
    only_update_order: bool


class CommandLineParserRunner(CommandLineParser[CommandLineInputRunner]):

    namespace = CommandLineInputRunner

    def __init__(self) -> None:

        super().__init__()

        self.add_argument(
            "-t",
            dest="at_transmission",
            action="store_true",
            help="Interpret epochs as transmission epochs",
        )
        self.add_argument(
            "-o",
            dest="only_update_order",
            action="store_true",
            help="Only determine the ephemeris update order",
        )

        return None

    def local_parser(self, defaults, arguments) -> dict[str, typing.Any]:

        arguments = super().local_parser(defaults, arguments)

        # Define path to configuration file
        arguments["config_files"] = []
        for source_dir in arguments["source_dirs"]:

            arguments["config_files"].append(source_dir / "configuration.yaml")
            self._ensure_path_exists(
                arguments["config_files"][-1], "configuration file"
            )

        # Define flags
        arguments["at_transmission"] = defaults.at_transmission
        arguments["only_update_order"] = defaults.only_update_order

        return arguments
