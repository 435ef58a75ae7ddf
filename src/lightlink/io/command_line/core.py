import argparse
import sys
from ...core import AutoDataclass
from pathlib import Path
import abc
from ...logging import log
import traceback
from typing import Any, Generic, Sequence, Type, TypeVar


class CommandLineInput(metaclass=AutoDataclass):

    source_dirs: list[Path]
    verbose: bool


T = TypeVar("T", bound=CommandLineInput)


class CommandLineParser(
    argparse.ArgumentParser, Generic[T], metaclass=abc.ABCMeta
):

    namespace: Type[T]

    def __init__(self) -> None:

        # Initialize with constructor of base class
        super().__init__()

        # Add common argument to all command line parsers
        self.add_argument(
            "source_dirs",
            nargs="+",
            help="Directories containing configuration and results",
        )
        self.add_argument(
            "-v",
            "--verbose",
            dest="verbose",
            action="store_true",
            help="Print debug information",
        )

        return None

    def _ensure_path_exists(self, path: Path, id: str) -> None:

        if not path.exists():

            log.fatal(f"Invalid {id}: {path}")
            log.fatal(f"{traceback.extract_stack()[-2]}")
            sys.exit(1)

        return None

    @abc.abstractmethod
    def local_parser(
        self, defaults, arguments: dict[str, Any]
    ) -> dict[str, Any]:

        # Process path to source directories
        arguments["source_dirs"] = []
        for source_dir in defaults.source_dirs:

            arguments["source_dirs"].append(Path(source_dir).absolute())
            self._ensure_path_exists(
                arguments["source_dirs"][-1], "source directory"
            )

        # Process verbosity level
        arguments["verbose"] = defaults.verbose

        return arguments

    def _default_arguments(
        self, args: Sequence[str] | None = None
    ) -> argparse.Namespace:

        return super().parse_args(args)

    def parse_args(self, args: Sequence[str] | None = None) -> T:  # type: ignore

        defaults = self._default_arguments(args)
        arguments = self.local_parser(defaults, {})

        return self.namespace(**arguments)
