from __future__ import annotations

import argparse
import contextlib
import io
import logging
import os
import sys
from typing import IO, Any, Generator, Optional, Sequence, Type, cast

from looseorder.diagnostics import Diagnostics
from looseorder.settings import Settings

try:
    import coloredlogs

    HAS_COLOREDLOGS = True
except ModuleNotFoundError:
    HAS_COLOREDLOGS = False

log = logging.getLogger("command")

COMMANDS: list[Type["Command"]] = []

# Settings files looked up in the current directory. They must not be named
# like the looseorder package, which `python3 -m looseorder` would then import
# from the current directory.
SETTINGS_FILES = ["loosesort_settings.py", ".loosesort.py"]


class Fail(BaseException):
    """
    Failure that causes the program to exit with an error message.

    No stack trace is printed.
    """
    pass


def register(c: Type["Command"]) -> Type["Command"]:
    COMMANDS.append(c)
    return c


def _get_first_docstring_line(obj: Any) -> Optional[str]:
    if obj.__doc__ is None:
        raise RuntimeError(f"{obj!r} lacks a docstring")
    for line in cast(str, obj.__doc__).splitlines():
        line = line.strip()
        if line:
            return line
    return None


class Command:
    """
    Base class for sorting commands, with settings and a sink for ordering
    diagnostics
    """

    NAME: Optional[str] = None

    def __init__(self, args: argparse.Namespace):
        if self.NAME is None:
            self.NAME = self.__class__.__name__.lower()
        self.args = args
        self.setup_logging()
        self.settings = Settings()
        self.diagnostics = Diagnostics(logging.getLogger(self.NAME))
        self.load_settings()

    def setup_logging(self) -> None:
        FORMAT = "%(asctime)-15s %(levelname)s %(name)s %(message)s"
        if self.args.debug:
            level = logging.DEBUG
        elif self.args.verbose:
            level = logging.INFO
        else:
            level = logging.WARN

        if HAS_COLOREDLOGS:
            coloredlogs.install(level=level, fmt=FORMAT, stream=sys.stderr)
        else:
            logging.basicConfig(level=level, stream=sys.stderr, format=FORMAT)

    def load_settings(self) -> None:
        if self.args.settings:
            if not os.path.isfile(self.args.settings):
                raise Fail(f"{self.args.settings}: settings file not found")
            if not self.args.settings.endswith(".py"):
                log.warning("%s: settings file does not end in `.py`: contents ignored", self.args.settings)
            else:
                log.info("%s: loading settings", self.args.settings)
                self.settings.load(os.path.abspath(self.args.settings))
        else:
            # Load the first settings file found (if any)
            for relpath in SETTINGS_FILES:
                abspath = os.path.abspath(relpath)
                if os.path.isfile(abspath):
                    log.info("%s: loading settings", abspath)
                    self.settings.load(abspath)
                    break

        # Command line overrides for settings
        if self.args.id_field:
            self.settings.ID_FIELD = self.args.id_field
        if self.args.before_field:
            self.settings.BEFORE_FIELD = self.args.before_field
        if self.args.prefix:
            self.settings.SYNTHETIC_ID_PREFIX = self.args.prefix

    @contextlib.contextmanager
    def open_input(self, pathname: str) -> Generator[IO[str], None, None]:
        """
        Open an input file for reading, using stdin for ``-``
        """
        if pathname == "-":
            yield io.StringIO(sys.stdin.read())
            return
        try:
            fd = open(pathname, "rt")
        except OSError as e:
            raise Fail(f"{pathname}: cannot open: {e.strerror}")
        with fd:
            yield fd

    def check_diagnostics(self) -> None:
        """
        Fail in strict mode if any ordering problem was found
        """
        if self.diagnostics and self.args.strict:
            raise Fail(f"{len(self.diagnostics)} ordering problem(s) found")

    def run(self) -> Optional[int]:
        raise NotImplementedError(f"{self.__class__.__name__}.run not implemented")

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        if cls.NAME is None:
            cls.NAME = cls.__name__.lower()
        parser: argparse.ArgumentParser = subparsers.add_parser(cls.NAME, help=_get_first_docstring_line(cls))
        parser.set_defaults(command=cls)
        parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
        parser.add_argument("--debug", action="store_true", help="debugging output")
        parser.add_argument("--settings",
                            help="python settings file (default: " + " or ".join(SETTINGS_FILES) + " if present)")
        parser.add_argument("--id-field", help="name of the record identifier field. Overrides settings.ID_FIELD")
        parser.add_argument("--before-field",
                            help="name of the record 'before' field. Overrides settings.BEFORE_FIELD")
        parser.add_argument("--prefix",
                            help="prefix of generated identifiers. Overrides settings.SYNTHETIC_ID_PREFIX")
        parser.add_argument("--strict", action="store_true",
                            help="exit with an error if any ordering problem was found")
        return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Import command modules to register them
    from . import edges, files, sort  # noqa: F401

    parser = argparse.ArgumentParser(description="Tolerant topological sorting of records and edges.")
    subparsers = parser.add_subparsers(help="sub-command help")
    for c in COMMANDS:
        c.add_subparser(subparsers)

    args = parser.parse_args(argv)
    command_cls = getattr(args, "command", None)
    if command_cls is None:
        parser.print_help()
        return 2

    try:
        command = command_cls(args)
        res = command.run()
    except Fail as e:
        print(e, file=sys.stderr)
        return 1
    return res or 0
