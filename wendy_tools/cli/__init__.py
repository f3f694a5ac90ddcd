"""Command-line entry points for the wendy tools.

Every tool exits with status 0 on success and 1 on any usage, validation,
filesystem or I/O error.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from wendy_tools import __version__
from wendy_tools.errors import InvalidOption, UsageError


class ToolArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises ``UsageError`` instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser(prog: str, description: str, epilog: str | None = None) -> ToolArgumentParser:
    """Create a parser carrying the options every tool shares."""
    parser = ToolArgumentParser(
        prog=prog,
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def existing_dir(value: str) -> Path:
    """Validate ``--dir``: it must name an existing directory."""
    path = Path(value)
    if not path.is_dir():
        raise InvalidOption("--dir", value, f"{value} is not a directory")
    return path


def print_usage(parser: argparse.ArgumentParser) -> None:
    parser.print_usage(sys.stderr)
