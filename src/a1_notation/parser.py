"""Command line argument parser for a1-notation.

This module defines the command line interface of the ``a1-notation`` tool:

- ``parse``: check references and print them in canonical form
- ``contains``: test whether one reference contains another
- ``shift``: move a reference by whole columns and rows
- ``cells``: list the cells, columns or rows a reference is made of

Every command takes the same format options (text, JSON, CSV) and the tool
takes the common logging options.
"""

from __future__ import annotations

import argparse
from argparse import _SubParsersAction
from collections.abc import Sequence

from .version import __version__


def _non_negative_int(value: str) -> int:
    """Argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        error_msg = f"invalid integer: {value!r}"
        raise argparse.ArgumentTypeError(error_msg) from None
    if number < 0:
        error_msg = f"must not be negative: {value!r}"
        raise argparse.ArgumentTypeError(error_msg)
    return number


def _add_format_options(parser: argparse.ArgumentParser, text_help: str = "Output in text format (default)") -> None:
    """Add common format options to a parser.

    Adds mutually exclusive output format options to the given parser:

        --text: Output in text format (default)
        --json: Output in JSON format
        --csv:  Output as comma-separated values

    Args:
        parser: The parser to add format options to
        text_help: Help text for the --text option
    """
    format_group = parser.add_mutually_exclusive_group()
    format_group.add_argument(
        "--text",
        action="store_true",
        help=text_help,
    )
    format_group.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    format_group.add_argument(
        "--csv",
        action="store_true",
        help="Output as comma-separated values",
    )
    parser.set_defaults(text=True)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    """Add the logging options shared by every command.

    Args:
        parser: The parser to add options to
    """
    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to log file",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output",
    )


def _add_parse_parser(subparsers: _SubParsersAction[argparse.ArgumentParser]) -> None:
    """Add the parse command parser.

    Args:
        subparsers: The subparsers to add the parse parser to
    """
    parse_parser = subparsers.add_parser("parse", help="Parse references and print them in canonical form")
    parse_parser.add_argument("references", nargs="+", help="A1 references such as 'Sheet1!$A$1:C3'")
    _add_format_options(parse_parser, text_help="Output one canonical reference per line (default)")


def _add_contains_parser(subparsers: _SubParsersAction[argparse.ArgumentParser]) -> None:
    """Add the contains command parser.

    The command exits with 0 when OUTER contains INNER and 1 otherwise.

    Args:
        subparsers: The subparsers to add the contains parser to
    """
    contains_parser = subparsers.add_parser("contains", help="Test whether one reference contains another")
    contains_parser.add_argument("outer", help="The containing reference")
    contains_parser.add_argument("inner", help="The reference that may be contained")
    _add_format_options(contains_parser, text_help="Output 'true' or 'false' (default)")


def _add_shift_parser(subparsers: _SubParsersAction[argparse.ArgumentParser]) -> None:
    """Add the shift command parser.

    Moves are applied in the order right, left, down, up. Moving past column A
    or row 1 stops there.

    Args:
        subparsers: The subparsers to add the shift parser to
    """
    shift_parser = subparsers.add_parser("shift", help="Move a reference by columns and rows")
    shift_parser.add_argument("reference", help="The reference to move")
    for direction, axis in (("right", "columns"), ("left", "columns"), ("down", "rows"), ("up", "rows")):
        shift_parser.add_argument(
            f"--{direction}",
            type=_non_negative_int,
            default=0,
            metavar="N",
            help=f"Move N {axis} {direction}",
        )
    _add_format_options(shift_parser)


def _add_cells_parser(subparsers: _SubParsersAction[argparse.ArgumentParser]) -> None:
    """Add the cells command parser.

    Args:
        subparsers: The subparsers to add the cells parser to
    """
    cells_parser = subparsers.add_parser("cells", help="List the cells, columns or rows of a reference")
    cells_parser.add_argument("reference", help="The reference to enumerate")
    cells_parser.add_argument(
        "--limit",
        type=_non_negative_int,
        metavar="N",
        help="Stop after N items",
    )
    _add_format_options(cells_parser)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Command line arguments to parse. If None, sys.argv[1:] is used.

    Returns:
        Parsed arguments as a Namespace object
    """
    parser = argparse.ArgumentParser(prog="a1-notation", description="Parse and manipulate A1 spreadsheet references")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program version and exit",
    )

    _add_common_options(parser)

    # Add subcommands
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_parse_parser(subparsers)
    _add_contains_parser(subparsers)
    _add_shift_parser(subparsers)
    _add_cells_parser(subparsers)

    return parser.parse_args(argv)
