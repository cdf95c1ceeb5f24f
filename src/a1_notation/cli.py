"""Command line interface for a1-notation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import islice

from loguru import logger

from .a1 import A1
from .exceptions import A1NotationError
from .logging import setup_logging
from .notation import parse
from .outputter import ContainsOutputter, ReferenceOutputter
from .parser import parse_args


def _parse_or_report(text: str) -> A1 | None:
    """Parse text, reporting a notation error on stderr instead of raising.

    Args:
        text: A1 notation given on the command line

    Returns:
        The parsed ``A1`` or None if text is not valid notation
    """
    try:
        return parse(text)
    except A1NotationError as e:
        logger.error(f"{text}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return None


def _handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command.

    Every reference is parsed; invalid ones are reported and skipped, valid
    ones are output in canonical form.

    Returns:
        0 if every reference parsed
        1 if any reference was invalid
    """
    parsed: list[A1] = []
    success = True
    for text in args.references:
        a1 = _parse_or_report(text)
        if a1 is None:
            success = False
            continue
        parsed.append(a1)

    if parsed:
        ReferenceOutputter(parsed).output(args)
    return 0 if success else 1


def _handle_contains(args: argparse.Namespace) -> int:
    """Handle the contains command.

    Returns:
        0 if the outer reference contains the inner one
        1 if it does not, or if either reference is invalid
    """
    outer = _parse_or_report(args.outer)
    inner = _parse_or_report(args.inner)
    if outer is None or inner is None:
        return 1

    result = outer.contains(inner)
    logger.debug(f"{outer} contains {inner}: {result}")
    ContainsOutputter(outer, inner, result).output(args)
    return 0 if result else 1


def _handle_shift(args: argparse.Namespace) -> int:
    """Handle the shift command, applying right, left, down and up in that order."""
    a1 = _parse_or_report(args.reference)
    if a1 is None:
        return 1

    shifted = a1.shift_right(args.right).shift_left(args.left).shift_down(args.down).shift_up(args.up)
    logger.debug(f"Shifted {a1} to {shifted}")
    ReferenceOutputter([shifted]).output(args)
    return 0


def _handle_cells(args: argparse.Namespace) -> int:
    """Handle the cells command, listing at most args.limit items when given.

    Items are generated as they are printed, so even a whole-sheet range
    starts output at once in text and CSV formats.
    """
    a1 = _parse_or_report(args.reference)
    if a1 is None:
        return 1

    items = islice(a1.iter(), args.limit)
    if args.limit is not None and len(a1) > args.limit:
        logger.info(f"Showing {args.limit} of {len(a1)} items of {a1}")
    ReferenceOutputter(items).output(args)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the command line interface.

    This function:
    1. Parses command line arguments
    2. Sets up logging based on debug and log file options
    3. Dispatches to the appropriate command handler

    Args:
        argv: Command line arguments as a sequence of strings. If None,
            sys.argv[1:] is used.

    Returns:
        0 on success
        1 on error (invalid reference, negative containment, command failure)

    Example:
        >>> main(["contains", "A:A", "A1"])
        0
    """
    try:
        # parse command line arguments
        if argv is None:
            argv = sys.argv[1:]
        args: argparse.Namespace = parse_args(argv)

        # configure logging
        setup_logging(getattr(args, "log_file", None), getattr(args, "debug", False))

        # dispatch to the appropriate handler based on the command
        dispatch_table = {
            "parse": _handle_parse,
            "contains": _handle_contains,
            "shift": _handle_shift,
            "cells": _handle_cells,
        }
        handler = dispatch_table.get(args.command)
        if handler is None:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1
        return handler(args)
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
