"""Logging configuration for the a1-notation command line tool.

Importing the package disables the ``a1_notation`` logger, so library users
see nothing. The command line tool calls :func:`setup_logging` to turn it
back on and route records to stderr and, optionally, a rotating file.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .version import __version__

LOG_ROTATION = "10 MB"


def _add_file_sink(log_file: str, level: str) -> bool:
    """Send log records to log_file, creating its directory when missing.

    Returns:
        True if the file sink was added, False if the file cannot be used
    """
    log_path = Path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, rotation=LOG_ROTATION, level=level)
    except (OSError, ValueError) as e:
        # no sink exists yet that could report this
        print(f"Failed to set up log file: {e}", file=sys.stderr, flush=True)
        return False
    return True


def setup_logging(log_file: str | None = None, verbose: bool = False) -> None:
    """Enable the package logger and install its sinks.

    Any previously installed sinks, loguru's default one included, are
    removed first. A log file that cannot be opened is reported on stderr and
    does not stop the stderr sink from being installed.

    Args:
        log_file: Optional path to log file
        verbose: If True, set log level to DEBUG
    """
    level = "DEBUG" if verbose else "INFO"

    logger.remove()
    logger.enable("a1_notation")

    to_file = _add_file_sink(log_file, level) if log_file else False
    logger.add(sys.stderr, colorize=False, level=level)

    logger.debug(f"a1-notation {__version__}, log level {level}")
    if to_file:
        logger.debug(f"Also logging to {log_file}")
