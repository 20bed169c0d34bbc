"""Logging setup for PassCheck.

Log records go to stderr so command output on stdout stays parseable.
Passwords are never passed to a logger; only counts, rule names and kinds.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(verbose: bool = False, quiet: bool = False, level: Optional[int] = None) -> int:
    """Pick the root log level.

    An explicit level wins; otherwise verbose means DEBUG, quiet means
    WARNING, and the default is INFO. verbose beats quiet.
    """
    if level is not None:
        return level
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the root logger. Safe to call more than once.

    Args:
        verbose: Log at DEBUG
        quiet: Only log warnings and errors (ignored when verbose)
        level: Explicit log level (overrides verbose and quiet)
        stream: Destination stream (defaults to stderr)
    """
    # Detach earlier handlers without closing streams we do not own
    logging.getLogger().handlers.clear()

    logging.basicConfig(
        level=resolve_log_level(verbose=verbose, quiet=quiet, level=level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stderr,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (typically __name__)."""
    return logging.getLogger(name)
