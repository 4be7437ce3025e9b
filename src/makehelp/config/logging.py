# topmark:header:start
#
#   project      : MakeHelp
#   file         : logging.py
#   file_relpath : src/makehelp/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for MakeHelp.

Adds a TRACE level below DEBUG, a logger class exposing ``trace()``, and a
chalk-colored formatter. Renderers trace each view and log degraded links or
truncated input at DEBUG. Nothing is logged above CRITICAL unless
``MAKEHELP_LOG_LEVEL`` (or an explicit level) asks for it, so rendered help on
stdout is never mixed with diagnostics, which always go to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from makehelp.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Accepted spellings of MAKEHELP_LOG_LEVEL besides plain integers
LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


class MakehelpLogger(logging.Logger):
    """Logger class for MakeHelp with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(MakehelpLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record with chalk according to its level."""

    # Highest threshold first; the first one the record reaches wins
    LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color the whole line by severity.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored log line.
        """
        message: str = super().format(record)
        for threshold, colorize in self.LEVEL_STYLES:
            if record.levelno >= threshold:
                return colorize(message)
        return chalk.dim.red(message)


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Return the level named by ``MAKEHELP_LOG_LEVEL``, or None.

    The value is a level name (``TRACE``, ``DEBUG``, ``warn``...) or an
    integer. Unset, empty or unrecognized values yield None.

    Args:
        environ (Mapping[str, str] | None): Environment to read; ``os.environ``
            when None.

    Returns:
        int | None: The logging level, or None.
    """
    if environ is None:
        environ = os.environ
    raw: str = environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Send root logging to ``stream`` through a single `ChalkFormatter` handler.

    Args:
        level (int | None): Root level. When None, ``MAKEHELP_LOG_LEVEL`` is
            consulted and CRITICAL is the fallback.
        stream (TextIO | None): Destination; ``sys.stderr`` when None.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> MakehelpLogger:
    """Return the `MakehelpLogger` registered under ``name``."""
    return cast("MakehelpLogger", logging.getLogger(name))
