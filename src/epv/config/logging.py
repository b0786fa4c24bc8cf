# epv:header:start
#
#   project      : EPV
#   file         : logging.py
#   file_relpath : src/epv/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Logging setup for EPV.

Adds a TRACE level below DEBUG for per-extension classification attempts,
a logger class exposing `.trace()`, and a formatter that colours records
by severity with yachalk. Log records go to stderr so that machine output
on stdout stays parseable.

The log level is read from ``EPV_LOG_LEVEL``; it is independent of the CLI
``-v``/``-q`` flags, which only affect program output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "EPV_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first one the record reaches wins.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class EpvLogger(logging.Logger):
    """Logger with an extra `trace()` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(EpvLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter colouring each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the colour of its level."""
        message = super().format(record)
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``EPV_LOG_LEVEL``, or None.

    Accepts level names (case-insensitive, ``TRACE`` included) and plain
    integers. Unset, empty and unknown values give None.
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stderr handler on the root logger.

    Args:
        level (int | None): Root log level. When None, ``EPV_LOG_LEVEL`` is
            consulted, then CRITICAL is used.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> EpvLogger:
    """Return the `EpvLogger` registered under ``name``."""
    return cast("EpvLogger", logging.getLogger(name))
