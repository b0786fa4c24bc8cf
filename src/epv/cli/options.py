# epv:header:start
#
#   file         : options.py
#   file_relpath : src/epv/cli/options.py
#   project      : EPV
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output format) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from epv.cli.cli_types import EnumChoiceParam
from epv.cli.errors import EpvUsageError
from epv.core.formats import OutputFormat, is_machine_format

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        Positive for verbose, negative for quiet, 0 by default.

    Raises:
        EpvUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise EpvUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -quiet_count
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Machine formats never use color.
        2. ``--color=always`` / ``--color=never``.
        3. ``FORCE_COLOR`` (set and not ``"0"``) enables, ``NO_COLOR`` disables.
        4. Otherwise color follows ``stdout.isatty()``.

    Args:
        cli_mode: Explicit color mode from CLI options.
        output_format: Output format, if already known.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if is_machine_format(output_format):
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --format option to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
