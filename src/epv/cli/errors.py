# epv:header:start
#
#   project      : EPV
#   file         : errors.py
#   file_relpath : src/epv/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Exceptions for the EPV CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. Exceptions prefer the project console if available
(see `show()`); if no console is present in the Click context, they fall back
to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from epv.core.exit_codes import ExitCode


class EpvCliError(click.ClickException):
    """Base class for all EPV CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class EpvUsageError(EpvCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
