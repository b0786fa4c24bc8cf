# epv:header:start
#
#   project      : EPV
#   file         : console.py
#   file_relpath : src/epv/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""User-facing output for the EPV CLI.

Results go to stdout and diagnostics to stderr. Internal traces use
`logging` (see `epv.config.logging`) and never pass through the console.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Protocol, TextIO

import click

if TYPE_CHECKING:
    from epv.diagnostic.model import Diagnostic


class ConsoleLike(Protocol):
    """What CLI commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to the error stream."""
        ...

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        """Write one diagnostic line to the error stream."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled, or unchanged when color is off."""
        ...


class ClickConsole:
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styling when True.
        out (TextIO | None): Output stream; `sys.stdout` at construction time by default.
        err (TextIO | None): Error stream; `sys.stderr` at construction time by default.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def _echo(self, text: str, stream: TextIO, nl: bool) -> None:
        click.echo(text, file=stream, nl=nl, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        self._echo(text, self.out, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream in red."""
        self._echo(self.styled(text, fg="bright_red"), self.err, nl)

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        """Write ``[level] message``, coloured by the diagnostic level."""
        text = f"[{diagnostic.level.value}] {diagnostic.message}"
        if self.enable_color:
            text = diagnostic.level.color(text)
        self._echo(text, self.err, True)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply `click.style` when color is enabled."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
