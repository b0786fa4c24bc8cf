# epv:header:start
#
#   project      : EPV
#   file         : types.py
#   file_relpath : src/epv/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Shared typing helpers for EPV diagnostics.

Defines the structural interface of a diagnostic sink. The loader emits into
any object with this shape and never reads diagnostics back from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from epv.diagnostic.model import DiagnosticLevel


class DiagnosticSink(Protocol):
    """Structural interface for the output that receives diagnostics."""

    def add_message(
        self,
        level: DiagnosticLevel,
        message: str,
        path: str | None = None,
        blocks_clean_exit: bool = False,
    ) -> None:
        """Append one diagnostic. Return values are ignored."""
        ...

    def write_debug(self, line: str) -> None:
        """Emit a verbose trace line (only called in debug mode)."""
        ...
