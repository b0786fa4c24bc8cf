# epv:header:start
#
#   project      : EPV
#   file         : model.py
#   file_relpath : src/epv/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Core diagnostic types and helpers for EPV.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload.
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable per-file collection used while classifying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from epv.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from epv.config.logging import EpvLogger


logger: EpvLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics raised while classifying files.

    Levels are ordered by importance: FATAL > ERROR > WARNING > NOTICE.
    """

    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def severity(self) -> int:
        """Return the numeric rank of this level (higher is more severe)."""
        return _SEVERITY[self]

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.NOTICE: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red,
                DiagnosticLevel.FATAL: chalk.red_bright.bold,
            }[self],
        )


_SEVERITY: dict[DiagnosticLevel, int] = {
    DiagnosticLevel.NOTICE: 1,
    DiagnosticLevel.WARNING: 2,
    DiagnosticLevel.ERROR: 3,
    DiagnosticLevel.FATAL: 4,
}


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message.

    Attributes:
        level (DiagnosticLevel): Severity of the diagnostic.
        message (str): Human-readable message.
        path (str | None): Path of the file the diagnostic was raised for.
        blocks_clean_exit (bool): Whether this diagnostic should prevent an
            otherwise clean exit status.
    """

    level: DiagnosticLevel
    message: str
    path: str | None = None
    blocks_clean_exit: bool = False

    @property
    def is_blocking(self) -> bool:
        """Return True if this diagnostic makes the run exit with a failure.

        A fatal diagnostic always blocks; an error blocks when flagged.
        """
        if self.level is DiagnosticLevel.FATAL:
            return True
        return self.level is DiagnosticLevel.ERROR and self.blocks_clean_exit

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this diagnostic."""
        return {
            "level": self.level.value,
            "message": self.message,
            "path": self.path,
            "blocks_clean_exit": self.blocks_clean_exit,
        }


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_notice: int
    n_warning: int
    n_error: int
    n_fatal: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_notice + self.n_warning + self.n_error + self.n_fatal


@dataclass
class DiagnosticLog:
    """Mutable, per-file collection of diagnostics.

    The loader fills one log per classified path and freezes it into the
    outcome once the decision is made.
    """

    path: str | None = None
    items: list[Diagnostic] = field(default_factory=lambda: [])

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of this log's diagnostics."""
        return tuple(self.items)

    def _add(self, level: DiagnosticLevel, message: str, blocks_clean_exit: bool) -> None:
        diagnostic = Diagnostic(level, message, self.path, blocks_clean_exit)
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", level.value, message)

    def add_notice(self, message: str, *, blocks_clean_exit: bool = True) -> None:
        """Add a ``notice`` diagnostic to the log."""
        self._add(DiagnosticLevel.NOTICE, message, blocks_clean_exit)

    def add_warning(self, message: str, *, blocks_clean_exit: bool = True) -> None:
        """Add a ``warning`` diagnostic to the log."""
        self._add(DiagnosticLevel.WARNING, message, blocks_clean_exit)

    def add_error(self, message: str, *, blocks_clean_exit: bool = True) -> None:
        """Add an ``error`` diagnostic to the log."""
        self._add(DiagnosticLevel.ERROR, message, blocks_clean_exit)

    def add_fatal(self, message: str) -> None:
        """Add a ``fatal`` diagnostic to the log.

        Fatal diagnostics always block a clean exit.
        """
        self._add(DiagnosticLevel.FATAL, message, True)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append already-built diagnostics, preserving their order."""
        for diagnostic in diagnostics:
            self.items.append(diagnostic)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    counts: dict[DiagnosticLevel, int] = dict.fromkeys(DiagnosticLevel, 0)
    for d in diagnostics:
        counts[d.level] += 1
    return DiagnosticStats(
        n_notice=counts[DiagnosticLevel.NOTICE],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_error=counts[DiagnosticLevel.ERROR],
        n_fatal=counts[DiagnosticLevel.FATAL],
    )
