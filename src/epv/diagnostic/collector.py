# epv:header:start
#
#   project      : EPV
#   file         : collector.py
#   file_relpath : src/epv/diagnostic/collector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""In-memory, thread-safe diagnostic sink.

`MessageCollector` implements [`DiagnosticSink`][epv.diagnostic.types.DiagnosticSink].
Several loaders may append to the same collector from different threads.
Appends are serialized by a lock, so diagnostics raised for a single path keep
the order in which they were emitted; ordering across paths is whatever the
threads produced.
"""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING

from epv.config.logging import get_logger
from epv.diagnostic.model import Diagnostic, compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Iterator

    from epv.diagnostic.model import DiagnosticLevel, DiagnosticStats

logger = get_logger(__name__)


class MessageCollector:
    """Accumulate diagnostics and debug lines for a whole run."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._items: list[Diagnostic] = []
        self._debug_lines: list[str] = []

    def add_message(
        self,
        level: DiagnosticLevel,
        message: str,
        path: str | None = None,
        blocks_clean_exit: bool = False,
    ) -> None:
        """Append one diagnostic attributed to ``path``."""
        diagnostic = Diagnostic(level, message, path, blocks_clean_exit)
        with self._lock:
            self._items.append(diagnostic)
        logger.debug("[%s] %s: %s", level.value, path, message)

    def write_debug(self, line: str) -> None:
        """Record a debug trace line."""
        with self._lock:
            self._debug_lines.append(line)
        logger.trace(line)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Return a snapshot of all diagnostics in append order."""
        with self._lock:
            return tuple(self._items)

    @property
    def debug_lines(self) -> tuple[str, ...]:
        """Return a snapshot of all debug lines in append order."""
        with self._lock:
            return tuple(self._debug_lines)

    def for_path(self, path: str) -> tuple[Diagnostic, ...]:
        """Return the diagnostics raised for ``path``, in emission order."""
        with self._lock:
            return tuple(d for d in self._items if d.path == path)

    def has_blocking(self) -> bool:
        """Return True if any diagnostic prevents a clean exit."""
        return any(d.is_blocking for d in self.diagnostics)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts of the collected diagnostics."""
        return compute_diagnostic_stats(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
