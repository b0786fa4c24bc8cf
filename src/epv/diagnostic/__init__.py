# epv:header:start
#
#   project      : EPV
#   file         : __init__.py
#   file_relpath : src/epv/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - While a single path is classified, diagnostics accumulate in a
      `DiagnosticLog` and are frozen into the classification outcome.
    - Emission goes through any `DiagnosticSink`; `MessageCollector` is the
      in-memory, thread-safe implementation used by the CLI and the tests.
"""

from __future__ import annotations

from epv.diagnostic.collector import MessageCollector
from epv.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    compute_diagnostic_stats,
)
from epv.diagnostic.types import DiagnosticSink

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticSink",
    "DiagnosticStats",
    "MessageCollector",
    "compute_diagnostic_stats",
]
