# epv:header:start
#
#   project      : EPV
#   file         : __init__.py
#   file_relpath : src/epv/files/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Path classification: the file loader and its extension table."""

from __future__ import annotations

from epv.files.errors import EpvError, FileLoadError
from epv.files.extensions import ExtensionMatch, resolve_extension
from epv.files.loader import FileLoader
from epv.files.outcome import ClassificationOutcome

__all__ = [
    "ClassificationOutcome",
    "EpvError",
    "ExtensionMatch",
    "FileLoadError",
    "FileLoader",
    "resolve_extension",
]
