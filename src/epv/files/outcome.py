# epv:header:start
#
#   project      : EPV
#   file         : outcome.py
#   file_relpath : src/epv/files/outcome.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Result of classifying a single path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from epv.diagnostic.model import Diagnostic
    from epv.filetypes.base import ClassifiedFile


@dataclass(frozen=True)
class ClassificationOutcome:
    """What [`FileLoader.classify`][epv.files.loader.FileLoader.classify] decided.

    Attributes:
        path (str): The path that was classified.
        file (ClassifiedFile | None): The typed file, or None when the path
            could not be classified at all.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics to emit, in the
            order they were raised.
        attempts (tuple[str, ...]): Extensions looked up, in order.
    """

    path: str
    file: ClassifiedFile | None
    diagnostics: tuple[Diagnostic, ...] = ()
    attempts: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True if a file type was produced."""
        return self.file is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this outcome."""
        return {
            "path": self.path,
            "file": self.file.to_dict() if self.file is not None else None,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
