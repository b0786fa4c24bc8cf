# epv:header:start
#
#   project      : EPV
#   file         : paths.py
#   file_relpath : src/epv/files/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Path decomposition used by the file loader.

Paths are POSIX strings. The basename is taken from the raw string, so a
path ending in ``/`` has an empty basename; directory segments are computed
relative to the base directory by path components rather than by substring
replacement.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class PathParts:
    """A path split into the pieces the loader decides on.

    Attributes:
        path (str): The full path as given.
        basename (str): The path minus its directory.
        directories (tuple[str, ...]): Directory segments relative to the
            base directory, outermost first.
    """

    path: str
    basename: str
    directories: tuple[str, ...]

    @property
    def lower_basename(self) -> str:
        """Return the lower-cased basename."""
        return self.basename.lower()

    @property
    def top_directory(self) -> str | None:
        """Return the first directory segment, or None for top-level files."""
        return self.directories[0] if self.directories else None


def split_path(path: str, base_dir: str = "") -> PathParts:
    """Split ``path`` into basename and base-relative directory segments.

    Args:
        path (str): Path to split.
        base_dir (str): Base directory; when ``path`` lies below it the
            directory segments are made relative to it, otherwise ``path`` is
            used as given.

    Returns:
        PathParts: The decomposed path.
    """
    basename = posixpath.basename(path)
    pure = PurePosixPath(path)
    if base_dir:
        try:
            pure = pure.relative_to(PurePosixPath(base_dir))
        except ValueError:
            pass
    parent = pure if not basename else pure.parent
    directories = tuple(p for p in parent.parts if p not in (".", "/"))
    return PathParts(path=path, basename=basename, directories=directories)


def extension_tokens(basename: str) -> list[str]:
    """Split a basename on ``.``; an empty basename has no tokens."""
    if not basename:
        return []
    return basename.split(".")
