# epv:header:start
#
#   project      : EPV
#   file         : errors.py
#   file_relpath : src/epv/files/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Exceptions raised while loading files."""

from __future__ import annotations


class EpvError(Exception):
    """Base class for all EPV library errors."""


class FileLoadError(EpvError):
    """A path cannot be classified at all.

    The loader reports it as a fatal diagnostic and yields no file.
    """
