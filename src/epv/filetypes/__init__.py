# epv:header:start
#
#   file         : __init__.py
#   file_relpath : src/epv/filetypes/__init__.py
#   project      : EPV
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""File type tags, capability flags and the file type registry.

Downstream rule checks depend on this package only: they receive a
`ClassifiedFile` and select rules with `ClassifiedFile.has_flag`.
"""

from __future__ import annotations

from epv.filetypes.base import ClassifiedFile, FileTypeTag, TypeFlag, flag_names
from epv.filetypes.instances import (
    FileTypeSpec,
    get_file_type_registry,
    get_file_type_spec,
    make_file,
)

__all__ = [
    "ClassifiedFile",
    "FileTypeSpec",
    "FileTypeTag",
    "TypeFlag",
    "flag_names",
    "get_file_type_registry",
    "get_file_type_spec",
    "make_file",
]
