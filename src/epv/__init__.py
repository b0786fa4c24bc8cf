# epv:header:start
#
#   project      : EPV
#   file         : __init__.py
#   file_relpath : src/epv/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV package.

EPV (Extension Pre-Validator) classifies the files of an extension package
into semantic file types ahead of the per-type validation rules. It exposes a
small typed API (`epv.files.FileLoader`) and a CLI.
"""

from __future__ import annotations
