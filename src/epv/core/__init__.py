# epv:header:start
#
#   project      : EPV
#   file         : __init__.py
#   file_relpath : src/epv/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Core, UI-agnostic primitives shared across EPV.

Included modules:

- ``formats``
  The `OutputFormat` vocabulary shared by CLI commands.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.
"""

from __future__ import annotations
