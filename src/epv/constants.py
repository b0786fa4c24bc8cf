# epv:header:start
#
#   project      : EPV
#   file         : constants.py
#   file_relpath : src/epv/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

EPV_VERSION: str = get_version("epv")
