# epv:header:start
#
#   project      : EPV
#   file         : __init__.py
#   file_relpath : src/epv/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Configuration and logging setup for EPV."""

from __future__ import annotations

from epv.config.model import LoaderConfig

__all__ = [
    "LoaderConfig",
]
