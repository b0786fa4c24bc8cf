# epv:header:start
#
#   project      : EPV
#   file         : __init__.py
#   file_relpath : src/epv/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV CLI subcommands."""
