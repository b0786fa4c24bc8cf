# epv:header:start
#
#   project      : EPV
#   file         : __main__.py
#   file_relpath : src/epv/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Module entry point for running EPV via ``python -m epv``.

Examples:
    Classify two paths using the module interface::

        python -m epv classify composer.json language/en/common.php
"""

from __future__ import annotations

from epv.cli.main import cli

if __name__ == "__main__":
    cli()
