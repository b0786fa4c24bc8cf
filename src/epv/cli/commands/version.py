# epv:header:start
#
#   project      : EPV
#   file         : version.py
#   file_relpath : src/epv/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV `version` command.

Prints the current EPV version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from epv.cli.options import output_format_option
from epv.constants import EPV_VERSION
from epv.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from epv.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of EPV.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of EPV."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if is_machine_format(output_format):
        console.print(json.dumps({"version": EPV_VERSION}))
    elif int(ctx.obj.get("verbosity_level", 0)) > 0:
        console.print(f"EPV version {EPV_VERSION}")
    else:
        console.print(EPV_VERSION)
