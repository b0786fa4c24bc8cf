# epv:header:start
#
#   project      : EPV
#   file         : filetypes.py
#   file_relpath : src/epv/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV `filetypes` command.

Lists all file types known to EPV along with their capability flags and
descriptions.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from epv.cli.options import output_format_option
from epv.core.formats import OutputFormat
from epv.filetypes.base import flag_names
from epv.filetypes.instances import get_file_type_registry

if TYPE_CHECKING:
    from epv.cli.console import ConsoleLike
    from epv.filetypes.instances import FileTypeSpec


def _serialize(spec: FileTypeSpec, show_details: bool) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": spec.name,
        "flags": flag_names(spec.flags),
        "description": spec.description,
    }
    if show_details:
        data["extensions"] = list(spec.extensions)
        data["filenames"] = list(spec.filenames)
        data["fallback"] = spec.fallback
    return data


@click.command(
    name="filetypes",
    help="List all supported file types.",
)
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (extensions, special filenames, fallback).",
)
def filetypes_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List supported file types.

    Args:
        show_details (bool): If True, also shows the extensions and special
            filenames that select each type.
        output_format (OutputFormat | None): Output format; text when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    registry = get_file_type_registry()
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        payload = [_serialize(spec, show_details) for spec in registry.values()]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for spec in registry.values():
            console.print(json.dumps(_serialize(spec, show_details)))
        return

    console.print(console.styled("Supported file types:\n", bold=True, underline=True))
    width = max(len(name) for name in registry)
    for name, spec in registry.items():
        label = console.styled(name.ljust(width), fg="cyan")
        flags = "|".join(flag_names(spec.flags))
        console.print(f"  {label}  {flags:<16} {spec.description}")
        if show_details:
            if spec.extensions:
                console.print(f"  {'':<{width}}  extensions: {', '.join(spec.extensions)}")
            if spec.filenames:
                console.print(f"  {'':<{width}}  filenames: {', '.join(spec.filenames)}")
            if spec.fallback:
                console.print(f"  {'':<{width}}  fallback for unknown extensions")
