# epv:header:start
#
#   project      : EPV
#   file         : classify.py
#   file_relpath : src/epv/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV `classify` command.

Classifies the given path strings into file types. Paths are not opened or
read and directories are not traversed: each argument is classified as a path
string relative to the base directory.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from epv.cli.options import output_format_option
from epv.config.logging import get_logger
from epv.config.model import LoaderConfig
from epv.core.exit_codes import ExitCode
from epv.core.formats import OutputFormat
from epv.diagnostic.collector import MessageCollector
from epv.filetypes.base import flag_names
from epv.files.loader import FileLoader

if TYPE_CHECKING:
    from epv.cli.console import ConsoleLike
    from epv.diagnostic.model import Diagnostic
    from epv.filetypes.base import ClassifiedFile

logger = get_logger(__name__)


def _result_payload(
    path: str,
    file: ClassifiedFile | None,
    diagnostics: tuple[Diagnostic, ...],
) -> dict[str, object]:
    return {
        "path": path,
        "file": file.to_dict() if file is not None else None,
        "diagnostics": [d.to_dict() for d in diagnostics],
    }


@click.command(
    name="classify",
    help="Classify paths into EPV file types.",
    epilog="""
Each PATH is classified by name only; nothing is read from disk. The command exits
with a non-zero status if a path could not be classified, or if an error that blocks
a clean exit was raised.
""",
)
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--base-dir",
    "base_dir",
    default=None,
    help="Base directory of the extension package (default: $EPV_BASE_DIR or none).",
)
@click.option(
    "--debug/--no-debug",
    "debug",
    default=None,
    help="Diagnostic mode: print the extensions tried for every path.",
)
@output_format_option
def classify_command(
    *,
    paths: tuple[str, ...],
    base_dir: str | None = None,
    debug: bool | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Classify PATHS and report their file types and diagnostics.

    Args:
        paths (tuple[str, ...]): Path strings to classify.
        base_dir (str | None): Base directory override.
        debug (bool | None): Debug mode override.
        output_format (OutputFormat | None): Output format; text when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    config = LoaderConfig.from_env().with_overrides(base_dir=base_dir, debug=debug)
    loader = FileLoader(config)
    sink = MessageCollector()
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    logger.debug("Classifying %d path(s) with %r", len(paths), config)

    results: list[dict[str, object]] = []
    for path in paths:
        n_before = len(sink.debug_lines)
        start = len(sink)
        file = loader.load_file(path, sink)
        diagnostics = sink.diagnostics[start:]

        if fmt == OutputFormat.TEXT:
            for line in sink.debug_lines[n_before:]:
                console.print(console.styled(line, dim=True))
            if file is None:
                console.print(f"{path}\t-")
            elif vlevel > 0:
                flags = "|".join(flag_names(file.flags))
                console.print(f"{path}\t{file.file_type.value}\t{flags}")
            else:
                console.print(f"{path}\t{file.file_type.value}")
            for diagnostic in diagnostics:
                if vlevel < 0 and not diagnostic.is_blocking:
                    continue
                console.diagnostic(diagnostic)
        elif fmt == OutputFormat.NDJSON:
            console.print(json.dumps(_result_payload(path, file, diagnostics)))
        else:
            results.append(_result_payload(path, file, diagnostics))

    if fmt == OutputFormat.JSON:
        payload: dict[str, object] = {"results": results}
        if config.debug:
            payload["debug"] = list(sink.debug_lines)
        console.print(json.dumps(payload, indent=2))

    stats = sink.stats()
    logger.info(
        "Classified %d path(s): %d notice(s), %d warning(s), %d error(s), %d fatal",
        len(paths),
        stats.n_notice,
        stats.n_warning,
        stats.n_error,
        stats.n_fatal,
    )
    if sink.has_blocking():
        ctx.exit(ExitCode.FAILURE)
