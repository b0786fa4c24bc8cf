# epv:header:start
#
#   project      : EPV
#   file         : extensions.py
#   file_relpath : src/epv/files/extensions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Extension-to-type table.

Each recognized extension maps to a rule that turns the decomposed path into
an [`ExtensionMatch`][epv.files.extensions.ExtensionMatch]. Extensions are
matched case-insensitively; filename special cases (``composer.json``,
``services.yml``) compare the lower-cased basename.

Lookups come in two modes:

* strict: an unknown extension falls back to
  [`FileTypeTag.BINARY`][epv.filetypes.base.FileTypeTag] with a warning;
* non-strict: an unknown extension is an explicit no-match (``None``) and
  raises nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from epv.config.logging import get_logger
from epv.diagnostic.model import Diagnostic, DiagnosticLevel
from epv.filetypes.base import FileTypeTag

if TYPE_CHECKING:
    from collections.abc import Callable

    from epv.files.paths import PathParts

logger = get_logger(__name__)

LANGUAGE_DIR: Final[str] = "language"
COMPOSER_FILENAME: Final[str] = "composer.json"
SERVICES_FILENAME: Final[str] = "services.yml"


@dataclass(frozen=True)
class ExtensionMatch:
    """Outcome of a successful extension lookup.

    Attributes:
        file_type (FileTypeTag): The chosen tag.
        diagnostic (Diagnostic | None): At most one diagnostic raised by the rule.
    """

    file_type: FileTypeTag
    diagnostic: Diagnostic | None = None


def _fixed(tag: FileTypeTag) -> Callable[[PathParts], ExtensionMatch]:
    def rule(parts: PathParts) -> ExtensionMatch:
        return ExtensionMatch(tag)

    return rule


def _php_rule(parts: PathParts) -> ExtensionMatch:
    top = parts.top_directory
    if top is not None and top.strip().lower() == LANGUAGE_DIR:
        return ExtensionMatch(FileTypeTag.LANG)
    return ExtensionMatch(FileTypeTag.PHP)


def _json_rule(parts: PathParts) -> ExtensionMatch:
    if parts.lower_basename == COMPOSER_FILENAME:
        return ExtensionMatch(FileTypeTag.COMPOSER)
    return ExtensionMatch(FileTypeTag.JSON)


def _yml_rule(parts: PathParts) -> ExtensionMatch:
    if parts.lower_basename == SERVICES_FILENAME:
        return ExtensionMatch(FileTypeTag.SERVICE)
    return ExtensionMatch(FileTypeTag.YML)


def _swf_rule(parts: PathParts) -> ExtensionMatch:
    message = (
        f"Found an SWF file ({parts.basename}), please make sure to include the source "
        "files for it, as required by the GPL."
    )
    return ExtensionMatch(
        FileTypeTag.BINARY,
        Diagnostic(DiagnosticLevel.NOTICE, message, parts.path, blocks_clean_exit=True),
    )


def _ds_store_rule(parts: PathParts) -> ExtensionMatch:
    message = (
        f"Found an OS X specific file at {parts.path}, please make sure to remove it "
        "prior to submission."
    )
    return ExtensionMatch(
        FileTypeTag.BINARY,
        Diagnostic(DiagnosticLevel.ERROR, message, parts.path, blocks_clean_exit=True),
    )


EXTENSION_RULES: Final[dict[str, Callable[[PathParts], ExtensionMatch]]] = {
    "php": _php_rule,
    "html": _fixed(FileTypeTag.HTML),
    "htm": _fixed(FileTypeTag.HTML),
    "json": _json_rule,
    "yml": _yml_rule,
    "txt": _fixed(FileTypeTag.PLAIN),
    "md": _fixed(FileTypeTag.PLAIN),
    "htaccess": _fixed(FileTypeTag.PLAIN),
    "gitattributes": _fixed(FileTypeTag.PLAIN),
    "gitignore": _fixed(FileTypeTag.PLAIN),
    # no dedicated type for shell scripts yet
    "sh": _fixed(FileTypeTag.PLAIN),
    "xml": _fixed(FileTypeTag.XML),
    "js": _fixed(FileTypeTag.JAVASCRIPT),
    "css": _fixed(FileTypeTag.CSS),
    "gif": _fixed(FileTypeTag.IMAGE),
    "png": _fixed(FileTypeTag.IMAGE),
    "jpg": _fixed(FileTypeTag.IMAGE),
    "jpeg": _fixed(FileTypeTag.IMAGE),
    "swf": _swf_rule,
    "ds_store": _ds_store_rule,
    "lock": _fixed(FileTypeTag.LOCK),
}


def match_extension(extension: str, parts: PathParts) -> ExtensionMatch | None:
    """Look ``extension`` up in the table without falling back.

    Args:
        extension (str): Extension segment, without the dot, in any case.
        parts (PathParts): The decomposed path being classified.

    Returns:
        ExtensionMatch | None: The match, or None when the extension is unknown.
    """
    rule = EXTENSION_RULES.get(extension.lower())
    if rule is None:
        return None
    return rule(parts)


def binary_fallback(parts: PathParts) -> ExtensionMatch:
    """Return the strict-mode fallback for an unrecognized extension."""
    message = f"Can't detect the file type for {parts.basename}, handling it as a binary file."
    return ExtensionMatch(
        FileTypeTag.BINARY,
        Diagnostic(DiagnosticLevel.WARNING, message, parts.path, blocks_clean_exit=True),
    )


def resolve_extension(
    extension: str,
    parts: PathParts,
    *,
    strict: bool = True,
) -> ExtensionMatch | None:
    """Classify ``parts`` by ``extension`` in strict or non-strict mode.

    Args:
        extension (str): Extension segment, without the dot, in any case.
        parts (PathParts): The decomposed path being classified.
        strict (bool): When True an unknown extension yields the binary
            fallback; when False it yields None.

    Returns:
        ExtensionMatch | None: The match; None only in non-strict mode.
    """
    match = match_extension(extension, parts)
    if match is None and strict:
        logger.debug("Unknown extension %r for %s; treating as binary", extension, parts.path)
        return binary_fallback(parts)
    return match
