# epv:header:start
#
#   project      : EPV
#   file         : base.py
#   file_relpath : src/epv/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""File type tags, capability flags and the classified file value.

A file type is a data tag, not a behaviour: every tag in the closed
`FileTypeTag` set carries a `TypeFlag` bitmask. Downstream rule checks select
the rules that apply to a file by testing flag membership, so a composed tag
such as `FileTypeTag.LANG` (``PHP | LANG``) is picked up by every rule that
targets PHP files as well as the language-file rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag


class TypeFlag(IntFlag):
    """Primitive capability bits composed into file type bitmasks."""

    NONE = 0
    PLAIN = 1 << 0
    PHP = 1 << 1
    LANG = 1 << 2
    HTML = 1 << 3
    JSON = 1 << 4
    COMPOSER = 1 << 5
    YML = 1 << 6
    SERVICE = 1 << 7
    XML = 1 << 8
    JS = 1 << 9
    CSS = 1 << 10
    IMAGE = 1 << 11
    BINARY = 1 << 12
    LOCK = 1 << 13


class FileTypeTag(Enum):
    """Closed set of semantic file type categories.

    Attributes:
        PLAIN: Plain text (readme, markdown, dotfiles, shell scripts).
        PHP: PHP source file.
        LANG: PHP language file under the ``language/`` directory.
        HTML: HTML template.
        JSON: Generic JSON document.
        COMPOSER: The ``composer.json`` manifest.
        YML: Generic YAML document.
        SERVICE: The ``services.yml`` container definition.
        XML: XML document.
        JAVASCRIPT: JavaScript source.
        CSS: Stylesheet.
        IMAGE: Raster image.
        BINARY: Anything that could not be recognized, and compiled artifacts.
        LOCK: Dependency lock file.
    """

    PLAIN = "plain"
    PHP = "php"
    LANG = "lang"
    HTML = "html"
    JSON = "json"
    COMPOSER = "composer"
    YML = "yml"
    SERVICE = "service"
    XML = "xml"
    JAVASCRIPT = "javascript"
    CSS = "css"
    IMAGE = "image"
    BINARY = "binary"
    LOCK = "lock"

    @property
    def flags(self) -> TypeFlag:
        """Return the capability bitmask of this tag."""
        return TAG_FLAGS[self]


TAG_FLAGS: dict[FileTypeTag, TypeFlag] = {
    FileTypeTag.PLAIN: TypeFlag.PLAIN,
    FileTypeTag.PHP: TypeFlag.PHP,
    FileTypeTag.LANG: TypeFlag.PHP | TypeFlag.LANG,
    FileTypeTag.HTML: TypeFlag.HTML,
    FileTypeTag.JSON: TypeFlag.JSON,
    FileTypeTag.COMPOSER: TypeFlag.JSON | TypeFlag.COMPOSER,
    FileTypeTag.YML: TypeFlag.YML,
    FileTypeTag.SERVICE: TypeFlag.YML | TypeFlag.SERVICE,
    FileTypeTag.XML: TypeFlag.XML,
    FileTypeTag.JAVASCRIPT: TypeFlag.JS,
    FileTypeTag.CSS: TypeFlag.CSS,
    FileTypeTag.IMAGE: TypeFlag.IMAGE,
    FileTypeTag.BINARY: TypeFlag.BINARY,
    FileTypeTag.LOCK: TypeFlag.LOCK,
}


@dataclass(frozen=True)
class ClassifiedFile:
    """Immutable result of classifying one path.

    Attributes:
        path (str): The path as given to the loader.
        file_type (FileTypeTag): The single tag chosen for the file.
        debug (bool): Whether the run is in diagnostic/verbose mode.
    """

    path: str
    file_type: FileTypeTag
    debug: bool = False

    @property
    def flags(self) -> TypeFlag:
        """Return the capability bitmask of this file's type."""
        return self.file_type.flags

    def has_flag(self, flag: TypeFlag) -> bool:
        """Return True if every bit of ``flag`` is set on this file's type.

        Args:
            flag (TypeFlag): A single flag or a combination of flags.

        Returns:
            bool: True when the flag set includes ``flag``.
        """
        return flag != TypeFlag.NONE and (self.flags & flag) == flag

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this file."""
        return {
            "path": self.path,
            "type": self.file_type.value,
            "flags": flag_names(self.flags),
            "debug": self.debug,
        }


def flag_names(flags: TypeFlag) -> list[str]:
    """Return the names of the primitive bits set in ``flags``, in bit order."""
    return [f.name for f in TypeFlag if f != TypeFlag.NONE and f in flags and f.name is not None]
