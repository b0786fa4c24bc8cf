# epv:header:start
#
#   project      : EPV
#   file         : instances.py
#   file_relpath : src/epv/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""File type registry and constructors for EPV.

Builds the runtime registry of [`FileTypeSpec`][epv.filetypes.instances.FileTypeSpec]
entries, one per [`FileTypeTag`][epv.filetypes.base.FileTypeTag]. The registry is
constructed lazily on first access and cached thereafter.

Notes:
    * The returned mapping is a plain ``dict`` keyed by tag value but should be
      treated as immutable by callers.
    * ``extensions`` and ``filenames`` are descriptive: they document which
      extensions and special basenames can produce a tag. The decision itself
      lives in [`epv.files.extensions`][epv.files.extensions].
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from epv.config.logging import EpvLogger, get_logger
from epv.filetypes.base import ClassifiedFile, FileTypeTag, TypeFlag

logger: EpvLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileTypeSpec:
    """Registry entry describing one file type tag.

    Attributes:
        tag (FileTypeTag): The tag this entry describes.
        description (str): Human-readable description.
        extensions (tuple[str, ...]): Lower-case extensions (without dot) that
            can produce this tag.
        filenames (tuple[str, ...]): Lower-case basenames that select this tag
            over the plain extension mapping.
        fallback (bool): True for the tag used when nothing else matches.
    """

    tag: FileTypeTag
    description: str
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    fallback: bool = False

    @property
    def name(self) -> str:
        """Return the registry key of this entry."""
        return self.tag.value

    @property
    def flags(self) -> TypeFlag:
        """Return the capability bitmask of the tag."""
        return self.tag.flags


_BUILTIN_SPECS: Final[tuple[FileTypeSpec, ...]] = (
    FileTypeSpec(
        FileTypeTag.PLAIN,
        "Plain text files, including extensionless files such as README",
        extensions=("txt", "md", "htaccess", "gitattributes", "gitignore", "sh"),
    ),
    FileTypeSpec(FileTypeTag.PHP, "PHP source files", extensions=("php",)),
    FileTypeSpec(
        FileTypeTag.LANG,
        "PHP language files below the language/ directory",
        extensions=("php",),
    ),
    FileTypeSpec(FileTypeTag.HTML, "HTML templates", extensions=("html", "htm")),
    FileTypeSpec(FileTypeTag.JSON, "JSON documents", extensions=("json",)),
    FileTypeSpec(
        FileTypeTag.COMPOSER,
        "Composer package manifest",
        extensions=("json",),
        filenames=("composer.json",),
    ),
    FileTypeSpec(FileTypeTag.YML, "YAML documents", extensions=("yml",)),
    FileTypeSpec(
        FileTypeTag.SERVICE,
        "Service container definitions",
        extensions=("yml",),
        filenames=("services.yml",),
    ),
    FileTypeSpec(FileTypeTag.XML, "XML documents", extensions=("xml",)),
    FileTypeSpec(FileTypeTag.JAVASCRIPT, "JavaScript sources", extensions=("js",)),
    FileTypeSpec(FileTypeTag.CSS, "Stylesheets", extensions=("css",)),
    FileTypeSpec(FileTypeTag.IMAGE, "Images", extensions=("gif", "png", "jpg", "jpeg")),
    FileTypeSpec(
        FileTypeTag.BINARY,
        "Compiled artifacts and files of unknown type",
        extensions=("swf", "ds_store"),
        fallback=True,
    ),
    FileTypeSpec(FileTypeTag.LOCK, "Dependency lock files", extensions=("lock",)),
)


def _generate_registry(specs: tuple[FileTypeSpec, ...]) -> dict[str, FileTypeSpec]:
    """Generate a registry mapping tag values to their specs."""
    registry: dict[str, FileTypeSpec] = {}
    for spec in specs:
        if spec.name in registry:
            raise ValueError(f"Duplicate FileType name: {spec.name}")
        registry[spec.name] = spec
    missing = [tag.value for tag in FileTypeTag if tag.value not in registry]
    if missing:
        raise ValueError(f"File type tags without registry entry: {', '.join(missing)}")
    return registry


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileTypeSpec]:
    """Return (and cache) the file type registry."""
    registry = _generate_registry(_BUILTIN_SPECS)
    logger.debug("Loaded %d file types", len(registry))
    return registry


def get_file_type_spec(tag: FileTypeTag) -> FileTypeSpec:
    """Return the registry entry for ``tag``."""
    return get_file_type_registry()[tag.value]


def make_file(tag: FileTypeTag, path: str, debug: bool = False) -> ClassifiedFile:
    """Construct the classified file value for ``tag``.

    Args:
        tag (FileTypeTag): The chosen file type.
        path (str): The path as given to the loader.
        debug (bool): Diagnostic/verbose mode flag carried on the result.

    Returns:
        ClassifiedFile: The immutable classified file.
    """
    return ClassifiedFile(path=path, file_type=tag, debug=debug)
