# epv:header:start
#
#   project      : EPV
#   file         : loader.py
#   file_relpath : src/epv/files/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""File loader: turns a path string into a typed, capability-tagged file.

The decision is made on the extension token sequence of the basename:

* no dot: plain file; a notice unless the file is a README;
* one dot (``stem.ext``): strict lookup of ``ext``;
* two dots (``stem.a.b``, e.g. ``phpunit-test.xml.all``): non-strict lookup
  of ``a`` first, then strict lookup of ``b``;
* three or more dots: an error, then strict lookup of the last segment;
* empty basename: the path cannot be loaded; a fatal diagnostic and no file.

[`FileLoader.classify`][epv.files.loader.FileLoader.classify] is a pure
function of the path and the loader configuration. It returns the diagnostics
instead of emitting them; [`FileLoader.load_file`][epv.files.loader.FileLoader.load_file]
does the emission into a sink. The loader keeps no per-call state and can be
shared between threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from epv.config.logging import get_logger
from epv.config.model import LoaderConfig
from epv.diagnostic.model import DiagnosticLog
from epv.files.errors import FileLoadError
from epv.files.extensions import binary_fallback, match_extension
from epv.files.outcome import ClassificationOutcome
from epv.files.paths import extension_tokens, split_path
from epv.filetypes.base import FileTypeTag
from epv.filetypes.instances import make_file

if TYPE_CHECKING:
    from collections.abc import Iterable

    from epv.diagnostic.types import DiagnosticSink
    from epv.files.paths import PathParts
    from epv.filetypes.base import ClassifiedFile

logger = get_logger(__name__)

README_NAME = "readme"


class FileLoader:
    """Classify paths according to a [`LoaderConfig`][epv.config.model.LoaderConfig]."""

    def __init__(self, config: LoaderConfig | None = None) -> None:
        self._config = config or LoaderConfig()

    @property
    def config(self) -> LoaderConfig:
        """Return the loader configuration."""
        return self._config

    def classify(self, path: str) -> ClassificationOutcome:
        """Decide the file type of ``path`` without emitting anything.

        Args:
            path (str): Path relative to (or below) the base directory.

        Returns:
            ClassificationOutcome: The typed file (or None on a fatal error)
                with the diagnostics to emit and the extensions tried.
        """
        parts = split_path(path, self._config.base_dir)
        log = DiagnosticLog(path=path)
        attempts: list[str] = []

        try:
            tag = self._decide(parts, log, attempts)
        except FileLoadError as exc:
            logger.debug("Cannot load %r: %s", path, exc)
            log.add_fatal(str(exc))
            return ClassificationOutcome(path, None, log.freeze(), tuple(attempts))

        logger.debug("Classified %s as %s", path, tag.value)
        file = make_file(tag, path, self._config.debug)
        return ClassificationOutcome(path, file, log.freeze(), tuple(attempts))

    def load_file(self, path: str, sink: DiagnosticSink) -> ClassifiedFile | None:
        """Classify ``path`` and emit its diagnostics into ``sink``.

        In debug mode one trace line per attempted extension is written before
        the diagnostics.

        Args:
            path (str): Path to classify.
            sink (DiagnosticSink): Receiver of the diagnostics.

        Returns:
            ClassifiedFile | None: The typed file, or None if the path could
                not be classified; callers should skip such paths.
        """
        outcome = self.classify(path)
        if self._config.debug:
            for extension in outcome.attempts:
                sink.write_debug(f"Attempting to load {path} with extension {extension}")
        for d in outcome.diagnostics:
            sink.add_message(d.level, d.message, d.path, d.blocks_clean_exit)
        return outcome.file

    def load_files(self, paths: Iterable[str], sink: DiagnosticSink) -> list[ClassifiedFile]:
        """Load every path in order, dropping the ones that cannot be classified."""
        files: list[ClassifiedFile] = []
        for path in paths:
            file = self.load_file(path, sink)
            if file is not None:
                files.append(file)
        return files

    def _decide(self, parts: PathParts, log: DiagnosticLog, attempts: list[str]) -> FileTypeTag:
        tokens = extension_tokens(parts.basename)
        size = len(tokens)

        if size == 0:
            raise FileLoadError("Filename was empty")

        if size == 1:
            # A README without extension is fine; anything else gets a notice.
            if parts.lower_basename != README_NAME:
                log.add_notice(f"The file {parts.basename} has no valid extension.")
            return FileTypeTag.PLAIN

        if size == 2:
            return self._load(parts, tokens[1], log, attempts)

        if size == 3:
            # Prefer the inner extension (phpunit-test.xml.all), then the last one.
            tag = self._try_load(parts, tokens[1], log, attempts)
            if tag is not None:
                return tag
            return self._load(parts, tokens[2], log, attempts)

        log.add_error(
            f"File ({parts.path}) seems to have too many dots. Using the last part as extension."
        )
        return self._load(parts, tokens[-1], log, attempts)

    def _try_load(
        self,
        parts: PathParts,
        extension: str,
        log: DiagnosticLog,
        attempts: list[str],
    ) -> FileTypeTag | None:
        """Non-strict lookup: None when the extension is unknown."""
        attempts.append(extension)
        logger.trace("Attempting to load %s with extension %s", parts.path, extension)
        match = match_extension(extension, parts)
        if match is None:
            return None
        if match.diagnostic is not None:
            log.extend((match.diagnostic,))
        return match.file_type

    def _load(
        self,
        parts: PathParts,
        extension: str,
        log: DiagnosticLog,
        attempts: list[str],
    ) -> FileTypeTag:
        """Strict lookup: unknown extensions fall back to binary with a warning."""
        tag = self._try_load(parts, extension, log, attempts)
        if tag is not None:
            return tag
        fallback = binary_fallback(parts)
        if fallback.diagnostic is not None:
            log.extend((fallback.diagnostic,))
        return fallback.file_type
