# epv:header:start
#
#   project      : EPV
#   file         : model.py
#   file_relpath : src/epv/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Configuration consumed by the file loader.

The loader needs two values from its host: the base directory of the
extension package being validated (used by directory-sensitive rules) and the
debug flag (passed through to every produced
[`ClassifiedFile`][epv.filetypes.base.ClassifiedFile]).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Final

from epv.config.logging import get_logger

logger = get_logger(__name__)

BASE_DIR_ENV: Final[str] = "EPV_BASE_DIR"
DEBUG_ENV: Final[str] = "EPV_DEBUG"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class LoaderConfig:
    """Immutable configuration for [`FileLoader`][epv.files.loader.FileLoader].

    Attributes:
        base_dir (str): Root directory of the package being validated, as a
            POSIX path string. Empty means paths are already relative.
        debug (bool): Diagnostic/verbose mode. Carried on classified files and
            enables debug trace lines on the sink; never changes the decision.
    """

    base_dir: str = ""
    debug: bool = False

    @classmethod
    def from_env(cls) -> LoaderConfig:
        """Build a config from ``EPV_BASE_DIR`` and ``EPV_DEBUG``.

        Returns:
            LoaderConfig: Config with environment values, defaults otherwise.
        """
        base_dir = os.environ.get(BASE_DIR_ENV, "")
        debug = os.environ.get(DEBUG_ENV, "").strip().lower() in _TRUTHY
        logger.debug("Loader config from env: base_dir=%r debug=%s", base_dir, debug)
        return cls(base_dir=base_dir, debug=debug)

    def with_overrides(
        self,
        *,
        base_dir: str | None = None,
        debug: bool | None = None,
    ) -> LoaderConfig:
        """Return a copy with the non-None overrides applied."""
        return replace(
            self,
            base_dir=self.base_dir if base_dir is None else base_dir,
            debug=self.debug if debug is None else debug,
        )
