# epv:header:start
#
#   project      : EPV
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""EPV project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest.
  - `lint`: Ruff lint.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    path = pathlib.Path(__file__).parent / "pyproject.toml"
    try:
        doc: dict[str, Any] = _toml_loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        doc = {}

    classifiers = doc.get("project", {}).get("classifiers", [])
    prefix = "Programming Language :: Python :: "
    versions: set[str] = set()
    for c in classifiers:
        if not c.startswith(prefix):
            continue
        parts = c.removeprefix(prefix).strip().split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add(f"{int(parts[0])}.{int(parts[1])}")

    if not versions:
        warnings.warn(
            f"No Python classifiers in pyproject.toml. Falling back to {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    return sorted(versions, key=lambda s: tuple(int(x) for x in s.split(".")))


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (per Python version)."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install("ruff")
    session.run("ruff", "format", ".")
