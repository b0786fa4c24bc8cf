# epv:header:start
#
#   project      : EPV
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Pytest configuration for the EPV test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from epv.config import logging
from epv.config.model import BASE_DIR_ENV, DEBUG_ENV, LoaderConfig
from epv.diagnostic.collector import MessageCollector
from epv.files.loader import FileLoader

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_epv_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's EPV_* environment never leaks into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(BASE_DIR_ENV, raising=False)
    monkeypatch.delenv(DEBUG_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sink() -> MessageCollector:
    """Return a fresh in-memory diagnostic sink."""
    return MessageCollector()


@pytest.fixture
def loader() -> FileLoader:
    """Return a loader with an empty base directory and debug off."""
    return FileLoader(LoaderConfig())


def make_loader(base_dir: str = "", debug: bool = False) -> FileLoader:
    """Return a loader for the given base directory and debug flag."""
    return FileLoader(LoaderConfig(base_dir=base_dir, debug=debug))
