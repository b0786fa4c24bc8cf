# epv:header:start
#
#   project      : EPV
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""CLI test helpers for running EPV through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import pytest
from click.testing import CliRunner, Result

from epv.cli.main import cli
from epv.config.logging import TRACE_LEVEL, setup_logging
from epv.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the test logging setup after the CLI replaced the root handler."""
    yield
    setup_logging(TRACE_LEVEL)


def run_cli(argv: str | Sequence[str] | None, env: Mapping[str, str] | None = None) -> Result:
    """Invoke the CLI and return the Click result.

    Classification never touches the filesystem, so no working directory
    setup is needed.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["filetypes"]``.
        env (Mapping[str, str] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj={}, env=dict(env) if env else None)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exception is None or isinstance(result.exception, SystemExit), result.output
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output
