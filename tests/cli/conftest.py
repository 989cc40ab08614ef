# topmark:header:start
#
#   project      : CmdParser
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running the CmdParser CLI in-process.

`run_cli()` invokes the Click group through `click.testing.CliRunner`;
the `assert_*` helpers check exit codes and echo the output on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import pytest
from click.testing import CliRunner, Result

from cmdparser.cli.exit_codes import ExitCode
from cmdparser.cli.main import cli
from tests.conftest import REFERENCE_TOML

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``argv`` and return the Click result.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["demo", "-v", "in.c"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@pytest.fixture
def table_file(tmp_path: Path) -> Path:
    """Write the reference table to ``fproc.toml`` and return its path."""
    path = tmp_path / "fproc.toml"
    path.write_text(REFERENCE_TOML, encoding="utf-8")
    return path
