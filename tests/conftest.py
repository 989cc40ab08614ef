# topmark:header:start
#
#   project      : CmdParser
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CmdParser test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
and provides the reference option table used throughout the tests:

| long      | short | argument | default  |
|-----------|-------|----------|----------|
| help      | h     | no       |          |
| verbose   | v     | no       |          |
| output    | o     | yes      | "test.c" |
| (none)    | i     | yes      |          |

Notes:
    Result slots are mutable. Always build a fresh table per test via the
    `make_table` helper or the `table` fixture; never share one between tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, cast

import pytest

from cmdparser.config import logging
from cmdparser.constants import LOG_LEVEL_ENV_VAR
from cmdparser.core.model import OptionDescriptor, ProgramMetadata
from cmdparser.core.slots import FlagSlot, ValueSlot

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_cmdparser_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CmdParser's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    CMDPARSER_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so parser traces are captured in failing tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@dataclass
class DemoTable:
    """The reference option table together with direct handles on its slots."""

    help: FlagSlot
    verbose: FlagSlot
    output: ValueSlot
    sort: ValueSlot
    options: tuple[OptionDescriptor, ...]

    def metadata(self, prog_name: str = "fproc") -> ProgramMetadata:
        """Return program metadata documenting this table."""
        return ProgramMetadata(
            prog_name=prog_name,
            description="File Processor - processes input files and generates output",
            usage_args="[FILE...]",
            options=self.options,
        )


def make_table() -> DemoTable:
    """Return a fresh reference table with new, unset result slots."""
    help_flag = FlagSlot()
    verbose = FlagSlot()
    output = ValueSlot()
    sort = ValueSlot()
    options = (
        OptionDescriptor("Help info", "help", "h", False, None, help_flag),
        OptionDescriptor("Verbose flag", "verbose", "v", False, None, verbose),
        OptionDescriptor("Output file", "output", "o", True, "test.c", output),
        OptionDescriptor("Option sort", None, "i", True, None, sort),
    )
    return DemoTable(help=help_flag, verbose=verbose, output=output, sort=sort, options=options)


@pytest.fixture
def table() -> DemoTable:
    """Provide a fresh reference table for one test."""
    return make_table()


EXPECTED_REFERENCE_HELP = (
    "File Processor - processes input files and generates output\n"
    "\n"
    "Usage: fproc [OPTIONS] [FILE...]\n"
    "\n"
    "Options:\n"
    "  -h, --help                  Help info\n"
    "  -v, --verbose               Verbose flag\n"
    "  -o, --output=ARG            Output file (default: test.c)\n"
    "  -i ARG                      Option sort\n"
)

REFERENCE_TOML = """\
[program]
name = "fproc"
description = "File Processor - processes input files and generates output"
usage_args = "[FILE...]"

[[options]]
help = "Help info"
long = "help"
short = "h"

[[options]]
help = "Verbose flag"
long = "verbose"
short = "v"

[[options]]
help = "Output file"
long = "output"
short = "o"
takes_argument = true
default = "test.c"

[[options]]
help = "Option sort"
short = "i"
takes_argument = true
"""
