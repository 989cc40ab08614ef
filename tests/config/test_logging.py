# topmark:header:start
#
#   project      : CmdParser
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the CmdParser logging helpers."""

from __future__ import annotations

import logging

import pytest

from cmdparser.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    CmdParserLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)
from cmdparser.constants import LOG_LEVEL_ENV_VAR
from cmdparser.parser import parse
from tests.conftest import make_table, parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("warn", logging.WARNING),
        ("10", 10),
        ("", None),
        (None, None),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    """Level names are case-insensitive; numbers pass through; unknown is None."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """`CMDPARSER_LOG_LEVEL` is honored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "trace")

    assert resolve_env_log_level() == TRACE_LEVEL


def test_env_log_level_unset() -> None:
    """Without the variable no level is forced."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_cmdparser_logger() -> None:
    """Package loggers expose `trace`."""
    assert isinstance(get_logger("cmdparser.parser"), CmdParserLogger)


def test_parser_emits_trace_records(caplog: pytest.LogCaptureFixture) -> None:
    """Each classified token is logged at TRACE level."""
    table = make_table()
    with caplog.at_level(TRACE_LEVEL, logger="cmdparser.parser"):
        parse(["fproc", "-v", "--output=x", "in.c"], table.options)

    traces = [r.getMessage() for r in caplog.records if r.levelno == TRACE_LEVEL]
    assert any("flag -v" in m for m in traces)
    assert any("first positional argument 'in.c'" in m for m in traces)


def test_parse_failure_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """A failed parse is logged once at DEBUG level."""
    table = make_table()
    with caplog.at_level(logging.DEBUG, logger="cmdparser.parser"):
        parse(["fproc", "--nope"], table.options)

    assert "parse failed: unknown option '--nope'" in caplog.text


def test_chalk_formatter_keeps_message() -> None:
    """Colorizing never drops the formatted message text."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)

    assert "hello world" in ChalkFormatter("%(message)s").format(record)
