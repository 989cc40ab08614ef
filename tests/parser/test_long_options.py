# topmark:header:start
#
#   project      : CmdParser
#   file         : test_long_options.py
#   file_relpath : tests/parser/test_long_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser tests: long options (``--name``, ``--name=value``, ``--name value``)."""

from __future__ import annotations

from cmdparser.core.errors import (
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from cmdparser.parser import parse
from tests.conftest import DemoTable, make_table, parametrize


def test_long_flag(table: DemoTable) -> None:
    """A long no-argument option sets its flag."""
    result = parse(["prog", "--verbose"], table.options)

    assert result.ok
    assert result.positional_start == 2
    assert table.verbose.value is True
    assert table.help.value is False


def test_long_value_with_equals(table: DemoTable) -> None:
    """``--output=value`` stores the suffix."""
    result = parse(["prog", "--output=out.c"], table.options)

    assert result.ok
    assert table.output.value == "out.c"


def test_long_value_equals_and_separate_are_equivalent() -> None:
    """``--output=test.c`` and ``--output test.c`` yield identical results."""
    inline = make_table()
    separate = make_table()

    r1 = parse(["prog", "--output=x.c", "file"], inline.options)
    r2 = parse(["prog", "--output", "x.c", "file"], separate.options)

    assert inline.output.value == separate.output.value == "x.c"
    assert r1.positionals == r2.positionals == ("file",)


def test_long_value_splits_on_first_equals(table: DemoTable) -> None:
    """Only the first ``=`` separates the name from the value."""
    parse(["prog", "--output=a=b"], table.options)

    assert table.output.value == "a=b"


def test_long_value_may_be_empty(table: DemoTable) -> None:
    """``--output=`` explicitly stores an empty value."""
    result = parse(["prog", "--output="], table.options)

    assert result.ok
    assert table.output.value == ""


def test_inline_value_may_start_with_dash(table: DemoTable) -> None:
    """An ``=``-attached value is taken verbatim even if it looks like an option."""
    parse(["prog", "--output=-x"], table.options)

    assert table.output.value == "-x"


def test_unknown_long_option(table: DemoTable) -> None:
    """An unmatched long name fails with `UnknownOptionError`."""
    result = parse(["prog", "--nope"], table.options)

    assert not result.ok
    assert isinstance(result.error, UnknownOptionError)
    assert result.error.token == "--nope"
    assert result.positional_start == -1


def test_unknown_long_option_with_value_reports_name_only(table: DemoTable) -> None:
    """The error token is the option name without the ``=value`` part."""
    result = parse(["prog", "--nope=1"], table.options)

    assert isinstance(result.error, UnknownOptionError)
    assert result.error.token == "--nope"


def test_long_names_match_exactly(table: DemoTable) -> None:
    """Prefixes of long names are not accepted as abbreviations."""
    result = parse(["prog", "--verb"], table.options)

    assert isinstance(result.error, UnknownOptionError)


def test_missing_argument_at_end(table: DemoTable) -> None:
    """``prog --output`` with nothing after it fails."""
    result = parse(["prog", "--output"], table.options)

    assert isinstance(result.error, MissingArgumentError)
    assert result.error.token == "--output"


def test_missing_argument_before_option(table: DemoTable) -> None:
    """An option-like next token is not swallowed as a value."""
    result = parse(["prog", "--output", "--verbose"], table.options)

    assert isinstance(result.error, MissingArgumentError)
    assert table.verbose.value is False


def test_bare_dash_is_accepted_as_value(table: DemoTable) -> None:
    """A bare ``-`` (stdin/stdout convention) can be an option value."""
    result = parse(["prog", "--output", "-", "in.c"], table.options)

    assert result.ok
    assert table.output.value == "-"
    assert result.positionals == ("in.c",)


@parametrize("value", ["yes", ""])
def test_flag_with_value_is_rejected(table: DemoTable, value: str) -> None:
    """A no-argument long option given ``=value`` is a hard error."""
    result = parse(["prog", f"--verbose={value}"], table.options)

    assert isinstance(result.error, UnexpectedArgumentError)
    assert result.error.token == "--verbose"
    assert table.verbose.value is False


def test_later_occurrence_overrides_earlier(table: DemoTable) -> None:
    """The last value wins."""
    parse(["prog", "--output=a", "--output", "b", "--output=c"], table.options)

    assert table.output.value == "c"
