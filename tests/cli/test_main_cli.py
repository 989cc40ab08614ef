# topmark:header:start
#
#   project      : CmdParser
#   file         : test_main_cli.py
#   file_relpath : tests/cli/test_main_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: group-level flags, `version`, and the no-subcommand hint."""

from __future__ import annotations

from cmdparser.constants import CMDPARSER_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
@parametrize("args", [["-v", "version"], ["-vvv", "version"], ["-q", "version"]])
def test_verbose_and_quiet_flags_parse(args: list[str]) -> None:
    """Verbosity flags are accepted by the group."""
    assert_SUCCESS(run_cli(args))


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    """``-v`` together with ``-q`` is a usage error."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_version_plain() -> None:
    """`version` prints just the version string."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output == f"{CMDPARSER_VERSION}\n"


@mark_cli
def test_version_verbose() -> None:
    """With ``-v`` a header precedes the version."""
    result = run_cli(["-v", "--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output == f"CmdParser version:\n    {CMDPARSER_VERSION}\n"


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Invoking the group alone prints a hint followed by the group help."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'cmdparser parse")
    assert "Commands:" in result.output
    for name in ("parse", "help", "demo", "version"):
        assert name in result.output


@mark_cli
def test_group_help_option() -> None:
    """``-h`` is accepted as a help alias for the group."""
    result = run_cli(["-h"])

    assert_SUCCESS(result)
    assert "Usage: cmdparser" in result.output
