# topmark:header:start
#
#   project      : CmdParser
#   file         : parse.py
#   file_relpath : src/cmdparser/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser `parse` command.

Parses an argument vector against an option table declared in a TOML file and
reports the resulting option values and positional arguments.

Everything after TABLE is handed to the parser verbatim, including ``--``::

    cmdparser parse fproc.toml -v --output=out.c -- -input.txt
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from cmdparser.cli.cli_types import EnumChoiceParam
from cmdparser.cli.cmd_common import get_effective_verbosity, is_quiet, load_table
from cmdparser.cli.console import get_console
from cmdparser.cli.errors import CmdParserUsageError
from cmdparser.cli.exit_codes import ExitCode
from cmdparser.cli.options import OutputFormat
from cmdparser.constants import VALUE_NOT_SET
from cmdparser.core.slots import FlagSlot
from cmdparser.parser import parse

if TYPE_CHECKING:
    from cmdparser.cli.console import ConsoleLike
    from cmdparser.core.model import OptionDescriptor
    from cmdparser.parser import ParseResult


def _slot_value(desc: OptionDescriptor) -> bool | str | None:
    return desc.result.value


def _render_value(desc: OptionDescriptor) -> str:
    if isinstance(desc.result, FlagSlot):
        return "on" if desc.result.value else "off"
    return desc.result.value if desc.result.value is not None else VALUE_NOT_SET


def result_to_dict(
    result: ParseResult, options: tuple[OptionDescriptor, ...]
) -> dict[str, Any]:
    """Return a JSON-serializable view of a parse outcome.

    Args:
        result (ParseResult): The parse outcome.
        options (tuple[OptionDescriptor, ...]): The table that was parsed against.

    Returns:
        dict[str, Any]: ``{"ok", "positional_start", "options", "positionals"}`` on
            success, ``{"ok", "error": {"kind", "token", "message"}}`` on failure.
    """
    if result.error is not None:
        return {
            "ok": False,
            "error": {
                "kind": result.error.kind.value,
                "token": result.error.token,
                "message": result.error.message,
            },
        }
    return {
        "ok": True,
        "positional_start": result.positional_start,
        "options": {desc.display_name: _slot_value(desc) for desc in options},
        "positionals": list(result.positionals),
    }


def _print_text(
    console: ConsoleLike,
    result: ParseResult,
    options: tuple[OptionDescriptor, ...],
    *,
    verbosity: int,
    quiet: bool,
) -> None:
    width = max((len(desc.display_name) for desc in options), default=0)
    if not quiet:
        console.print(console.styled("Options:", bold=True))
    for desc in options:
        console.print(f"  {desc.display_name.ljust(width)}  {_render_value(desc)}")
    if not quiet:
        console.print(console.styled("Positional arguments:", bold=True))
    for number, arg in enumerate(result.positionals, start=1):
        console.print(f"  {number}: {arg}")
    if verbosity > 0:
        console.print(f"(positional arguments start at index {result.positional_start})")


@click.command(
    name="parse",
    help=(
        "Parse ARGS against the option table in TABLE (a TOML file) and show the "
        "resulting option values and positional arguments."
    ),
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.argument(
    "table",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def parse_command(
    table: Path,
    args: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Parse ARGS against TABLE."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    metadata = load_table(table)
    result = parse((metadata.prog_name, *args), metadata.options)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(result_to_dict(result, metadata.options), indent=2))
        if not result.ok:
            ctx.exit(ExitCode.USAGE_ERROR)
        return

    if result.error is not None:
        raise CmdParserUsageError(result.error.message)
    _print_text(
        console,
        result,
        metadata.options,
        verbosity=get_effective_verbosity(ctx),
        quiet=is_quiet(ctx),
    )
