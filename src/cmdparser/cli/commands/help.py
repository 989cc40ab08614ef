# topmark:header:start
#
#   project      : CmdParser
#   file         : help.py
#   file_relpath : src/cmdparser/cli/commands/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser `help` command.

Renders the help text of an option table declared in a TOML file, exactly as
`cmdparser.help.print_help` would for the embedding program.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from cmdparser.cli.cmd_common import load_table
from cmdparser.cli.console import get_console
from cmdparser.help import print_help


@click.command(
    name="help",
    help="Print the generated help text of the option table in TABLE (a TOML file).",
)
@click.argument(
    "table",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--prog",
    "prog_name",
    default=None,
    help="Override the program name shown in the usage line.",
)
def help_command(table: Path, prog_name: str | None) -> None:
    """Print the help text for TABLE."""
    console = get_console(click.get_current_context())
    metadata = load_table(table)
    if prog_name:
        metadata = replace(metadata, prog_name=prog_name)
    print_help(metadata, file=console.out)
