# topmark:header:start
#
#   project      : CmdParser
#   file         : version.py
#   file_relpath : src/cmdparser/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser `version` command.

Prints the current CmdParser version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from cmdparser.cli.cmd_common import get_effective_verbosity
from cmdparser.cli.console import get_console
from cmdparser.constants import CMDPARSER_VERSION


@click.command(
    name="version",
    help="Show the current version of CmdParser.",
)
def version_command() -> None:
    """Show the current version of CmdParser."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("CmdParser version:", bold=True, underline=True))
        console.print(f"    {console.styled(CMDPARSER_VERSION, bold=True)}")
    else:
        console.print(console.styled(CMDPARSER_VERSION, bold=True))
