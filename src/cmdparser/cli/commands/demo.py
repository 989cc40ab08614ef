# topmark:header:start
#
#   project      : CmdParser
#   file         : demo.py
#   file_relpath : src/cmdparser/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser `demo` command: the "File Processor" example program.

This is the reference embedding of the library. It builds a static option table
with caller-owned result slots, parses the raw arguments, and then interprets the
slots itself (help handling included; the library never intercepts help):

```text
-h, --help             Help info
-v, --verbose          Verbose flag
-o, --output=ARG       Output file (default: test.c)
-i ARG                 Option sort
```
"""

from __future__ import annotations

import click

from cmdparser.cli.cli_types import PassthroughCommand
from cmdparser.cli.console import get_console
from cmdparser.cli.exit_codes import ExitCode
from cmdparser.core.model import OptionDescriptor, ProgramMetadata
from cmdparser.core.slots import FlagSlot, ValueSlot
from cmdparser.help import print_help
from cmdparser.parser import parse

DEMO_DESCRIPTION = "File Processor - processes input files and generates output"
DEMO_USAGE_ARGS = "[FILE...]"


def run_demo(prog_name: str, args: tuple[str, ...]) -> int:
    """Run the File Processor example against ``args`` and return its exit code."""
    console = get_console(click.get_current_context())

    help_flag = FlagSlot()
    verbose_flag = FlagSlot()
    output_file = ValueSlot()
    input_file = ValueSlot()

    options = (
        OptionDescriptor("Help info", "help", "h", False, None, help_flag),
        OptionDescriptor("Verbose flag", "verbose", "v", False, None, verbose_flag),
        OptionDescriptor("Output file", "output", "o", True, "test.c", output_file),
        OptionDescriptor("Option sort", None, "i", True, None, input_file),
    )
    meta = ProgramMetadata(
        prog_name=prog_name,
        description=DEMO_DESCRIPTION,
        usage_args=DEMO_USAGE_ARGS,
        options=options,
    )

    result = parse((prog_name, *args), meta.options)
    if result.error is not None:
        console.error(f"{prog_name}: {result.error}")
        return ExitCode.FAILURE

    if help_flag:
        print_help(meta, file=console.out)
        return ExitCode.SUCCESS

    console.print(f"Verbose mode: {'ON' if verbose_flag else 'OFF'}")
    if output_file.value:
        console.print(f"Output file: {output_file.value}")

    console.print("Positional arguments:")
    for number, arg in enumerate(result.positionals, start=1):
        console.print(f"  {number}: {arg}")
    return ExitCode.SUCCESS


@click.command(
    name="demo",
    cls=PassthroughCommand,
    help="Run the File Processor example program; all ARGS go to CmdParser verbatim.",
)
def demo_command(args: tuple[str, ...] = ()) -> None:
    """Run the File Processor example program."""
    ctx = click.get_current_context()
    code = run_demo(ctx.command_path, args)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
