# topmark:header:start
#
#   project      : CmdParser
#   file         : main.py
#   file_relpath : src/cmdparser/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the CmdParser CLI.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from ``CMDPARSER_LOG_LEVEL``; program output goes
  through the console stored in ``ctx.obj["console"]``.
- Subcommands are thin: they load a table, call the library and render its outcome.
"""

from __future__ import annotations

import click

from cmdparser.cli.commands.demo import demo_command
from cmdparser.cli.commands.help import help_command
from cmdparser.cli.commands.parse import parse_command
from cmdparser.cli.commands.version import version_command
from cmdparser.cli.console import ClickConsole
from cmdparser.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from cmdparser.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("verbosity=%s color=%s", ctx.obj["verbosity_level"], enable_color)


@click.group(
    name="cmdparser",
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CmdParser CLI: parse argument vectors and render help for declarative option tables.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the CmdParser CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'cmdparser parse TABLE [ARGS...]' to parse arguments.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(parse_command)

cli.add_command(help_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
