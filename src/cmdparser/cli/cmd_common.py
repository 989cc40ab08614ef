# topmark:header:start
#
#   project      : CmdParser
#   file         : cmd_common.py
#   file_relpath : src/cmdparser/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CmdParser CLI commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cmdparser.cli.errors import CmdParserConfigError
from cmdparser.config.loader import TableConfigError, load_metadata_toml
from cmdparser.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    import click

    from cmdparser.config.logging import CmdParserLogger
    from cmdparser.core.model import ProgramMetadata

logger: CmdParserLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return how many steps above the default WARNING level the user asked for.

    ``0`` means terse output (default or ``-q``), ``1`` is ``-v``, and so on.
    """
    level = int(ctx.find_root().ensure_object(dict).get("verbosity_level", logging.WARNING))
    return max(0, (logging.WARNING - level) // 10)


def load_table(path: Path) -> ProgramMetadata:
    """Load the option table at ``path`` for a command.

    Raises:
        CmdParserConfigError: If the table file cannot be loaded or is invalid.
    """
    try:
        return load_metadata_toml(path)
    except TableConfigError as exc:
        logger.debug("table load failed: %s", exc)
        raise CmdParserConfigError(str(exc)) from exc


def is_quiet(ctx: click.Context) -> bool:
    """Return True if the user asked for terse output with ``-q``."""
    level = int(ctx.find_root().ensure_object(dict).get("verbosity_level", logging.WARNING))
    return level > logging.WARNING
