# topmark:header:start
#
#   project      : CmdParser
#   file         : errors.py
#   file_relpath : src/cmdparser/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CmdParser CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cmdparser.cli.exit_codes import ExitCode


class CmdParserCliError(click.ClickException):
    """Base class for all CmdParser CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class CmdParserUsageError(CmdParserCliError):
    """Error for a rejected argument vector (parse error)."""

    exit_code = ExitCode.USAGE_ERROR


class CmdParserConfigError(CmdParserCliError):
    """Error for a missing, malformed or invalid option table file."""

    exit_code = ExitCode.CONFIG_ERROR
