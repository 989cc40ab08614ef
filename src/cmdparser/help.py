# topmark:header:start
#
#   project      : CmdParser
#   file         : help.py
#   file_relpath : src/cmdparser/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Help text rendering for an option table.

Layout:

```text
<description>

Usage: <prog_name> [OPTIONS] <usage_args>

Options:
  -h, --help                  Help info
      --only-long=ARG         Long-only option
  -i ARG                      Short-only option
```

The option column is padded to `HELP_COLUMN` (30). A left column that
does not fit is emitted on its own line and the help text starts on the next
line at that column.

Rendering is pure: it never touches result slots and does not depend on any
previous parse.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from cmdparser.constants import ARG_PLACEHOLDER, HELP_COLUMN
from cmdparser.core.model import validate_option_table

if TYPE_CHECKING:
    from cmdparser.core.model import OptionDescriptor, ProgramMetadata


def option_label(desc: OptionDescriptor) -> str:
    """Return the left-column label of ``desc`` (including the two-space indent).

    Args:
        desc (OptionDescriptor): The option to render.

    Returns:
        str: e.g. ``"  -o, --output=ARG"``, ``"      --long"`` or ``"  -i ARG"``.
    """
    if desc.has_long:
        short = f"-{desc.short_name}, " if desc.has_short else "    "
        suffix = f"={ARG_PLACEHOLDER}" if desc.takes_argument else ""
        return f"  {short}--{desc.long_name}{suffix}"
    suffix = f" {ARG_PLACEHOLDER}" if desc.takes_argument else ""
    return f"  -{desc.short_name}{suffix}"


def option_description(desc: OptionDescriptor) -> str:
    """Return the help text of ``desc`` with its ``(default: ...)`` suffix if any."""
    if desc.has_default:
        return f"{desc.help_text} (default: {desc.default_value})"
    return desc.help_text


def format_option_line(desc: OptionDescriptor, column: int = HELP_COLUMN) -> str:
    """Return the aligned help line(s) for one option, without a trailing newline."""
    label = option_label(desc)
    text = option_description(desc)
    if len(label) < column:
        return f"{label.ljust(column)}{text}".rstrip()
    return f"{label}\n{' ' * column}{text}".rstrip()


def usage_line(metadata: ProgramMetadata) -> str:
    """Return ``Usage: <prog> [OPTIONS] <usage_args>``."""
    parts = ["Usage:", metadata.prog_name, "[OPTIONS]"]
    if metadata.usage_args:
        parts.append(metadata.usage_args)
    return " ".join(parts)


def format_help(metadata: ProgramMetadata) -> str:
    """Render the full help text for ``metadata``.

    Args:
        metadata (ProgramMetadata): Program name, description, usage grammar and options.

    Returns:
        str: The help text, newline-terminated.

    Raises:
        OptionTableError: If the option table is malformed.
    """
    validate_option_table(metadata.options)

    lines: list[str] = [
        metadata.description,
        "",
        usage_line(metadata),
        "",
        "Options:",
    ]
    lines.extend(format_option_line(desc) for desc in metadata.options)
    return "\n".join(lines) + "\n"


def print_help(metadata: ProgramMetadata, file: IO[Any] | None = None) -> None:
    """Write the help text for ``metadata`` to ``file`` (stdout by default)."""
    click.echo(format_help(metadata), file=file, nl=False)
