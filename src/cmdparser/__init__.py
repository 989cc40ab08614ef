# topmark:header:start
#
#   project      : CmdParser
#   file         : __init__.py
#   file_relpath : src/cmdparser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser package.

CmdParser is a small command-line argument parser driven by a declarative option
table. It classifies each argument in a single pass (short options with bundling,
long options with ``=value``, required arguments, defaults and the ``--``
separator), writes results into caller-owned slots, and renders a help text from
the same table.

Public API:
    - `parse` / `parse_options`: parse an argument vector.
    - `format_help` / `print_help`: render the help text.
    - `OptionDescriptor`, `ProgramMetadata`, `FlagSlot`, `ValueSlot`: table model.
    - `ParseError` and subclasses, `OptionTableError`: errors.
"""

from __future__ import annotations

from cmdparser.constants import NO_SHORT_NAME, PARSE_FAILURE
from cmdparser.core.errors import (
    CmdParserError,
    MissingArgumentError,
    OptionTableError,
    ParseError,
    ParseErrorKind,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from cmdparser.core.model import OptionDescriptor, ProgramMetadata, validate_option_table
from cmdparser.core.slots import FlagSlot, ResultSlot, ValueSlot
from cmdparser.help import format_help, print_help
from cmdparser.parser import ParseResult, parse, parse_options

__all__ = [
    "NO_SHORT_NAME",
    "PARSE_FAILURE",
    "CmdParserError",
    "FlagSlot",
    "MissingArgumentError",
    "OptionDescriptor",
    "OptionTableError",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "ProgramMetadata",
    "ResultSlot",
    "UnexpectedArgumentError",
    "UnknownOptionError",
    "ValueSlot",
    "format_help",
    "parse",
    "parse_options",
    "print_help",
    "validate_option_table",
]
