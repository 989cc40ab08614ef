# topmark:header:start
#
#   project      : CmdParser
#   file         : constants.py
#   file_relpath : src/cmdparser/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

CMDPARSER_VERSION: str = get_version("cmdparser")

# Sentinel for "no short name", mirroring the NUL character used by C option tables.
NO_SHORT_NAME: Final[str] = "\0"

# Returned by `parse_options()` when parsing fails.
PARSE_FAILURE: Final[int] = -1

OPTIONS_TERMINATOR: Final[str] = "--"
LONG_PREFIX: Final[str] = "--"
SHORT_PREFIX: Final[str] = "-"
VALUE_SEPARATOR: Final[str] = "="

MAX_HELP_TEXT_LENGTH: Final[int] = 255

# Column at which option help text starts in the rendered help.
HELP_COLUMN: Final[int] = 30
ARG_PLACEHOLDER: Final[str] = "ARG"

LOG_LEVEL_ENV_VAR: Final[str] = "CMDPARSER_LOG_LEVEL"

VALUE_NOT_SET: str = "<not set>"
