# topmark:header:start
#
#   project      : CmdParser
#   file         : exit_codes.py
#   file_relpath : src/cmdparser/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CmdParser CLI.

CmdParser aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CmdParser CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure. The ``demo`` command uses it for any parse error,
            like the classic C example program it reproduces.
        USAGE_ERROR: The parsed argument vector was rejected (unknown option, missing
            or unexpected argument). Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: The option table file is missing, malformed or violates the table
            invariants. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
