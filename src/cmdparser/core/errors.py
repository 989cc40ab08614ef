# topmark:header:start
#
#   project      : CmdParser
#   file         : errors.py
#   file_relpath : src/cmdparser/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for CmdParser.

Two families are kept strictly apart:

- `ParseError` and its subclasses describe problems with the *user input*
  (the argument vector). The parser returns them inside a
  `ParseResult`; callers decide how to report them.
- `OptionTableError` describes a malformed *option table*. This is a
  programming mistake in the embedding application and is raised immediately,
  before any argument is looked at.

The library never prints diagnostics itself.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Classification of user-input parse failures."""

    UNKNOWN_OPTION = "unknown-option"
    MISSING_ARGUMENT = "missing-argument"
    UNEXPECTED_ARGUMENT = "unexpected-argument"


class CmdParserError(Exception):
    """Base class for all CmdParser errors."""


class OptionTableError(CmdParserError, ValueError):
    """Raised when an option table violates its construction invariants.

    Examples: a descriptor with neither a long nor a short name, duplicate
    names, or a result slot whose variant does not match the option's arity.
    """


class ParseError(CmdParserError):
    """Base class for errors caused by the argument vector.

    Attributes:
        kind (ParseErrorKind): Error classification.
        token (str): The offending option as written by the user (e.g. ``--nope``, ``-x``).
    """

    kind: ParseErrorKind

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownOptionError(ParseError):
    """A long or short option name has no matching descriptor."""

    kind = ParseErrorKind.UNKNOWN_OPTION

    def __init__(self, token: str) -> None:
        super().__init__(token, f"unknown option '{token}'")


class MissingArgumentError(ParseError):
    """An argument-taking option has no value available."""

    kind = ParseErrorKind.MISSING_ARGUMENT

    def __init__(self, option: str) -> None:
        super().__init__(option, f"option '{option}' requires an argument")


class UnexpectedArgumentError(ParseError):
    """A no-argument long option was given an ``=value`` suffix."""

    kind = ParseErrorKind.UNEXPECTED_ARGUMENT

    def __init__(self, option: str, value: str) -> None:
        super().__init__(
            option,
            f"option '{option}' does not take an argument, but '{value}' was given",
        )
        self.value = value
