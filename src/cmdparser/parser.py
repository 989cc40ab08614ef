# topmark:header:start
#
#   project      : CmdParser
#   file         : parser.py
#   file_relpath : src/cmdparser/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass command-line option parser.

The parser walks the argument vector once, left to right, starting after the
program name (``argv[0]``). Each token is classified as:

1. ``--``: end of options; everything after it is positional.
2. ``--name`` or ``--name=value``: a long option.
3. ``-abc``: a cluster of short options (bundling); an argument-taking short
   option consumes the rest of the token (``-ovalue``) or the next argument
   (``-o value``) and ends the cluster.
4. Anything else (no leading dash, or a bare ``-``): the first positional
   argument; option scanning stops there.

Results are written into the descriptors' result slots as a side effect.
Defaults of argument-taking options are stored before the scan starts, so an
option that is never supplied still yields its configured value.

Errors abort the scan immediately. Slots written before the offending token
keep their values; nothing after it is touched.

Example:
    ```python
    result = parse(["prog", "-v", "--output=out.c", "in.c"], options)
    if not result.ok:
        print(result.error)
    else:
        print(result.positionals)  # ('in.c',)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdparser.config.logging import get_logger
from cmdparser.constants import (
    LONG_PREFIX,
    OPTIONS_TERMINATOR,
    PARSE_FAILURE,
    SHORT_PREFIX,
    VALUE_SEPARATOR,
)
from cmdparser.core.errors import (
    MissingArgumentError,
    ParseError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from cmdparser.core.model import validate_option_table
from cmdparser.core.slots import FlagSlot, ValueSlot

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cmdparser.config.logging import CmdParserLogger
    from cmdparser.core.model import OptionDescriptor

logger: CmdParserLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a parse call.

    Exactly one of two states:

    - success: ``error is None`` and ``positional_start`` is the index of the first
      positional argument (``len(argv)`` when there is none);
    - failure: ``error`` holds the `ParseError` and ``positional_start`` is
      ``PARSE_FAILURE`` (``-1``).

    Attributes:
        argv (tuple[str, ...]): The argument vector that was parsed (including ``argv[0]``).
        positional_start (int): Index of the first positional argument, or ``-1``.
        error (ParseError | None): The error that aborted the scan, if any.
    """

    argv: tuple[str, ...]
    positional_start: int = PARSE_FAILURE
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """Return True if parsing succeeded."""
        return self.error is None

    @property
    def positionals(self) -> tuple[str, ...]:
        """Return the positional arguments (empty on failure)."""
        if self.error is not None:
            return ()
        return self.argv[self.positional_start :]

    def unwrap(self) -> int:
        """Return the positional start index, raising the parse error on failure.

        Raises:
            ParseError: The error carried by a failed result.
        """
        if self.error is not None:
            raise self.error
        return self.positional_start


class _Scanner:
    """Per-call scanning state over one argument vector.

    Lookup tables are built per call so the parser stays stateless between calls.
    """

    def __init__(self, argv: Sequence[str], options: Sequence[OptionDescriptor]) -> None:
        self.argv = argv
        self.by_long: dict[str, OptionDescriptor] = {
            d.long_name: d for d in options if d.long_name is not None
        }
        self.by_short: dict[str, OptionDescriptor] = {
            d.short_name: d for d in options if d.short_name is not None
        }

    def _next_value(self, index: int) -> str | None:
        """Return ``argv[index + 1]`` if it can serve as an option value."""
        nxt = index + 1
        if nxt >= len(self.argv):
            return None
        candidate = self.argv[nxt]
        # An option-like token is never swallowed as a value; a bare "-" is.
        if candidate.startswith(SHORT_PREFIX) and candidate != SHORT_PREFIX:
            return None
        return candidate

    def scan(self) -> int:
        """Run the scan and return the positional start index.

        Raises:
            ParseError: On the first unknown option or missing/unexpected argument.
        """
        argc = len(self.argv)
        index = 1
        while index < argc:
            token = self.argv[index]

            if token == OPTIONS_TERMINATOR:
                logger.trace("argv[%d]: options terminator", index)
                return index + 1
            if token.startswith(LONG_PREFIX):
                index = self._long_option(index, token)
            elif token.startswith(SHORT_PREFIX) and token != SHORT_PREFIX:
                index = self._short_cluster(index, token)
            else:
                logger.trace("argv[%d]: first positional argument %r", index, token)
                return index
            index += 1
        return argc

    def _long_option(self, index: int, token: str) -> int:
        """Handle ``--name`` / ``--name=value``; return the index of the last consumed token."""
        name, sep, inline = token[len(LONG_PREFIX) :].partition(VALUE_SEPARATOR)
        option = f"{LONG_PREFIX}{name}"
        desc = self.by_long.get(name)
        if desc is None:
            raise UnknownOptionError(option)

        if not desc.takes_argument:
            if sep:
                raise UnexpectedArgumentError(option, inline)
            logger.trace("argv[%d]: flag %s", index, option)
            _store_flag(desc)
            return index

        if sep:
            logger.trace("argv[%d]: %s=%r (inline)", index, option, inline)
            _store_value(desc, inline)
            return index

        value = self._next_value(index)
        if value is None:
            raise MissingArgumentError(option)
        logger.trace("argv[%d]: %s %r", index, option, value)
        _store_value(desc, value)
        return index + 1

    def _short_cluster(self, index: int, token: str) -> int:
        """Handle ``-abc`` / ``-ovalue`` / ``-o value``; return the index of the last consumed token."""
        pos = len(SHORT_PREFIX)
        while pos < len(token):
            char = token[pos]
            option = f"{SHORT_PREFIX}{char}"
            desc = self.by_short.get(char)
            if desc is None:
                raise UnknownOptionError(option)

            if not desc.takes_argument:
                logger.trace("argv[%d]: flag %s", index, option)
                _store_flag(desc)
                pos += 1
                continue

            rest = token[pos + 1 :]
            if rest:
                logger.trace("argv[%d]: %s%r (attached)", index, option, rest)
                _store_value(desc, rest)
                return index

            value = self._next_value(index)
            if value is None:
                raise MissingArgumentError(option)
            logger.trace("argv[%d]: %s %r", index, option, value)
            _store_value(desc, value)
            return index + 1
        return index


def _store_flag(desc: OptionDescriptor) -> None:
    slot = desc.result
    assert isinstance(slot, FlagSlot)
    slot.set()


def _store_value(desc: OptionDescriptor, value: str) -> None:
    slot = desc.result
    assert isinstance(slot, ValueSlot)
    slot.store(value)


def apply_defaults(options: Sequence[OptionDescriptor]) -> None:
    """Store the non-empty default of every argument-taking option in its slot."""
    for desc in options:
        if desc.has_default:
            assert desc.default_value is not None
            _store_value(desc, desc.default_value)


def parse(argv: Sequence[str], options: Sequence[OptionDescriptor]) -> ParseResult:
    """Parse ``argv`` against ``options`` and populate the result slots.

    Args:
        argv (Sequence[str]): Full argument vector; ``argv[0]`` is the program name
            and is skipped.
        options (Sequence[OptionDescriptor]): The option table.

    Returns:
        ParseResult: The positional start index, or the error that stopped the scan.

    Raises:
        OptionTableError: If the option table is malformed (a programming error,
            raised before any argument is examined).
    """
    table: tuple[OptionDescriptor, ...] = tuple(options)
    validate_option_table(table)
    args: tuple[str, ...] = tuple(argv)

    apply_defaults(table)

    try:
        start = _Scanner(args, table).scan()
    except ParseError as exc:
        logger.debug("parse failed: %s", exc)
        return ParseResult(argv=args, error=exc)

    logger.debug("parse ok: %d positional argument(s) from index %d", len(args) - start, start)
    return ParseResult(argv=args, positional_start=start)


def parse_options(argv: Sequence[str], options: Sequence[OptionDescriptor]) -> int:
    """Parse ``argv`` and return the index of the first positional argument.

    This is the sentinel-returning surface: it returns ``len(argv)`` when there
    are no positional arguments and ``PARSE_FAILURE`` (``-1``) on any parse error.
    Use `parse` to get the structured error.

    Args:
        argv (Sequence[str]): Full argument vector including the program name.
        options (Sequence[OptionDescriptor]): The option table.

    Returns:
        int: Positional start index, or ``-1`` on failure.
    """
    return parse(argv, options).positional_start
