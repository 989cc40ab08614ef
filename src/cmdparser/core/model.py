# topmark:header:start
#
#   project      : CmdParser
#   file         : model.py
#   file_relpath : src/cmdparser/core/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option table model.

This module defines:
    - `OptionDescriptor`: the static description of one recognized option
      (names, arity, default value and the caller-owned result slot).
    - `ProgramMetadata`: program name, description, positional usage string and
      the option table; consumed by the help formatter.
    - `validate_option_table`: the fail-fast check applied before parsing
      and before formatting.

Ownership:
    - Descriptors and metadata are immutable (``frozen=True``); only the result
      slots they reference are mutable, and only the parser writes to them.
    - Tables are built by the embedding application and outlive every parse call.
      Neither the parser nor the help formatter keeps state between calls.

Example:
    ```python
    from cmdparser import FlagSlot, OptionDescriptor, ValueSlot

    verbose = FlagSlot()
    output = ValueSlot()
    options = (
        OptionDescriptor("Verbose flag", "verbose", "v", result=verbose),
        OptionDescriptor("Output file", "output", "o", True, "test.c", result=output),
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdparser.constants import MAX_HELP_TEXT_LENGTH, NO_SHORT_NAME, VALUE_SEPARATOR
from cmdparser.core.errors import OptionTableError
from cmdparser.core.slots import FlagSlot, ValueSlot, slot_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmdparser.core.slots import ResultSlot


@dataclass(frozen=True, slots=True, eq=False)
class OptionDescriptor:
    """Description of one recognized command-line option.

    The positional field order follows the classic C option-table layout
    ``{help, long, short, has_arg, default, target}``.

    Attributes:
        help_text (str): Human-readable description (display only, at most 255 characters).
        long_name (str | None): Long identifier used as ``--name``; ``None`` for no long form.
        short_name (str | None): Single alphanumeric character used as ``-c``; ``None``
            (or the ``"\\0"`` sentinel, normalized to ``None``) for no short form.
        takes_argument (bool): Whether the option consumes one value.
        default_value (str | None): Value stored before scanning when the option takes an
            argument and the default is non-empty. Ignored otherwise.
        result (FlagSlot | ValueSlot): Caller-owned result cell. When omitted, a slot of
            the variant matching ``takes_argument`` is created.

    Notes:
        Construction does not validate the table; see `validate_option_table`.
        Descriptors compare by identity so two equal-looking options stay distinct.
    """

    help_text: str
    long_name: str | None = None
    short_name: str | None = None
    takes_argument: bool = False
    default_value: str | None = None
    result: ResultSlot = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.short_name == NO_SHORT_NAME:
            object.__setattr__(self, "short_name", None)
        if self.result is None:
            object.__setattr__(self, "result", slot_for(self.takes_argument))

    @property
    def has_long(self) -> bool:
        """Return True if the option has a long form."""
        return self.long_name is not None

    @property
    def has_short(self) -> bool:
        """Return True if the option has a short form."""
        return self.short_name is not None

    @property
    def has_default(self) -> bool:
        """Return True if a non-empty default applies to this option."""
        return self.takes_argument and bool(self.default_value)

    @property
    def display_name(self) -> str:
        """Return the preferred user-facing name (``--long`` over ``-s``)."""
        if self.has_long:
            return f"--{self.long_name}"
        return f"-{self.short_name}"


@dataclass(frozen=True, slots=True)
class ProgramMetadata:
    """Program description consumed by the help formatter.

    Attributes:
        prog_name (str): Program name shown in the usage line.
        description (str): One-line or multi-line description printed first, as-is.
        usage_args (str): Display-only grammar of the positional arguments (e.g. ``[FILE...]``).
        options (tuple[OptionDescriptor, ...]): The option table being documented.
    """

    prog_name: str
    description: str = ""
    usage_args: str = ""
    options: tuple[OptionDescriptor, ...] = ()


def _check_long_name(name: str, seen: set[str]) -> None:
    if not name:
        raise OptionTableError("long option name must not be empty")
    if VALUE_SEPARATOR in name or any(ch.isspace() for ch in name):
        raise OptionTableError(
            f"long option name {name!r} must not contain whitespace or '{VALUE_SEPARATOR}'"
        )
    if name in seen:
        raise OptionTableError(f"duplicate long option name '--{name}'")
    seen.add(name)


def _check_short_name(name: str, seen: set[str]) -> None:
    if len(name) != 1 or not (name.isascii() and name.isalnum()):
        raise OptionTableError(
            f"short option name {name!r} must be a single alphanumeric character"
        )
    if name in seen:
        raise OptionTableError(f"duplicate short option name '-{name}'")
    seen.add(name)


def validate_option_table(options: Iterable[OptionDescriptor]) -> None:
    """Check the construction invariants of an option table.

    Args:
        options (Iterable[OptionDescriptor]): The option table to check.

    Raises:
        OptionTableError: If a descriptor has neither a long nor a short name, a name
            is malformed or duplicated, the help text exceeds 255 characters, or a
            result slot does not match the option's arity.
    """
    seen_long: set[str] = set()
    seen_short: set[str] = set()

    for index, desc in enumerate(options):
        if desc.long_name is None and desc.short_name is None:
            raise OptionTableError(f"option #{index} has neither a long nor a short name")
        if desc.long_name is not None:
            _check_long_name(desc.long_name, seen_long)
        if desc.short_name is not None:
            _check_short_name(desc.short_name, seen_short)

        if len(desc.help_text) > MAX_HELP_TEXT_LENGTH:
            raise OptionTableError(
                f"help text of '{desc.display_name}' exceeds "
                f"{MAX_HELP_TEXT_LENGTH} characters"
            )

        expected: type[FlagSlot | ValueSlot] = ValueSlot if desc.takes_argument else FlagSlot
        if not isinstance(desc.result, expected):
            raise OptionTableError(
                f"option '{desc.display_name}' needs a {expected.__name__} result slot, "
                f"got {type(desc.result).__name__}"
            )
