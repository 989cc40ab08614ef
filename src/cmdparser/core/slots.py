# topmark:header:start
#
#   project      : CmdParser
#   file         : slots.py
#   file_relpath : src/cmdparser/core/slots.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result slots written by the parser.

A result slot is a small mutable cell owned by the caller. The parser writes
into it as a side effect of parsing; the caller reads it afterwards. The slot
variant is selected by the descriptor's arity:

- `FlagSlot` for options that take no argument (boolean flag).
- `ValueSlot` for options that take one argument (string value or ``None``).

Example:
    ```python
    verbose = FlagSlot()
    output = ValueSlot()
    # ... build descriptors pointing at these slots and parse ...
    if verbose.value:
        print(output.value)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(slots=True)
class FlagSlot:
    """Boolean result cell for a no-argument option.

    Attributes:
        value (bool): ``True`` once the option was seen on the command line.
    """

    value: bool = False

    def set(self) -> None:
        """Mark the flag as present."""
        self.value = True

    def __bool__(self) -> bool:
        return self.value


@dataclass(slots=True)
class ValueSlot:
    """String result cell for an argument-taking option.

    Attributes:
        value (str | None): The stored argument, the configured default, or ``None``
            when the option was neither supplied nor defaulted.
    """

    value: str | None = None

    def store(self, text: str) -> None:
        """Record ``text`` as the option's value, replacing any earlier one."""
        self.value = text


ResultSlot: TypeAlias = FlagSlot | ValueSlot


def slot_for(takes_argument: bool) -> FlagSlot | ValueSlot:
    """Return a fresh slot of the variant matching ``takes_argument``."""
    return ValueSlot() if takes_argument else FlagSlot()
