# topmark:header:start
#
#   project      : CmdParser
#   file         : __init__.py
#   file_relpath : src/cmdparser/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across CmdParser.

The ``cmdparser.core`` package holds the option table model and the error
types. It is safe to import from anywhere (parser, help formatter, CLI, tests)
without pulling in Click or any rendering concerns.

Included modules:

- ``slots``
  Caller-owned result cells (`FlagSlot`, `ValueSlot`) written by the parser.

- ``model``
  `OptionDescriptor`, `ProgramMetadata` and the fail-fast table validation.

- ``errors``
  Parse errors (user input) and table errors (programming mistakes).
"""

from __future__ import annotations
