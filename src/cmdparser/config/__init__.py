# topmark:header:start
#
#   project      : CmdParser
#   file         : __init__.py
#   file_relpath : src/cmdparser/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration helpers for CmdParser.

- ``logging``: TRACE-aware logger class, colored formatter and environment-driven
  log level resolution.
- ``loader``: read option tables and program metadata from TOML files.
"""

from __future__ import annotations
