# topmark:header:start
#
#   project      : CmdParser
#   file         : __init__.py
#   file_relpath : src/cmdparser/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line front-end for CmdParser.

The CLI is a thin consumer of the library: it loads option tables, calls the
parser and the help formatter, and owns all user-facing output and exit codes.
"""

from __future__ import annotations
