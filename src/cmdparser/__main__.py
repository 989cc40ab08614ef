# topmark:header:start
#
#   project      : CmdParser
#   file         : __main__.py
#   file_relpath : src/cmdparser/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CmdParser via ``python -m cmdparser``.

Equivalent to running the ``cmdparser`` console script; delegates to
:func:`cmdparser.cli.main.cli`.

Examples:
    Run the bundled example program::

        python -m cmdparser demo -v --output=out.c input.txt
"""

from __future__ import annotations

from cmdparser.cli.main import cli

if __name__ == "__main__":
    cli()
