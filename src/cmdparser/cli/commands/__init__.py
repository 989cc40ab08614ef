# topmark:header:start
#
#   project      : CmdParser
#   file         : __init__.py
#   file_relpath : src/cmdparser/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CmdParser CLI commands."""
