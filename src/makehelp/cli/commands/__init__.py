# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``makehelp`` CLI."""

from __future__ import annotations
