# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    makehelp = "makehelp.cli.main:cli"

All subcommands live in `makehelp.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
