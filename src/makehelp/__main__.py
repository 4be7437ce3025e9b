# topmark:header:start
#
#   project      : MakeHelp
#   file         : __main__.py
#   file_relpath : src/makehelp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MakeHelp via ``python -m makehelp``.

Delegates to `makehelp.cli.main.cli`, the single CLI entry point.

Examples:
    Render a model as Markdown::

        python -m makehelp render help.json --format md
"""

from __future__ import annotations

from makehelp.cli.main import cli

if __name__ == "__main__":
    cli()
