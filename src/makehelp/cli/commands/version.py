# topmark:header:start
#
#   project      : MakeHelp
#   file         : version.py
#   file_relpath : src/makehelp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp `version` command.

Prints the current MakeHelp version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from makehelp.constants import MAKEHELP_VERSION

if TYPE_CHECKING:
    from makehelp.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of MakeHelp.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of MakeHelp.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": MAKEHELP_VERSION}))
    else:
        console.print(console.styled(MAKEHELP_VERSION, bold=True))
