# topmark:header:start
#
#   project      : MakeHelp
#   file         : formats.py
#   file_relpath : src/makehelp/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp `formats` command.

Lists the output formats the renderer factory accepts, with their aliases,
content types and default file extensions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from makehelp.rendering.factory import FORMAT_ALIASES, OutputFormat, create_renderer

if TYPE_CHECKING:
    from makehelp.cli.console import ClickConsole


@click.command(
    name="formats",
    help="List supported output formats.",
)
def formats_command() -> None:
    """List supported output formats."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    console.print(console.heading("Supported output formats:"))
    for fmt in OutputFormat:
        renderer = create_renderer(fmt)
        aliases: list[str] = [alias for alias, target in FORMAT_ALIASES.items() if target is fmt]
        alias_text: str = f" (alias: {', '.join(aliases)})" if aliases else ""
        console.print(
            f"  {console.styled(fmt.value, fg='cyan', bold=True)}{alias_text}"
            f"  {renderer.content_type()}  {renderer.default_extension()}"
        )
