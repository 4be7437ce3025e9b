# topmark:header:start
#
#   project      : MakeHelp
#   file         : console.py
#   file_relpath : src/makehelp/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for the messages the CLI prints around rendered output.

Rendered help never passes through the console: renderers stream it to their
sink. The console prints the rest (format listings, "Wrote ..." notices, the
bare-group hint) to stdout, and warnings and errors to stderr. Diagnostics meant
for developers go through `makehelp.config.logging` instead.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """User-facing output for the MakeHelp CLI.

    Args:
        enable_color (bool): Keep ANSI styling; when False, `styled` returns
            text unchanged and `click.echo` strips any escape that slips through.
        out (TextIO | None): Stream for messages; ``sys.stdout`` when None.
        err (TextIO | None): Stream for warnings and errors; ``sys.stderr`` when None.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` passed through `click.style`, or unchanged without color."""
        return click.style(text, **style_kwargs) if self.enable_color else text

    def heading(self, text: str) -> str:
        """Return ``text`` styled as a section heading."""
        return self.styled(text, bold=True, underline=True)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str) -> None:
        """Write ``Warning: <text>`` to stderr in yellow."""
        click.echo(
            self.styled(f"Warning: {text}", fg="yellow"), file=self.err, color=self.enable_color
        )

    def error(self, text: str) -> None:
        """Write ``Error: <text>`` to stderr in bright red."""
        click.echo(
            self.styled(f"Error: {text}", fg="bright_red"), file=self.err, color=self.enable_color
        )
