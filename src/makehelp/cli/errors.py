# topmark:header:start
#
#   project      : MakeHelp
#   file         : errors.py
#   file_relpath : src/makehelp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the MakeHelp CLI.

Usage:
    Commands raise these exceptions (or convert library errors with
    `from_library_error`) to signal failures with standardized messages and
    exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from makehelp.cli.exit_codes import ExitCode
from makehelp.errors import (
    InvalidConfigError,
    MakehelpError,
    ModelLoadError,
    RenderError,
    UnknownFormatError,
)


class MakehelpCliError(click.ClickException):
    """Base class for all MakeHelp CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class MakehelpUsageError(MakehelpCliError):
    """Error for command-line invocation errors (unknown format or target)."""

    exit_code = ExitCode.USAGE_ERROR


class MakehelpDataError(MakehelpCliError):
    """Error for a malformed documentation model."""

    exit_code = ExitCode.DATA_ERROR


class MakehelpFileNotFoundError(MakehelpCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MakehelpRenderError(MakehelpCliError):
    """Error for a renderer rejecting its input."""

    exit_code = ExitCode.RENDER_ERROR


class MakehelpIOError(MakehelpCliError):
    """Error for I/O errors writing the output."""

    exit_code = ExitCode.IO_ERROR


class MakehelpConfigError(MakehelpCliError):
    """Error for configuration errors (invalid file or value)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_library_error(exc: MakehelpError) -> MakehelpCliError:
    """Map a library exception onto the CLI error with the matching exit code."""
    message: str = str(exc)
    if isinstance(exc, UnknownFormatError):
        return MakehelpUsageError(message)
    if isinstance(exc, InvalidConfigError):
        return MakehelpConfigError(message)
    if isinstance(exc, ModelLoadError):
        return MakehelpDataError(message)
    if isinstance(exc, RenderError):
        return MakehelpRenderError(message)
    return MakehelpCliError(message)
