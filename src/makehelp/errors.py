# topmark:header:start
#
#   project      : MakeHelp
#   file         : errors.py
#   file_relpath : src/makehelp/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the MakeHelp library.

These are Click-free so they can be raised from any frontend. The CLI maps them
onto exit codes in `makehelp.cli.errors`.

Rendering is a pure function of its inputs: none of these errors is transient,
so callers should not retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class MakehelpError(Exception):
    """Base class for all MakeHelp errors."""


class RenderError(MakehelpError):
    """Base class for errors raised while rendering a view."""

    def __init__(self, renderer: str, message: str) -> None:
        super().__init__(f"{renderer} renderer: {message}")
        self.renderer: str = renderer


class NilModelError(RenderError):
    """A help view was requested without a documentation model."""

    def __init__(self, renderer: str) -> None:
        super().__init__(renderer, "documentation model cannot be None")


class NilTargetError(RenderError):
    """A target view was requested without a target."""

    def __init__(self, renderer: str) -> None:
        super().__init__(renderer, "target cannot be None")


class UnknownFormatError(MakehelpError):
    """The renderer factory was given a format name it does not know."""

    def __init__(self, name: str, supported: Sequence[str]) -> None:
        super().__init__(f"unknown format: {name!r} (supported: {', '.join(supported)})")
        self.name: str = name
        self.supported: tuple[str, ...] = tuple(supported)


class InvalidConfigError(MakehelpError):
    """Renderer or file configuration has an invalid value."""


class ModelLoadError(MakehelpError):
    """A serialized documentation model could not be read or has the wrong shape."""
