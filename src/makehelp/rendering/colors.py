# topmark:header:start
#
#   project      : MakeHelp
#   file         : colors.py
#   file_relpath : src/makehelp/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color schemes for terminal-oriented renderers.

A `ColorScheme` is an immutable bundle of colorizers, one per semantic role.
Colorizers are plain callables (``str -> str``); the default ones are built with
`click.style` and therefore emit ANSI SGR sequences unconditionally. Whether
color is wanted at all is decided once, when the scheme is derived from the
renderer configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from functools import partial
from typing import TYPE_CHECKING, Protocol

import click

from makehelp.errors import InvalidConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, text: str) -> str:
        """Return ``text`` decorated for display."""
        ...


def no_color(text: str) -> str:
    """Identity colorizer."""
    return text


def style(*, fg: str, bold: bool = False) -> Colorizer:
    """Return a `click.style` colorizer for the given foreground color.

    Raises:
        InvalidConfigError: If ``fg`` is not a color name known to Click.
    """
    try:
        click.style("", fg=fg)
    except TypeError as exc:
        raise InvalidConfigError(f"unknown color name: {fg!r}") from exc
    return partial(click.style, fg=fg, bold=bold or None)


@dataclass(frozen=True)
class ColorScheme:
    """Colorizers for each element of the help output.

    Attributes:
        category_name (Colorizer): Category headers.
        target_name (Colorizer): Target names.
        alias (Colorizer): Target aliases.
        variable (Colorizer): Variable names.
        documentation (Colorizer): Summaries and documentation text.
    """

    category_name: Colorizer = no_color
    target_name: Colorizer = no_color
    alias: Colorizer = no_color
    variable: Colorizer = no_color
    documentation: Colorizer = no_color

    @classmethod
    def plain(cls) -> ColorScheme:
        """Return the scheme that leaves every string untouched."""
        return cls()

    @classmethod
    def ansi(cls) -> ColorScheme:
        """Return the built-in ANSI scheme."""
        return cls(
            category_name=style(fg="cyan", bold=True),
            target_name=style(fg="green", bold=True),
            alias=style(fg="yellow"),
            variable=style(fg="magenta"),
            documentation=style(fg="white"),
        )

    @classmethod
    def default(cls, use_color: bool) -> ColorScheme:
        """Derive the scheme used when none is supplied explicitly."""
        return cls.ansi() if use_color else cls.plain()

    @classmethod
    def from_mapping(
        cls, colors: Mapping[str, str], *, base: ColorScheme | None = None
    ) -> ColorScheme:
        """Build a scheme from role -> color-name pairs.

        Roles not present in ``colors`` keep their colorizer from ``base``
        (the ANSI scheme by default).

        Raises:
            InvalidConfigError: On an unknown role or color name.
        """
        roles: set[str] = {f.name for f in fields(cls)}
        overrides: dict[str, Colorizer] = {}
        for role, color in colors.items():
            key: str = role.replace("-", "_")
            if key not in roles:
                raise InvalidConfigError(
                    f"unknown color role: {role!r} (known: {', '.join(sorted(roles))})"
                )
            overrides[key] = style(fg=color)
        start: ColorScheme = base if base is not None else cls.ansi()
        return cls(**{name: overrides.get(name, getattr(start, name)) for name in roles})
