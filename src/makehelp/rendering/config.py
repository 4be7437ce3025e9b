# topmark:header:start
#
#   project      : MakeHelp
#   file         : config.py
#   file_relpath : src/makehelp/rendering/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer configuration.

`RendererConfig` is constructed once and never mutated; each renderer keeps the
instance it was created with. An absent color scheme is represented by
``None`` and resolved by a single rule, `RendererConfig.resolved_color_scheme`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from makehelp.errors import InvalidConfigError
from makehelp.rendering.colors import ColorScheme


@dataclass(frozen=True)
class RendererConfig:
    """Options shared by all renderers.

    Attributes:
        use_color (bool): Emit color (ANSI for terminal formats, a stylesheet
            for HTML).
        color_scheme (ColorScheme | None): Explicit scheme; ``None`` means
            "derive from ``use_color``".
        base_source_path (Path | None): Directory used to shorten absolute
            source paths in ``file:line`` trailers.
    """

    use_color: bool = False
    color_scheme: ColorScheme | None = None
    base_source_path: Path | None = None

    def validate(self) -> None:
        """Check field types.

        ``use_color=True`` without a scheme is valid: a default scheme is
        derived instead of failing.

        Raises:
            InvalidConfigError: If a field holds a value of the wrong type.
        """
        if not isinstance(self.use_color, bool):
            raise InvalidConfigError(
                f"use_color must be a bool, got {type(self.use_color).__name__}"
            )
        if self.color_scheme is not None and not isinstance(self.color_scheme, ColorScheme):
            raise InvalidConfigError(
                f"color_scheme must be a ColorScheme, got {type(self.color_scheme).__name__}"
            )
        if self.base_source_path is not None and not isinstance(self.base_source_path, (str, Path)):
            raise InvalidConfigError(
                f"base_source_path must be a path, got {type(self.base_source_path).__name__}"
            )

    def resolved_color_scheme(self) -> ColorScheme:
        """Return the explicit scheme, or the default derived from ``use_color``."""
        if self.color_scheme is not None:
            return self.color_scheme
        return ColorScheme.default(self.use_color)
