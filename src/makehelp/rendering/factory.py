# topmark:header:start
#
#   project      : MakeHelp
#   file         : factory.py
#   file_relpath : src/makehelp/rendering/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer factory.

Format names are resolved once, to an `OutputFormat` member, and the member is
mapped to its renderer class through a single table. Nothing else in the code
base dispatches on format-name strings.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from makehelp.config.logging import get_logger
from makehelp.errors import UnknownFormatError
from makehelp.rendering.html import HtmlRenderer
from makehelp.rendering.json import JsonRenderer
from makehelp.rendering.make import MakeRenderer
from makehelp.rendering.markdown import MarkdownRenderer
from makehelp.rendering.text import TextRenderer

if TYPE_CHECKING:
    from makehelp.config.logging import MakehelpLogger
    from makehelp.rendering.base import Renderer
    from makehelp.rendering.config import RendererConfig

logger: MakehelpLogger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Supported output formats.

    Attributes:
        MAKE: Makefile recipe lines (``printf`` statements).
        TEXT: Plain text; may include ANSI color if enabled.
        HTML: A standalone HTML document.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).
    """

    MAKE = "make"
    TEXT = "text"
    HTML = "html"
    MARKDOWN = "markdown"
    JSON = "json"


# Short forms accepted in addition to the canonical names
FORMAT_ALIASES: Final[dict[str, OutputFormat]] = {
    "mk": OutputFormat.MAKE,
    "txt": OutputFormat.TEXT,
    "md": OutputFormat.MARKDOWN,
}

RENDERER_CLASSES: Final[dict[OutputFormat, type[Renderer]]] = {
    OutputFormat.MAKE: MakeRenderer,
    OutputFormat.TEXT: TextRenderer,
    OutputFormat.HTML: HtmlRenderer,
    OutputFormat.MARKDOWN: MarkdownRenderer,
    OutputFormat.JSON: JsonRenderer,
}


def supported_format_names() -> list[str]:
    """Return every accepted format name: canonical names first, then aliases."""
    return [fmt.value for fmt in OutputFormat] + list(FORMAT_ALIASES)


def resolve_format(name: str | OutputFormat) -> OutputFormat:
    """Resolve a format name or alias (case-insensitive) to an `OutputFormat`.

    Raises:
        UnknownFormatError: If ``name`` is neither a format nor an alias.
    """
    if isinstance(name, OutputFormat):
        return name
    key: str = name.strip().lower()
    try:
        return OutputFormat(key)
    except ValueError:
        pass
    fmt: OutputFormat | None = FORMAT_ALIASES.get(key)
    if fmt is None:
        raise UnknownFormatError(name, supported_format_names())
    return fmt


def create_renderer(name: str | OutputFormat, config: RendererConfig | None = None) -> Renderer:
    """Create the renderer for ``name``.

    Args:
        name (str | OutputFormat): Format name, alias, or member.
        config (RendererConfig | None): Renderer options; defaults apply if None.

    Returns:
        Renderer: A new renderer bound to ``config``.

    Raises:
        UnknownFormatError: If ``name`` is not supported.
        InvalidConfigError: If ``config`` does not validate.
    """
    fmt: OutputFormat = resolve_format(name)
    renderer: Renderer = RENDERER_CLASSES[fmt](config)
    logger.debug("Created %s renderer for format %r", fmt.value, name)
    return renderer
