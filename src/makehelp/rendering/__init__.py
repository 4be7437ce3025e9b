# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format renderers for MakeHelp.

Public modules:
    - makehelp.rendering.factory: format resolution and renderer creation
    - makehelp.rendering.config: `RendererConfig`
    - makehelp.rendering.colors: `ColorScheme`
    - makehelp.rendering.escape: per-format escaping and URL safety
    - makehelp.rendering.tokens: shared, format-independent view assembly
"""

from __future__ import annotations

from makehelp.rendering.base import Renderer
from makehelp.rendering.colors import ColorScheme
from makehelp.rendering.config import RendererConfig
from makehelp.rendering.factory import (
    OutputFormat,
    create_renderer,
    resolve_format,
    supported_format_names,
)
from makehelp.rendering.html import HtmlRenderer
from makehelp.rendering.json import JsonRenderer
from makehelp.rendering.make import MakeRenderer
from makehelp.rendering.markdown import MarkdownRenderer
from makehelp.rendering.text import TextRenderer

__all__ = [
    "ColorScheme",
    "HtmlRenderer",
    "JsonRenderer",
    "MakeRenderer",
    "MarkdownRenderer",
    "OutputFormat",
    "Renderer",
    "RendererConfig",
    "TextRenderer",
    "create_renderer",
    "resolve_format",
    "supported_format_names",
]
