# topmark:header:start
#
#   project      : MakeHelp
#   file         : markdown.py
#   file_relpath : src/makehelp/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown renderer.

Two kinds of strings reach a Markdown document, and they are treated
differently:

- *Structural* strings (target names, aliases, paths, category headers) are
  passed through `escape_markdown`, so a target named ``build*test`` cannot
  start an emphasis or a heading by accident. Variable names inside code spans
  use `markdown_code_span` instead, because backslashes are literal there.
- *Documentation body* text is parsed into rich text and re-emitted, so
  authored ``**bold**``, ``*italic*``, code spans and links survive. Links whose
  URL fails `is_safe_url` degrade to their text. Literal text is passed through
  `escape_markdown_body`, so markers the author escaped stay escaped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from makehelp.config.logging import get_logger
from makehelp.constants import HELP_TITLE
from makehelp.rendering.base import Renderer
from makehelp.rendering.escape import (
    escape_markdown,
    escape_markdown_body,
    is_safe_url,
    markdown_code_span,
)
from makehelp.rendering.tokens import Token, TokenKind
from makehelp.richtext import RichText, Segment, SegmentKind, parse

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from makehelp.config.logging import MakehelpLogger
    from makehelp.rendering.config import RendererConfig

logger: MakehelpLogger = get_logger(__name__)


def _link(segment: Segment) -> str:
    if is_safe_url(segment.url):
        return f"[{escape_markdown_body(segment.content)}]({escape_markdown_body(segment.url)})"
    logger.debug("markdown: unsafe link URL %r rendered as text", segment.url)
    return escape_markdown_body(segment.content)


SEGMENT_MARKDOWN: Final[dict[SegmentKind, Callable[[Segment], str]]] = {
    SegmentKind.PLAIN: lambda seg: escape_markdown_body(seg.content),
    SegmentKind.BOLD: lambda seg: f"**{escape_markdown_body(seg.content)}**",
    SegmentKind.ITALIC: lambda seg: f"*{escape_markdown_body(seg.content)}*",
    SegmentKind.CODE: lambda seg: markdown_code_span(seg.content),
    SegmentKind.LINK: _link,
}


def rich_text_markdown(text: RichText) -> str:
    """Re-emit rich text as Markdown, dropping unsafe link targets."""
    return "".join(SEGMENT_MARKDOWN[seg.kind](seg) for seg in text)


def body(raw: str) -> str:
    """Render one documentation body line."""
    return rich_text_markdown(parse(raw))


def _names(items: tuple[str, ...]) -> str:
    return ", ".join(escape_markdown(item) for item in items)


class MarkdownRenderer(Renderer):
    """Render help as a Markdown document."""

    name = "markdown"
    mime_type = "text/markdown"
    extension = ".md"

    def __init__(self, config: RendererConfig | None = None) -> None:
        super().__init__(config)
        self._handlers: dict[TokenKind, Callable[[Token], str]] = {
            TokenKind.USAGE: lambda t: f"## Usage\n\n```\n{t.text}\n```\n\n",
            TokenKind.DESCRIPTION_START: lambda _t: "## Description\n\n",
            TokenKind.DESCRIPTION_LINE: lambda t: f"{body(t.text)}\n",
            TokenKind.DESCRIPTION_END: lambda _t: "\n",
            TokenKind.INCLUDED_START: lambda _t: "## Included files\n\n",
            TokenKind.INCLUDED_FILE: lambda t: f"### {escape_markdown(t.text)}\n\n",
            TokenKind.INCLUDED_FILE_LINE: lambda t: f"{body(t.text)}\n",
            TokenKind.INCLUDED_FILE_END: lambda _t: "\n",
            TokenKind.TARGETS_START: lambda _t: "## Targets\n\n",
            TokenKind.CATEGORY_HEADER: lambda t: f"### {escape_markdown(t.text)}\n\n",
            TokenKind.TARGET: self._target,
            TokenKind.CATEGORY_END: lambda _t: "\n",
            TokenKind.TITLE: lambda t: f"# Target: {escape_markdown(t.text)}\n\n",
            TokenKind.ALIASES: lambda t: f"**Aliases:** {_names(t.items)}\n\n",
            TokenKind.VARIABLES_START: lambda _t: "**Variables:**\n\n",
            TokenKind.VARIABLE: self._variable,
            TokenKind.VARIABLES_END: lambda _t: "\n",
            TokenKind.DOCUMENTATION_START: lambda _t: "## Description\n\n",
            TokenKind.DOCUMENTATION_LINE: lambda t: f"{body(t.text)}\n",
            TokenKind.DOCUMENTATION_END: lambda _t: "\n",
            TokenKind.NO_DOCUMENTATION: lambda t: f"_{t.text}_\n\n",
            TokenKind.SOURCE: lambda t: f"**Source:** {markdown_code_span(t.text)}\n",
        }

    def _chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        for token in tokens:
            handler = self._handlers.get(token.kind)
            if handler is not None:
                yield handler(token)

    def _help_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        yield f"# {HELP_TITLE}\n\n"
        yield from self._chunks(tokens)

    def _target_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        return self._chunks(tokens)

    def _target(self, token: Token) -> str:
        target = token.target
        assert target is not None  # static type check
        line: str = f"- **{escape_markdown(target.name)}**"
        if target.aliases:
            line += f" _({_names(target.aliases)})_"
        summary: str = rich_text_markdown(target.summary)
        if summary:
            line += f": {summary}"
        line += "\n"
        if target.variables:
            names: str = ", ".join(markdown_code_span(v.name) for v in target.variables)
            line += f"  - Variables: {names}\n"
        return line

    def _variable(self, token: Token) -> str:
        variable = token.variable
        assert variable is not None  # static type check
        line: str = f"- {markdown_code_span(variable.name)}"
        if variable.description:
            line += f": {body(variable.description)}"
        return line + "\n"
