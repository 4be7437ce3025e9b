# topmark:header:start
#
#   project      : MakeHelp
#   file         : html.py
#   file_relpath : src/makehelp/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML renderer.

Every view is a complete ``<!DOCTYPE html>`` document. Every literal string
taken from the model goes through `escape_html` before any tag is added, and
rich text is rendered segment by segment so that authored markup becomes tags
while the text inside stays escaped. Links are emitted as ``<a href>`` only
when `is_safe_url` accepts the URL; otherwise the link text is rendered alone.

With ``use_color`` enabled a stylesheet is embedded in ``<head>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from makehelp.config.logging import get_logger
from makehelp.constants import HELP_TITLE
from makehelp.rendering.base import Renderer
from makehelp.rendering.escape import escape_html, is_safe_url
from makehelp.rendering.tokens import Token, TokenKind
from makehelp.richtext import RichText, Segment, SegmentKind, parse

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from makehelp.config.logging import MakehelpLogger
    from makehelp.rendering.config import RendererConfig

logger: MakehelpLogger = get_logger(__name__)

STYLESHEET: Final[str] = """\
    body {
      font-family: -apple-system, "Segoe UI", Roboto, Arial, sans-serif;
      max-width: 960px;
      margin: 2em auto;
      padding: 0 1em;
      line-height: 1.6;
      color: #333;
    }
    h1 { color: #2c3e50; border-bottom: 2px solid #3498db; padding-bottom: 0.5em; }
    h2 { color: #34495e; margin-top: 1.5em; border-bottom: 1px solid #ecf0f1; }
    h3 { color: #34495e; margin-top: 1em; }
    pre, code { background-color: #f8f8f8; border-radius: 3px; }
    pre { border: 1px solid #ddd; padding: 1em; overflow-x: auto; }
    code { padding: 0.2em 0.4em; font-family: Menlo, Consolas, monospace; font-size: 0.9em; }
    ul { list-style-type: none; padding-left: 0; }
    .category { margin-bottom: 2em; }
    .target { margin: 0.5em 0; }
    .target-name { font-weight: bold; color: #27ae60; }
    .alias { color: #d68910; font-style: italic; }
    .summary { color: #555; }
    .variables { color: #7f8c8d; font-size: 0.9em; margin: 0.2em 0 0.5em 1.5em; }
    .variable { color: #8e44ad; }
    .description p, .documentation p, .file p { margin: 0.5em 0; }
    .file { margin-bottom: 1.5em; }
    .source { margin-top: 1em; color: #7f8c8d; font-size: 0.9em; }
    .no-docs { color: #95a5a6; font-style: italic; }
"""


def _link(segment: Segment) -> str:
    if is_safe_url(segment.url):
        return f'<a href="{escape_html(segment.url)}">{escape_html(segment.content)}</a>'
    logger.debug("html: unsafe link URL %r rendered as text", segment.url)
    return escape_html(segment.content)


SEGMENT_HTML: Final[dict[SegmentKind, Callable[[Segment], str]]] = {
    SegmentKind.PLAIN: lambda seg: escape_html(seg.content),
    SegmentKind.BOLD: lambda seg: f"<strong>{escape_html(seg.content)}</strong>",
    SegmentKind.ITALIC: lambda seg: f"<em>{escape_html(seg.content)}</em>",
    SegmentKind.CODE: lambda seg: f"<code>{escape_html(seg.content)}</code>",
    SegmentKind.LINK: _link,
}


def rich_text_html(text: RichText) -> str:
    """Render rich text as escaped inline HTML."""
    return "".join(SEGMENT_HTML[seg.kind](seg) for seg in text)


def _paragraph(raw: str, indent: str) -> str:
    if not raw:
        return f"{indent}<br>\n"
    return f"{indent}<p>{rich_text_html(parse(raw))}</p>\n"


class HtmlRenderer(Renderer):
    """Render help as a standalone HTML document."""

    name = "html"
    mime_type = "text/html"
    extension = ".html"

    def __init__(self, config: RendererConfig | None = None) -> None:
        super().__init__(config)
        self._handlers: dict[TokenKind, Callable[[Token], str]] = {
            TokenKind.USAGE: self._usage,
            TokenKind.DESCRIPTION_START: lambda _t: (
                '  <section class="file-docs">\n'
                "    <h2>Description</h2>\n"
                '    <div class="description">\n'
            ),
            TokenKind.DESCRIPTION_LINE: lambda t: _paragraph(t.text, "      "),
            TokenKind.DESCRIPTION_END: lambda _t: "    </div>\n  </section>\n",
            TokenKind.INCLUDED_START: lambda _t: (
                '  <section class="included-files">\n    <h2>Included files</h2>\n'
            ),
            TokenKind.INCLUDED_FILE: lambda t: (
                f'    <div class="file">\n      <h3>{escape_html(t.text)}</h3>\n'
            ),
            TokenKind.INCLUDED_FILE_LINE: lambda t: _paragraph(t.text, "      "),
            TokenKind.INCLUDED_FILE_END: lambda _t: "    </div>\n",
            TokenKind.INCLUDED_END: lambda _t: "  </section>\n",
            TokenKind.TARGETS_START: lambda _t: (
                '  <section class="targets">\n    <h2>Targets</h2>\n'
            ),
            TokenKind.CATEGORY_START: lambda _t: '    <div class="category">\n',
            TokenKind.CATEGORY_HEADER: lambda t: f"      <h3>{escape_html(t.text)}</h3>\n",
            TokenKind.TARGET_LIST_START: lambda _t: "      <ul>\n",
            TokenKind.TARGET: self._target,
            TokenKind.TARGET_LIST_END: lambda _t: "      </ul>\n",
            TokenKind.CATEGORY_END: lambda _t: "    </div>\n",
            TokenKind.TARGETS_END: lambda _t: "  </section>\n",
            TokenKind.TITLE: lambda t: f"  <h1>Target: {escape_html(t.text)}</h1>\n",
            TokenKind.ALIASES: lambda t: (
                '  <div class="aliases">\n'
                f"    <strong>Aliases:</strong> {escape_html(', '.join(t.items))}\n"
                "  </div>\n"
            ),
            TokenKind.VARIABLES_START: lambda _t: (
                '  <div class="variables">\n    <strong>Variables:</strong>\n    <ul>\n'
            ),
            TokenKind.VARIABLE: self._variable,
            TokenKind.VARIABLES_END: lambda _t: "    </ul>\n  </div>\n",
            TokenKind.DOCUMENTATION_START: lambda _t: '  <div class="documentation">\n',
            TokenKind.DOCUMENTATION_LINE: lambda t: _paragraph(t.text, "    "),
            TokenKind.DOCUMENTATION_END: lambda _t: "  </div>\n",
            TokenKind.NO_DOCUMENTATION: lambda t: (
                f'  <p class="no-docs">{escape_html(t.text)}</p>\n'
            ),
            TokenKind.SOURCE: lambda t: (
                '  <div class="source">\n'
                f"    <strong>Source:</strong> {escape_html(t.text)}\n"
                "  </div>\n"
            ),
        }

    def _document(self, title: str, tokens: tuple[Token, ...], heading: str = "") -> Iterator[str]:
        yield "<!DOCTYPE html>\n<html>\n<head>\n"
        yield '  <meta charset="UTF-8">\n'
        yield f"  <title>{escape_html(title)}</title>\n"
        if self._config.use_color:
            yield f"  <style>\n{STYLESHEET}  </style>\n"
        yield "</head>\n<body>\n"
        if heading:
            yield f"  <h1>{escape_html(heading)}</h1>\n"
        for token in tokens:
            handler = self._handlers.get(token.kind)
            if handler is not None:
                yield handler(token)
        yield "</body>\n</html>\n"

    def _help_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        return self._document(HELP_TITLE, tokens, heading=HELP_TITLE)

    def _target_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        return self._document(f"Target: {tokens[0].text}", tokens)

    def _usage(self, token: Token) -> str:
        return (
            '  <section class="usage">\n'
            "    <h2>Usage</h2>\n"
            f"    <pre>{escape_html(token.text)}</pre>\n"
            "  </section>\n"
        )

    def _target(self, token: Token) -> str:
        target = token.target
        assert target is not None  # static type check
        parts: list[str] = [
            '        <li class="target">\n',
            f'          <span class="target-name">{escape_html(target.name)}</span>',
        ]
        if target.aliases:
            aliases: str = ", ".join(escape_html(a) for a in target.aliases)
            parts.append(f' <span class="alias">({aliases})</span>')
        summary: str = rich_text_html(target.summary)
        if summary:
            parts.append(f': <span class="summary">{summary}</span>')
        parts.append("\n")
        if target.variables:
            names: str = ", ".join(
                f'<code class="variable">{escape_html(v.name)}</code>' for v in target.variables
            )
            parts.append(f'          <div class="variables">\n            Variables: {names}\n')
            parts.append("          </div>\n")
        parts.append("        </li>\n")
        return "".join(parts)

    def _variable(self, token: Token) -> str:
        variable = token.variable
        assert variable is not None  # static type check
        line: str = f'      <li><code class="variable">{escape_html(variable.name)}</code>'
        if variable.description:
            line += f": {rich_text_html(parse(variable.description))}"
        return line + "</li>\n"
