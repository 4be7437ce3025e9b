# topmark:header:start
#
#   project      : MakeHelp
#   file         : text.py
#   file_relpath : src/makehelp/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text renderer for terminals and ``.txt`` files.

Output is line-oriented. `TextRenderer.lines()` maps tokens to logical lines
(the *line assembler*); `TextRenderer._format_line()` turns one logical line
into output. `makehelp.rendering.make.MakeRenderer` reuses the same assembler
and only overrides the line formatting.

Rich text is flattened to its visible text: markup delimiters are dropped and
link URLs are never shown. ANSI color is added by the color scheme only; text
coming from the model is passed through otherwise untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from makehelp.rendering.base import Renderer
from makehelp.rendering.escape import escape_text
from makehelp.rendering.tokens import Token, TokenKind
from makehelp.richtext import parse

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from makehelp.rendering.colors import Colorizer
    from makehelp.rendering.config import RendererConfig

# Indentation used by the line layout
TARGET_INDENT: str = "  "
DETAIL_INDENT: str = "    "


def _paint(colorizer: Colorizer, text: str) -> str:
    # Never wrap an empty string in color codes
    return colorizer(text) if text else text


def flatten(raw: str) -> str:
    """Return the visible text of a documentation string."""
    return parse(raw).plain_text()


class TextRenderer(Renderer):
    """Render help as plain (optionally ANSI-colored) text."""

    name = "text"
    mime_type = "text/plain"
    extension = ".txt"

    def __init__(self, config: RendererConfig | None = None) -> None:
        super().__init__(config)
        self._line_handlers: dict[TokenKind, Callable[[Token], list[str]]] = {
            TokenKind.USAGE: self._usage,
            TokenKind.DESCRIPTION_START: self._blank,
            TokenKind.DESCRIPTION_LINE: self._description_line,
            TokenKind.INCLUDED_START: self._included_start,
            TokenKind.INCLUDED_FILE: self._included_file,
            TokenKind.INCLUDED_FILE_LINE: self._included_file_line,
            TokenKind.INCLUDED_FILE_END: self._blank,
            TokenKind.TARGETS_START: self._targets_start,
            TokenKind.CATEGORY_HEADER: self._category_header,
            TokenKind.TARGET: self._target,
            TokenKind.TITLE: self._title,
            TokenKind.ALIASES: self._aliases,
            TokenKind.VARIABLES_START: self._variables_start,
            TokenKind.VARIABLE: self._variable,
            TokenKind.SEPARATOR: self._blank,
            TokenKind.DOCUMENTATION_LINE: self._documentation_line,
            TokenKind.NO_DOCUMENTATION: self._no_documentation,
            TokenKind.SOURCE: self._source,
        }

    def lines(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        """Yield the logical (unescaped) output lines for ``tokens``.

        Tokens without a handler (section and list boundaries) produce no
        lines.
        """
        for token in tokens:
            handler = self._line_handlers.get(token.kind)
            if handler is not None:
                yield from handler(token)

    def _format_line(self, line: str) -> str:
        return escape_text(line) + "\n"

    def _help_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        for line in self.lines(tokens):
            yield self._format_line(line)

    def _target_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        for line in self.lines(tokens):
            yield self._format_line(line)

    # --- line handlers -------------------------------------------------------

    def _blank(self, token: Token) -> list[str]:
        return [""]

    def _usage(self, token: Token) -> list[str]:
        return [f"Usage: {token.text}"]

    def _description_line(self, token: Token) -> list[str]:
        return [flatten(token.text)]

    def _included_start(self, token: Token) -> list[str]:
        return ["", "Included files:"]

    def _included_file(self, token: Token) -> list[str]:
        return [f"{TARGET_INDENT}{token.text}"]

    def _included_file_line(self, token: Token) -> list[str]:
        if not token.text:
            return [""]
        return [f"{DETAIL_INDENT}{flatten(token.text)}"]

    def _targets_start(self, token: Token) -> list[str]:
        return ["", "Targets:"]

    def _category_header(self, token: Token) -> list[str]:
        return ["", _paint(self._colors.category_name, f"{token.text}:")]

    def _target(self, token: Token) -> list[str]:
        target = token.target
        assert target is not None  # static type check
        line: str = f"{TARGET_INDENT}- {_paint(self._colors.target_name, target.name)}"
        if target.aliases:
            line += " " + _paint(self._colors.alias, ", ".join(target.aliases))
        summary: str = target.summary.plain_text()
        if summary:
            line += ": " + _paint(self._colors.documentation, summary)
        lines: list[str] = [line]
        if target.variables:
            names: str = ", ".join(v.name for v in target.variables)
            lines.append(f"{DETAIL_INDENT}Vars: {_paint(self._colors.variable, names)}")
        return lines

    def _title(self, token: Token) -> list[str]:
        return [_paint(self._colors.target_name, f"Target: {token.text}")]

    def _aliases(self, token: Token) -> list[str]:
        return [_paint(self._colors.alias, f"Aliases: {', '.join(token.items)}")]

    def _variables_start(self, token: Token) -> list[str]:
        return [_paint(self._colors.variable, "Variables:")]

    def _variable(self, token: Token) -> list[str]:
        variable = token.variable
        assert variable is not None  # static type check
        line: str = f"{TARGET_INDENT}- {_paint(self._colors.variable, variable.name)}"
        if variable.description:
            line += ": " + _paint(self._colors.documentation, flatten(variable.description))
        return [line]

    def _documentation_line(self, token: Token) -> list[str]:
        return [_paint(self._colors.documentation, flatten(token.text))]

    def _no_documentation(self, token: Token) -> list[str]:
        return ["", _paint(self._colors.documentation, token.text)]

    def _source(self, token: Token) -> list[str]:
        return ["", f"Source: {token.text}"]
