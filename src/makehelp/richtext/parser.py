# topmark:header:start
#
#   project      : MakeHelp
#   file         : parser.py
#   file_relpath : src/makehelp/richtext/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline-markup parser for documentation text.

The parser scans left to right and never backtracks past a committed segment.
Recognized markers, tried in this order at every position:

- ``` `code` ```: content runs until the next unescaped backtick.
- ``**bold**``
- ``*italic*``
- ``[text](url)``: ``text`` must be non-empty; ``url`` is not validated here
  (URL safety is a render-time concern). Balanced parentheses are allowed
  inside ``url``.

A backslash before one of ``` ` * [ ] ( ) \\ ``` emits that character literally.
Markers that do not form a complete pair are emitted as plain text; the parser
never raises on malformed input.

Markers do not nest: text inside an open span is taken literally, and the first
complete match wins.
"""

from __future__ import annotations

import re
from typing import Final

from makehelp.config.logging import get_logger
from makehelp.richtext.types import (
    EMPTY_RICH_TEXT,
    ESCAPABLE,
    RichText,
    Segment,
    SegmentKind,
)

logger = get_logger(__name__)

MAX_INPUT_LENGTH: Final[int] = 10 * 1024
MAX_SEGMENT_LENGTH: Final[int] = 2000

_ANSI_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR escape sequences from ``text``."""
    return _ANSI_ESCAPE_RE.sub("", text)


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] in ESCAPABLE:
            out.append(text[i + 1])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _find_unescaped(text: str, delim: str, start: int) -> int:
    """Return the index of the next unescaped ``delim`` at or after ``start``, or -1."""
    i = start
    n = len(text)
    while i < n:
        if text[i] == "\\" and i + 1 < n and text[i + 1] in ESCAPABLE:
            i += 2
            continue
        if text.startswith(delim, i):
            return i
        i += 1
    return -1


def _find_link_destination_end(text: str, start: int) -> int:
    """Return the index of the ``)`` closing a link destination opened before ``start``.

    Parentheses inside the destination must be balanced. Returns -1 if unclosed.
    """
    depth = 0
    i = start
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] in ESCAPABLE:
            i += 2
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return i
            depth -= 1
        i += 1
    return -1


class RichTextParser:
    """Convert raw documentation strings into `RichText`.

    The parser holds no state between calls and can be shared freely.
    """

    def parse(self, raw: str) -> RichText:
        """Parse ``raw`` into an ordered sequence of segments.

        ANSI escape sequences are stripped first. Inputs longer than
        `MAX_INPUT_LENGTH` are truncated and returned as a single plain segment.

        Args:
            raw (str): Free-form documentation text.

        Returns:
            RichText: The parsed segments (empty for empty input).
        """
        text: str = strip_ansi(raw)
        if not text:
            return EMPTY_RICH_TEXT
        if len(text) > MAX_INPUT_LENGTH:
            logger.debug(
                "Documentation text of %d chars truncated to %d chars",
                len(text),
                MAX_INPUT_LENGTH,
            )
            return RichText((Segment(SegmentKind.PLAIN, text[:MAX_INPUT_LENGTH]),))
        return RichText(tuple(self._scan(text)))

    def _scan(self, text: str) -> list[Segment]:
        segments: list[Segment] = []
        plain: list[str] = []

        def flush() -> None:
            if plain:
                segments.append(Segment(SegmentKind.PLAIN, "".join(plain)))
                plain.clear()

        i = 0
        n = len(text)
        while i < n:
            ch = text[i]

            if ch == "\\" and i + 1 < n and text[i + 1] in ESCAPABLE:
                plain.append(text[i + 1])
                i += 2
                continue

            matched: tuple[Segment, int] | None = None
            if ch == "`":
                matched = self._match_delimited(text, i, "`", SegmentKind.CODE)
            elif text.startswith("**", i):
                matched = self._match_delimited(text, i, "**", SegmentKind.BOLD)
                if matched is None:
                    # An unterminated "**" is literal as a whole.
                    plain.append("**")
                    i += 2
                    continue
            elif ch == "*":
                matched = self._match_delimited(text, i, "*", SegmentKind.ITALIC)
            elif ch == "[":
                matched = self._match_link(text, i)

            if matched is None:
                plain.append(ch)
                i += 1
                continue

            segment, i = matched
            flush()
            segments.append(segment)

        flush()
        return segments

    def _match_delimited(
        self,
        text: str,
        start: int,
        delim: str,
        kind: SegmentKind,
    ) -> tuple[Segment, int] | None:
        open_end: int = start + len(delim)
        close: int = _find_unescaped(text, delim, open_end)
        if close <= open_end:
            return None
        content: str = _unescape(text[open_end:close])
        if not content or len(content) > MAX_SEGMENT_LENGTH:
            return None
        return Segment(kind, content), close + len(delim)

    def _match_link(self, text: str, start: int) -> tuple[Segment, int] | None:
        close_bracket: int = _find_unescaped(text, "]", start + 1)
        if close_bracket <= start + 1:
            return None
        if not text.startswith("(", close_bracket + 1):
            return None
        url_start: int = close_bracket + 2
        close_paren: int = _find_link_destination_end(text, url_start)
        if close_paren == -1:
            return None
        content: str = _unescape(text[start + 1 : close_bracket])
        if len(content) > MAX_SEGMENT_LENGTH:
            return None
        url: str = _unescape(text[url_start:close_paren]).strip()
        return Segment(SegmentKind.LINK, content, url), close_paren + 1


_DEFAULT_PARSER: Final[RichTextParser] = RichTextParser()


def parse(raw: str) -> RichText:
    """Parse ``raw`` with the shared default parser."""
    return _DEFAULT_PARSER.parse(raw)
