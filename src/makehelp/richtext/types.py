# topmark:header:start
#
#   project      : MakeHelp
#   file         : types.py
#   file_relpath : src/makehelp/richtext/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rich-text value types.

A `RichText` is a flat, ordered sequence of typed `Segment`s produced by the
inline-markup parser. Segments never nest.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Final

# Characters an author may backslash-escape in documentation text
ESCAPABLE: Final[frozenset[str]] = frozenset("`*[]()\\")

_LITERAL_TABLE: Final[dict[int, str]] = str.maketrans({ch: "\\" + ch for ch in ESCAPABLE})


def escape_literal(text: str) -> str:
    """Backslash-escape every `ESCAPABLE` character so ``text`` parses back as plain text."""
    return text.translate(_LITERAL_TABLE)


class SegmentKind(str, Enum):
    """Kind of an inline rich-text segment.

    Attributes:
        PLAIN: Literal text.
        BOLD: ``**text**``.
        ITALIC: ``*text*``.
        CODE: ``` `text` ```.
        LINK: ``[text](url)``; the segment also carries ``url``.
    """

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Segment:
    """One typed span of parsed inline markup.

    Attributes:
        kind (SegmentKind): The segment kind.
        content (str): Visible text, without markup delimiters.
        url (str): Link target; empty for every kind except `SegmentKind.LINK`.
    """

    kind: SegmentKind
    content: str
    url: str = ""


@dataclass(frozen=True)
class RichText:
    """Immutable ordered sequence of segments."""

    segments: tuple[Segment, ...] = ()

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __bool__(self) -> bool:
        return any(seg.content for seg in self.segments)

    def plain_text(self) -> str:
        """Return the visible text with all markup removed."""
        return "".join(seg.content for seg in self.segments)

    def markdown(self) -> str:
        """Return the text with its inline markup re-emitted.

        Literal text is backslash-escaped, so escaped markers stay literal.
        Link URLs are not checked; callers that emit links into a
        document must check them with `makehelp.rendering.escape.is_safe_url`.
        """
        parts: list[str] = []
        for seg in self.segments:
            if seg.kind is SegmentKind.BOLD:
                parts.append(f"**{escape_literal(seg.content)}**")
            elif seg.kind is SegmentKind.ITALIC:
                parts.append(f"*{escape_literal(seg.content)}*")
            elif seg.kind is SegmentKind.CODE:
                parts.append(f"`{seg.content}`")
            elif seg.kind is SegmentKind.LINK:
                parts.append(f"[{escape_literal(seg.content)}]({escape_literal(seg.url)})")
            else:
                parts.append(escape_literal(seg.content))
        return "".join(parts)

    def __str__(self) -> str:
        return self.markdown()


EMPTY_RICH_TEXT: RichText = RichText()
