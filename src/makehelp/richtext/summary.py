# topmark:header:start
#
#   project      : MakeHelp
#   file         : summary.py
#   file_relpath : src/makehelp/richtext/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One-sentence summaries of target documentation.

The summary is the first sentence of the first non-empty documentation line,
parsed with the same inline-markup rules as the rest of the documentation.
A sentence ends at the first ``.``, ``!`` or ``?`` followed by whitespace or by
the end of the line, with these exceptions:

- a ``.`` directly preceded by another ``.`` (an ellipsis) does not end a sentence;
- punctuation inside a code span does not end a sentence.

Leading Markdown heading markers (``# ``) are dropped. A line without a
sentence boundary is returned whole.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from makehelp.richtext.parser import parse
from makehelp.richtext.types import EMPTY_RICH_TEXT, RichText, Segment, SegmentKind

if TYPE_CHECKING:
    from collections.abc import Sequence

_HEADING_RE: Final[re.Pattern[str]] = re.compile(r"^#+\s+")

SENTENCE_TERMINATORS: Final[str] = ".!?"


def _is_boundary(flat: str, index: int) -> bool:
    ch: str = flat[index]
    if ch not in SENTENCE_TERMINATORS:
        return False
    if ch == "." and index > 0 and flat[index - 1] == ".":
        return False
    following: int = index + 1
    return following == len(flat) or flat[following].isspace()


def _find_boundary(text: RichText, flat: str) -> int | None:
    """Return the offset just past the first sentence terminator in ``flat``."""
    pos = 0
    for seg in text:
        end: int = pos + len(seg.content)
        if seg.kind is not SegmentKind.CODE:
            for index in range(pos, end):
                if _is_boundary(flat, index):
                    return index + 1
        pos = end
    return None


def _truncate(text: RichText, offset: int) -> RichText:
    kept: list[Segment] = []
    pos = 0
    for seg in text:
        end: int = pos + len(seg.content)
        if end <= offset:
            kept.append(seg)
        else:
            kept.append(Segment(seg.kind, seg.content[: offset - pos], seg.url))
            break
        pos = end
    return RichText(tuple(kept))


def first_sentence(text: RichText) -> RichText:
    """Cut ``text`` after its first sentence; return it unchanged if there is none."""
    flat: str = text.plain_text()
    boundary: int | None = _find_boundary(text, flat)
    if boundary is None:
        return text
    return _truncate(text, boundary)


def summarize(documentation: Sequence[str]) -> RichText:
    """Return the one-sentence summary of a documentation block.

    Args:
        documentation (Sequence[str]): Documentation lines, in source order.

    Returns:
        RichText: The parsed first sentence, or an empty `RichText` when every
            line is blank.
    """
    line: str = next((ln.strip() for ln in documentation if ln.strip()), "")
    if not line:
        return EMPTY_RICH_TEXT
    line = _HEADING_RE.sub("", line)
    return first_sentence(parse(line))
