# topmark:header:start
#
#   project      : MakeHelp
#   file         : __init__.py
#   file_relpath : src/makehelp/richtext/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rich text: inline-markup parsing and one-sentence summaries."""

from __future__ import annotations

from makehelp.richtext.parser import RichTextParser, parse
from makehelp.richtext.summary import summarize
from makehelp.richtext.types import EMPTY_RICH_TEXT, RichText, Segment, SegmentKind

__all__ = [
    "EMPTY_RICH_TEXT",
    "RichText",
    "RichTextParser",
    "Segment",
    "SegmentKind",
    "parse",
    "summarize",
]
