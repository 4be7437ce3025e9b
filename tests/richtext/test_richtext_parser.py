# topmark:header:start
#
#   project      : MakeHelp
#   file         : test_richtext_parser.py
#   file_relpath : tests/richtext/test_richtext_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the inline-markup parser."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from makehelp.richtext import EMPTY_RICH_TEXT, RichText, RichTextParser, Segment, SegmentKind, parse
from makehelp.richtext.parser import MAX_INPUT_LENGTH, MAX_SEGMENT_LENGTH, strip_ansi
from tests.strategies_makehelp import hostile_text


def _kinds(text: RichText) -> list[SegmentKind]:
    return [seg.kind for seg in text]


def test_empty_input_yields_empty_rich_text() -> None:
    assert parse("") == EMPTY_RICH_TEXT
    assert not parse("")


def test_plain_text_is_single_segment() -> None:
    assert parse("just words").segments == (Segment(SegmentKind.PLAIN, "just words"),)


@pytest.mark.parametrize(
    "raw, kind, content",
    [
        ("`make all`", SegmentKind.CODE, "make all"),
        ("**bold**", SegmentKind.BOLD, "bold"),
        ("*italic*", SegmentKind.ITALIC, "italic"),
    ],
)
def test_recognizes_each_span_kind(raw: str, kind: SegmentKind, content: str) -> None:
    assert parse(raw).segments == (Segment(kind, content),)


def test_link_carries_url() -> None:
    text = parse("see [the docs](https://example.com/a_(b)) now")
    assert _kinds(text) == [SegmentKind.PLAIN, SegmentKind.LINK, SegmentKind.PLAIN]
    link = text.segments[1]
    assert link.content == "the docs"
    assert link.url == "https://example.com/a_(b)"


def test_mixed_markup_keeps_order() -> None:
    text = parse("Build with `go build` and **care**.")
    assert _kinds(text) == [
        SegmentKind.PLAIN,
        SegmentKind.CODE,
        SegmentKind.PLAIN,
        SegmentKind.BOLD,
        SegmentKind.PLAIN,
    ]
    assert text.plain_text() == "Build with go build and care."


@pytest.mark.parametrize(
    "raw",
    ["**unterminated", "*open", "`tick", "[text](no close", "[](empty)", "[text] (gap)"],
)
def test_unterminated_markers_are_plain(raw: str) -> None:
    text = parse(raw)
    assert all(seg.kind is SegmentKind.PLAIN for seg in text)
    assert text.plain_text() == raw


def test_backslash_escapes_markers() -> None:
    text = parse(r"a \*not italic\* b")
    assert _kinds(text) == [SegmentKind.PLAIN]
    assert text.plain_text() == "a *not italic* b"


def test_markers_inside_code_are_literal() -> None:
    text = parse("`**x** [y](z)`")
    assert text.segments == (Segment(SegmentKind.CODE, "**x** [y](z)"),)


def test_ansi_sequences_are_stripped() -> None:
    assert strip_ansi("\x1b[31mred\x1b[0m") == "red"
    assert parse("\x1b[1m**bold**\x1b[0m").segments == (Segment(SegmentKind.BOLD, "bold"),)


def test_oversized_input_is_truncated_to_one_plain_segment() -> None:
    raw = "*" * (MAX_INPUT_LENGTH + 10)
    text = parse(raw)
    assert text.segments == (Segment(SegmentKind.PLAIN, raw[:MAX_INPUT_LENGTH]),)


def test_oversized_span_degrades_to_plain() -> None:
    raw = "`" + "x" * (MAX_SEGMENT_LENGTH + 1) + "`"
    assert all(seg.kind is SegmentKind.PLAIN for seg in parse(raw))


def test_markdown_round_trips_authored_markup() -> None:
    raw = "Use **this** and *that* with `code` or [a link](https://x.org)."
    assert parse(raw).markdown() == raw


def test_markdown_keeps_escaped_markers_literal() -> None:
    raw = r"Not \*em\*, not \[a\](javascript:x)."
    emitted = parse(raw).markdown()
    assert emitted == r"Not \*em\*, not \[a\]\(javascript:x\)."
    assert parse(emitted) == parse(raw)


def test_parser_instances_are_interchangeable() -> None:
    raw = "x **y** z"
    assert RichTextParser().parse(raw) == parse(raw)


@given(hostile_text)
def test_parse_never_raises_and_is_deterministic(raw: str) -> None:
    assert parse(raw) == parse(raw)


@given(st.text(alphabet="abc ", max_size=30))
def test_text_without_markers_is_preserved(raw: str) -> None:
    assert parse(raw).plain_text() == raw
