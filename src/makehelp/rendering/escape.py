# topmark:header:start
#
#   project      : MakeHelp
#   file         : escape.py
#   file_relpath : src/makehelp/rendering/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-format escaping and URL-scheme validation.

Each output format has its own embedding-safety contract:

| Format   | Function                | Contract                                          |
|----------|-------------------------|---------------------------------------------------|
| make     | `escape_make`           | safe inside ``printf '%b\\n' "..."`` in a recipe   |
| text     | `escape_text`           | identity; bytes pass through                      |
| html     | `escape_html`           | ``& < > " '`` become entities                     |
| markdown | `escape_markdown`       | structural strings only, never documentation body |
| markdown | `escape_markdown_body`  | literal text inside re-emitted documentation body |
| json     | the `json` serializer   | native string escaping                            |

`is_safe_url` decides whether a link may be emitted as a link target at all.
All functions are pure.
"""

from __future__ import annotations

import html
import re
from typing import Final

from makehelp.richtext.types import escape_literal

# Order matters only for readability; every key is a single character.
_MAKE_ESCAPES: Final[dict[str, str]] = {
    "$": "$$",
    '"': '\\"',
    "\\": "\\\\",
    "`": "\\`",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x1b": "\\033",
}

_MAKE_TABLE: Final[dict[int, str]] = str.maketrans(_MAKE_ESCAPES)

_MAKE_UNESCAPES: Final[dict[str, str]] = {v: k for k, v in _MAKE_ESCAPES.items()}

# Longest sequences first so "\\033" wins over "\\0"-like prefixes.
_MAKE_UNESCAPE_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(re.escape(seq) for seq in sorted(_MAKE_UNESCAPES, key=len, reverse=True))
)

MARKDOWN_SPECIAL: Final[str] = "*_`[]()#"

_MARKDOWN_TABLE: Final[dict[int, str]] = str.maketrans({ch: "\\" + ch for ch in MARKDOWN_SPECIAL})

_BACKTICK_RUN_RE: Final[re.Pattern[str]] = re.compile(r"`+")

SAFE_URL_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://")


def escape_make(text: str) -> str:
    """Escape ``text`` for a double-quoted argument of a Makefile recipe line.

    - ``$`` becomes ``$$`` (make variable expansion);
    - ``"``, ``\\`` and backtick are backslash-escaped (shell quoting and
      command substitution);
    - newline, carriage return and tab become the two-character sequences
      ``\\n``, ``\\r``, ``\\t``;
    - the ANSI escape byte becomes the literal ``\\033``, which ``printf '%b'``
      turns back into ESC at run time.

    The result never contains a raw line break.
    """
    return text.translate(_MAKE_TABLE)


def unescape_make(escaped: str) -> str:
    """Reverse `escape_make`."""
    return _MAKE_UNESCAPE_RE.sub(lambda m: _MAKE_UNESCAPES[m.group(0)], escaped)


def escape_text(text: str) -> str:
    """Return ``text`` unchanged; terminals consume raw bytes."""
    return text


def escape_html(text: str) -> str:
    """Escape ``text`` for HTML element content and double-quoted attribute values."""
    return html.escape(text, quote=True)


def escape_markdown(text: str) -> str:
    """Backslash-escape Markdown syntax characters in a structural string.

    Use for target names, aliases, paths and headers. Do not use for
    documentation body text, where authored markup must survive.
    """
    return text.translate(_MARKDOWN_TABLE)


def escape_markdown_body(text: str) -> str:
    """Backslash-escape literal documentation text for a Markdown body.

    Applied to the text the rich-text parser classified as literal (plain
    segments, emphasis content, link text), so a marker the author escaped, or
    one the parser gave up on, cannot turn into live markup or a live link.
    """
    return escape_literal(text)


def markdown_code_span(text: str) -> str:
    """Wrap ``text`` in an inline code span that cannot be closed early.

    The fence is one backtick longer than the longest backtick run in
    ``text``; padding spaces are added when ``text`` starts or ends with a
    backtick.
    """
    longest: int = max((len(m.group(0)) for m in _BACKTICK_RUN_RE.finditer(text)), default=0)
    fence: str = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        return f"{fence} {text} {fence}"
    return f"{fence}{text}{fence}"


def is_safe_url(url: str) -> bool:
    """Return True if ``url`` may be emitted as a link target.

    Accepted:
        - ``http://`` and ``https://`` URLs (scheme compared case-insensitively);
        - absolute paths starting with ``/``;
        - relative references with no ``:`` at all;
        - relative references whose first ``:`` comes after a ``/``
          (the colon belongs to a path segment, not a scheme).

    Everything else carries a non-http scheme (``javascript:``, ``data:``,
    ``vbscript:``, ``file:``, ``ftp:``...) and is rejected, as is the empty
    string.
    """
    if not url:
        return False
    lowered: str = url.lower()
    if lowered.startswith(SAFE_URL_PREFIXES):
        return True
    if url.startswith("/"):
        return True
    colon: int = url.find(":")
    if colon == -1:
        return True
    slash: int = url.find("/")
    return slash != -1 and slash < colon
