# topmark:header:start
#
#   project      : MakeHelp
#   file         : strategies_makehelp.py
#   file_relpath : tests/strategies_makehelp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for documentation models and hostile strings.

The text strategies deliberately over-sample characters that matter to at least
one output format (``$``, quotes, backticks, markup delimiters, ``<``, ``&``,
ANSI escapes) so property tests reach the escaping edge cases quickly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from makehelp.model import UNCATEGORIZED, Category, DocumentationModel, FileDoc, Target, Variable
from makehelp.model.builder import build_target

Draw = Callable[[st.SearchStrategy[Any]], Any]

# Characters with a special meaning in make, shell, HTML, Markdown or ANSI
HOSTILE_CHARS: tuple[str, ...] = (
    "$",
    '"',
    "'",
    "`",
    "\\",
    "*",
    "_",
    "[",
    "]",
    "(",
    ")",
    "#",
    "<",
    ">",
    "&",
    "\n",
    "\r",
    "\t",
    "\x1b",
    ":",
)

BLACKLIST_CATEGORIES: tuple[Any, ...] = ("Cs",)

hostile_text: st.SearchStrategy[str] = st.text(
    alphabet=st.one_of(
        st.sampled_from(HOSTILE_CHARS),
        st.characters(blacklist_categories=BLACKLIST_CATEGORIES),
    ),
    max_size=40,
)

identifiers: st.SearchStrategy[str] = st.from_regex(
    r"[A-Za-z_][A-Za-z0-9_.-]{0,15}", fullmatch=True
)

# Names as they occur in makefiles, occasionally with markup characters
target_names: st.SearchStrategy[str] = st.one_of(
    identifiers,
    st.builds(lambda a, b: f"{a}*{b}", identifiers, identifiers),
    st.builds(lambda a: f"_{a}_", identifiers),
)

urls: st.SearchStrategy[str] = st.one_of(
    st.sampled_from(
        (
            "https://example.com/docs",
            "http://example.com",
            "/abs/path",
            "relative/page.html",
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "data:text/html;base64,PHNjcmlwdD4=",
            "vbscript:msgbox",
            "file:///etc/passwd",
            "",
        )
    ),
    hostile_text,
)


@st.composite
def documentation_lines(draw: Draw) -> tuple[str, ...]:
    """Documentation lines mixing markup, links and hostile characters."""
    pieces: st.SearchStrategy[str] = st.one_of(
        hostile_text,
        st.builds(lambda t: f"**{t}**", identifiers),
        st.builds(lambda t: f"*{t}*", identifiers),
        st.builds(lambda t: f"`{t}`", hostile_text),
        st.builds(lambda t, u: f"[{t}]({u})", identifiers, urls),
    )
    lines: list[list[str]] = draw(st.lists(st.lists(pieces, max_size=4), max_size=3))
    return tuple(" ".join(parts) for parts in lines)


@st.composite
def targets(draw: Draw) -> Target:
    """A target built through `build_target`, so its summary is consistent."""
    variables: list[Variable] = draw(
        st.lists(st.builds(Variable, identifiers, hostile_text), max_size=2)
    )
    return build_target(
        draw(target_names),
        documentation=draw(documentation_lines()),
        aliases=draw(st.lists(target_names, max_size=2)),
        variables=variables,
        source_file=draw(st.sampled_from(("", "Makefile", "/abs/dir/rules.mk"))),
        line_number=draw(st.integers(min_value=0, max_value=500)),
    )


@st.composite
def models(draw: Draw) -> DocumentationModel:
    """Whole documentation models, categorized or not."""
    categorized: bool = draw(st.booleans())
    names: list[str] = (
        draw(st.lists(hostile_text.filter(bool), min_size=1, max_size=3, unique=True))
        if categorized
        else [UNCATEGORIZED]
    )
    categories: tuple[Category, ...] = tuple(
        Category(name, tuple(draw(st.lists(targets(), max_size=3)))) for name in names
    )
    file_docs: list[FileDoc] = draw(
        st.lists(
            st.builds(
                FileDoc,
                st.sampled_from(("Makefile", "mk/a.mk", "mk/b.mk")),
                documentation_lines(),
                st.booleans(),
                st.integers(min_value=0, max_value=5),
            ),
            max_size=3,
        )
    )
    return DocumentationModel(
        file_docs=tuple(file_docs),
        has_categories=categorized,
        categories=categories,
    )
