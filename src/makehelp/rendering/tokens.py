# topmark:header:start
#
#   project      : MakeHelp
#   file         : tokens.py
#   file_relpath : src/makehelp/rendering/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-independent assembly of help views.

Every renderer describes the same facts. Deciding *which* facts appear, and in
what order, happens once here: each view is flattened into an ordered tuple of
`Token`s. A renderer then only maps each `TokenKind` to its own syntax through a
dispatch table, and applies its own escaping.

Token sequences (``[...]`` is optional, ``*`` repeats):

Help view::

    USAGE
    [DESCRIPTION_START DESCRIPTION_LINE* DESCRIPTION_END]
    [INCLUDED_START (INCLUDED_FILE INCLUDED_FILE_LINE* INCLUDED_FILE_END)* INCLUDED_END]
    [TARGETS_START
        (CATEGORY_START [CATEGORY_HEADER] TARGET_LIST_START TARGET* TARGET_LIST_END
         CATEGORY_END)*
     TARGETS_END]

Detailed target view::

    TITLE [ALIASES]
    [VARIABLES_START VARIABLE* VARIABLES_END]
    [SEPARATOR]
    [DOCUMENTATION_START DOCUMENTATION_LINE* DOCUMENTATION_END]
    [SOURCE]

Basic target view::

    TITLE NO_DOCUMENTATION [SOURCE]

``CATEGORY_HEADER`` is never produced for the uncategorized sentinel, so no
renderer can emit a header for it. ``SEPARATOR`` marks the blank line between
the variable list and the documentation body in line-oriented formats.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from makehelp.config.logging import get_logger
from makehelp.constants import NO_DOCUMENTATION_NOTICE, USAGE_LINE

if TYPE_CHECKING:
    from pathlib import Path

    from makehelp.config.logging import MakehelpLogger
    from makehelp.model.types import DocumentationModel, Target, Variable

logger: MakehelpLogger = get_logger(__name__)


class TokenKind(str, Enum):
    """Closed set of semantic elements a help view is made of."""

    # Help view
    USAGE = "usage"
    DESCRIPTION_START = "description_start"
    DESCRIPTION_LINE = "description_line"
    DESCRIPTION_END = "description_end"
    INCLUDED_START = "included_start"
    INCLUDED_FILE = "included_file"
    INCLUDED_FILE_LINE = "included_file_line"
    INCLUDED_FILE_END = "included_file_end"
    INCLUDED_END = "included_end"
    TARGETS_START = "targets_start"
    CATEGORY_START = "category_start"
    CATEGORY_HEADER = "category_header"
    TARGET_LIST_START = "target_list_start"
    TARGET = "target"
    TARGET_LIST_END = "target_list_end"
    CATEGORY_END = "category_end"
    TARGETS_END = "targets_end"

    # Target views
    TITLE = "title"
    ALIASES = "aliases"
    VARIABLES_START = "variables_start"
    VARIABLE = "variable"
    VARIABLES_END = "variables_end"
    SEPARATOR = "separator"
    DOCUMENTATION_START = "documentation_start"
    DOCUMENTATION_LINE = "documentation_line"
    DOCUMENTATION_END = "documentation_end"
    NO_DOCUMENTATION = "no_documentation"
    SOURCE = "source"


@dataclass(frozen=True)
class Token:
    """One semantic element of a view.

    Attributes:
        kind (TokenKind): What the token stands for.
        text (str): Raw (unescaped) text: usage line, documentation line, file
            path, category or target name, or the ``file:line`` location.
        items (tuple[str, ...]): Raw list payload (aliases).
        target (Target | None): Target payload for ``TARGET`` and detailed ``TITLE``.
        variable (Variable | None): Variable payload for ``VARIABLE``.
        source_file (str): Display path for ``SOURCE``.
        line_number (int): Line number for ``SOURCE``.
    """

    kind: TokenKind
    text: str = ""
    items: tuple[str, ...] = ()
    target: Target | None = None
    variable: Variable | None = None
    source_file: str = ""
    line_number: int = 0


def relative_source_path(source_file: str, base_source_path: Path | str | None) -> str:
    """Shorten an absolute ``source_file`` relative to ``base_source_path``.

    Relative paths are returned unchanged; they are already relative to the
    build directory.

    Args:
        source_file (str): Path as recorded by the scanner.
        base_source_path (Path | str | None): Directory to shorten against.

    Returns:
        str: The display path.
    """
    if base_source_path is None or not source_file or not os.path.isabs(source_file):
        return source_file
    try:
        return os.path.relpath(source_file, os.fspath(base_source_path))
    except ValueError:
        # Different drives on Windows
        return source_file


def _source_token(
    source_file: str, line_number: int, base_source_path: Path | str | None
) -> Token:
    path: str = relative_source_path(source_file, base_source_path)
    return Token(
        TokenKind.SOURCE,
        text=f"{path}:{line_number}",
        source_file=path,
        line_number=line_number,
    )


def assemble_help(
    model: DocumentationModel, base_source_path: Path | str | None = None
) -> tuple[Token, ...]:
    """Flatten the help view of ``model`` into tokens.

    Args:
        model (DocumentationModel): The model to describe.
        base_source_path (Path | str | None): Directory used to shorten absolute
            source paths. Renderers that show per-target locations use
            `relative_source_path` with the same value.

    Returns:
        tuple[Token, ...]: The help view, in output order.
    """
    tokens: list[Token] = [Token(TokenKind.USAGE, text=USAGE_LINE)]

    entry = model.entry_point_doc()
    if entry is not None:
        tokens.append(Token(TokenKind.DESCRIPTION_START, text=entry.source_file))
        tokens.extend(Token(TokenKind.DESCRIPTION_LINE, text=line) for line in entry.documentation)
        tokens.append(Token(TokenKind.DESCRIPTION_END))

    included = model.included_file_docs()
    if included:
        tokens.append(Token(TokenKind.INCLUDED_START))
        for doc in included:
            tokens.append(Token(TokenKind.INCLUDED_FILE, text=doc.source_file))
            tokens.extend(
                Token(TokenKind.INCLUDED_FILE_LINE, text=line) for line in doc.documentation
            )
            tokens.append(Token(TokenKind.INCLUDED_FILE_END, text=doc.source_file))
        tokens.append(Token(TokenKind.INCLUDED_END))

    if model.categories:
        tokens.append(Token(TokenKind.TARGETS_START))
        for category in model.categories:
            tokens.append(Token(TokenKind.CATEGORY_START, text=category.name))
            if not category.is_uncategorized:
                tokens.append(Token(TokenKind.CATEGORY_HEADER, text=category.name))
            tokens.append(Token(TokenKind.TARGET_LIST_START))
            tokens.extend(
                Token(TokenKind.TARGET, text=target.name, items=target.aliases, target=target)
                for target in category.targets
            )
            tokens.append(Token(TokenKind.TARGET_LIST_END))
            tokens.append(Token(TokenKind.CATEGORY_END, text=category.name))
        tokens.append(Token(TokenKind.TARGETS_END))

    logger.trace("Assembled help view: %d token(s)", len(tokens))
    return tuple(tokens)


def assemble_detailed_target(
    target: Target, base_source_path: Path | str | None = None
) -> tuple[Token, ...]:
    """Flatten the detailed view of ``target`` into tokens.

    Args:
        target (Target): The target to describe.
        base_source_path (Path | str | None): Directory used to shorten an
            absolute source path in the ``SOURCE`` token.

    Returns:
        tuple[Token, ...]: The detailed target view, in output order.
    """
    tokens: list[Token] = [Token(TokenKind.TITLE, text=target.name, target=target)]

    if target.aliases:
        tokens.append(Token(TokenKind.ALIASES, items=target.aliases))

    if target.variables:
        tokens.append(Token(TokenKind.VARIABLES_START))
        tokens.extend(
            Token(TokenKind.VARIABLE, text=variable.name, variable=variable)
            for variable in target.variables
        )
        tokens.append(Token(TokenKind.VARIABLES_END))

    if target.documentation:
        if target.variables:
            tokens.append(Token(TokenKind.SEPARATOR))
        tokens.append(Token(TokenKind.DOCUMENTATION_START))
        tokens.extend(
            Token(TokenKind.DOCUMENTATION_LINE, text=line) for line in target.documentation
        )
        tokens.append(Token(TokenKind.DOCUMENTATION_END))

    if target.source_file:
        tokens.append(_source_token(target.source_file, target.line_number, base_source_path))

    logger.trace("Assembled detailed view of %r: %d token(s)", target.name, len(tokens))
    return tuple(tokens)


def assemble_basic_target(
    name: str,
    source_file: str,
    line_number: int,
    base_source_path: Path | str | None = None,
) -> tuple[Token, ...]:
    """Flatten the view of an undocumented target into tokens.

    Args:
        name (str): Target name.
        source_file (str): File the target is defined in; empty if unknown.
        line_number (int): Line of the definition.
        base_source_path (Path | str | None): Directory used to shorten an
            absolute ``source_file``.

    Returns:
        tuple[Token, ...]: The basic target view, in output order.
    """
    tokens: list[Token] = [
        Token(TokenKind.TITLE, text=name),
        Token(TokenKind.NO_DOCUMENTATION, text=NO_DOCUMENTATION_NOTICE),
    ]
    if source_file:
        tokens.append(_source_token(source_file, line_number, base_source_path))
    return tuple(tokens)
