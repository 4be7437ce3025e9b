# topmark:header:start
#
#   project      : MakeHelp
#   file         : builder.py
#   file_relpath : src/makehelp/model/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Constructors for model values that need derived fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from makehelp.model.types import Target, Variable
from makehelp.richtext.summary import summarize

if TYPE_CHECKING:
    from collections.abc import Iterable


def build_target(
    name: str,
    *,
    documentation: Iterable[str] = (),
    aliases: Iterable[str] = (),
    variables: Iterable[Variable] = (),
    source_file: str = "",
    line_number: int = 0,
) -> Target:
    """Build a `Target`, computing its summary from ``documentation`` once.

    Args:
        name (str): Primary target name.
        documentation (Iterable[str]): Full documentation lines.
        aliases (Iterable[str]): Alternative names.
        variables (Iterable[Variable]): Documented variables.
        source_file (str): File the target is defined in.
        line_number (int): Line of the target definition.

    Returns:
        Target: The frozen target.
    """
    doc_lines: tuple[str, ...] = tuple(documentation)
    return Target(
        name=name,
        aliases=tuple(aliases),
        summary=summarize(doc_lines),
        documentation=doc_lines,
        variables=tuple(variables),
        source_file=source_file,
        line_number=line_number,
    )
