# topmark:header:start
#
#   project      : MakeHelp
#   file         : make.py
#   file_relpath : src/makehelp/rendering/make.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Makefile-embeddable renderer.

Produces recipe lines for a ``help`` target. The layout is the one of
`TextRenderer`; the difference is purely in how a logical line is written.
A multi-line printable block is never emitted: each logical line is escaped on
its own with `escape_make` and wrapped in its own statement::

    \t@printf '%b\\n' "<escaped line>"

so make and the shell never see a raw line break, an unescaped ``$``, a quote
or a backtick inside the quoted argument. ``printf '%b'`` expands the
two-character ``\\n``/``\\t``/``\\033`` forms back at run time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from makehelp.errors import NilModelError, NilTargetError
from makehelp.rendering.escape import escape_make
from makehelp.rendering.text import TextRenderer
from makehelp.rendering.tokens import assemble_detailed_target, assemble_help

if TYPE_CHECKING:
    from makehelp.model.types import DocumentationModel, Target

PRINTF_PREFIX: Final[str] = "\t@printf '%b\\n' \""
PRINTF_SUFFIX: Final[str] = '"\n'


def printf_line(escaped: str) -> str:
    """Wrap an already escaped line in a recipe ``printf`` statement."""
    return f"{PRINTF_PREFIX}{escaped}{PRINTF_SUFFIX}"


class MakeRenderer(TextRenderer):
    """Render help as Makefile recipe lines."""

    name = "make"
    mime_type = "text/x-makefile"
    extension = ".mk"

    def _format_line(self, line: str) -> str:
        return printf_line(escape_make(line))

    def help_lines(self, model: DocumentationModel | None) -> list[str]:
        """Return the escaped logical lines of the help view.

        Each element is safe to place between double quotes in a recipe; none
        contains a raw line break. Used to embed help into generated makefiles.

        Raises:
            NilModelError: If ``model`` is None.
        """
        if model is None:
            raise NilModelError(self.name)
        tokens = assemble_help(model, self._config.base_source_path)
        return [escape_make(line) for line in self.lines(tokens)]

    def detailed_target_lines(self, target: Target | None) -> list[str]:
        """Return the escaped logical lines of the detailed view of ``target``.

        Raises:
            NilTargetError: If ``target`` is None.
        """
        if target is None:
            raise NilTargetError(self.name)
        tokens = assemble_detailed_target(target, self._config.base_source_path)
        return [escape_make(line) for line in self.lines(tokens)]
