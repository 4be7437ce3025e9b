# topmark:header:start
#
#   project      : MakeHelp
#   file         : base.py
#   file_relpath : src/makehelp/rendering/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for format renderers.

A renderer turns a `DocumentationModel` (or a single target) into one textual
artifact. `Renderer` implements the common lifecycle:

    tokens = assemble_*(...)          # shared, format-independent
    for chunk in self._*_chunks(tokens):
        out.write(chunk)              # streamed; write errors propagate

Subclasses set the class-level metadata and override `_help_chunks()` and
`_target_chunks()`. They do not override the public ``write_*`` or
``render_*`` methods.

A renderer holds no mutable state: its configuration and resolved color scheme
are fixed at construction, so one instance may be shared across threads.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, ClassVar

from makehelp.config.logging import get_logger
from makehelp.errors import NilModelError, NilTargetError
from makehelp.rendering.config import RendererConfig
from makehelp.rendering.tokens import (
    assemble_basic_target,
    assemble_detailed_target,
    assemble_help,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TextIO

    from makehelp.config.logging import MakehelpLogger
    from makehelp.model.types import DocumentationModel, Target
    from makehelp.rendering.colors import ColorScheme
    from makehelp.rendering.tokens import Token

logger: MakehelpLogger = get_logger(__name__)


class Renderer:
    """Common contract for all output formats.

    Attributes:
        name (str): Short format name used in error messages and logs.
        mime_type (str): Content type of the produced artifact.
        extension (str): Default file extension, including the dot.
    """

    name: ClassVar[str] = ""
    mime_type: ClassVar[str] = ""
    extension: ClassVar[str] = ""

    def __init__(self, config: RendererConfig | None = None) -> None:
        """Initialize the renderer with an immutable configuration.

        Args:
            config (RendererConfig | None): Renderer options; defaults to
                ``RendererConfig()`` (no color, no base path).

        Raises:
            InvalidConfigError: If ``config`` does not validate.
        """
        self._config: RendererConfig = config if config is not None else RendererConfig()
        self._config.validate()
        self._colors: ColorScheme = self._config.resolved_color_scheme()

    @property
    def config(self) -> RendererConfig:
        """The configuration this renderer was created with."""
        return self._config

    @property
    def colors(self) -> ColorScheme:
        """The color scheme resolved from the configuration."""
        return self._colors

    def content_type(self) -> str:
        """Return the MIME type of the produced artifact."""
        return self.mime_type

    def default_extension(self) -> str:
        """Return the default file extension (with leading dot)."""
        return self.extension

    # --- streaming API -------------------------------------------------------

    def write_help(self, model: DocumentationModel | None, out: TextIO) -> None:
        """Write the help view of ``model`` to ``out``.

        Args:
            model (DocumentationModel | None): The model to render.
            out (TextIO): Output sink. A failing ``write()`` aborts rendering;
                chunks already written are not rolled back.

        Raises:
            NilModelError: If ``model`` is None.
        """
        if model is None:
            raise NilModelError(self.name)
        tokens = assemble_help(model, self._config.base_source_path)
        logger.debug(
            "%s: rendering help for %d target(s) in %d categor(ies)",
            self.name,
            model.target_count(),
            len(model.categories),
        )
        self._emit(self._help_chunks(tokens), out)

    def write_detailed_target(self, target: Target | None, out: TextIO) -> None:
        """Write the detailed view of ``target`` to ``out``.

        Raises:
            NilTargetError: If ``target`` is None.
        """
        if target is None:
            raise NilTargetError(self.name)
        tokens = assemble_detailed_target(target, self._config.base_source_path)
        logger.debug("%s: rendering detailed view of target %r", self.name, target.name)
        self._emit(self._target_chunks(tokens), out)

    def write_basic_target(
        self, name: str, source_file: str, line_number: int, out: TextIO
    ) -> None:
        """Write the view of a target that has no documentation to ``out``."""
        tokens = assemble_basic_target(
            name, source_file, line_number, self._config.base_source_path
        )
        logger.debug("%s: rendering basic view of target %r", self.name, name)
        self._emit(self._target_chunks(tokens), out)

    # --- string API ----------------------------------------------------------

    def render_help(self, model: DocumentationModel | None) -> str:
        """Return the help view of ``model`` as a string."""
        buf = StringIO()
        self.write_help(model, buf)
        return buf.getvalue()

    def render_detailed_target(self, target: Target | None) -> str:
        """Return the detailed view of ``target`` as a string."""
        buf = StringIO()
        self.write_detailed_target(target, buf)
        return buf.getvalue()

    def render_basic_target(self, name: str, source_file: str = "", line_number: int = 0) -> str:
        """Return the view of an undocumented target as a string."""
        buf = StringIO()
        self.write_basic_target(name, source_file, line_number, buf)
        return buf.getvalue()

    # --- extension points ----------------------------------------------------

    def _help_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        """Yield output chunks for a help view.

        Subclasses must implement this method.
        """
        raise NotImplementedError

    def _target_chunks(self, tokens: tuple[Token, ...]) -> Iterator[str]:
        """Yield output chunks for a detailed or basic target view.

        Subclasses must implement this method.
        """
        raise NotImplementedError

    @staticmethod
    def _emit(chunks: Iterable[str], out: TextIO) -> None:
        for chunk in chunks:
            out.write(chunk)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self._config!r})"
