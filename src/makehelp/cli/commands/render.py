# topmark:header:start
#
#   project      : MakeHelp
#   file         : render.py
#   file_relpath : src/makehelp/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp `render` command.

Loads a JSON documentation model and renders either the help view or the
view of a single target in one of the supported output formats.

Examples:
  Render the help view to the terminal:

    $ makehelp render help.json

  Render one target as Markdown into a file:

    $ makehelp render help.json --format md --target build --output build.md
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from makehelp.cli.color import ColorMode, resolve_color_mode
from makehelp.cli.errors import (
    MakehelpFileNotFoundError,
    MakehelpIOError,
    MakehelpUsageError,
    from_library_error,
)
from makehelp.config.logging import get_logger
from makehelp.errors import MakehelpError
from makehelp.model.io import load_model
from makehelp.rendering.factory import OutputFormat, create_renderer, resolve_format

if TYPE_CHECKING:
    from makehelp.config.io import FileConfig
    from makehelp.config.logging import MakehelpLogger
    from makehelp.model.types import DocumentationModel, Target
    from makehelp.rendering.base import Renderer

logger: MakehelpLogger = get_logger(__name__)


def _write_view(
    renderer: Renderer,
    model: DocumentationModel,
    target: Target | None,
    out: TextIO,
) -> None:
    if target is None:
        renderer.write_help(model, out)
    elif target.documentation or target.variables:
        renderer.write_detailed_target(target, out)
    else:
        renderer.write_basic_target(target.name, target.source_file, target.line_number, out)


@click.command(
    name="render",
    help="Render a documentation model (JSON) as help output.",
)
@click.argument(
    "model_path",
    metavar="MODEL",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    "format_name",
    default=None,
    help="Output format: make, text, html, markdown, json (or mk, txt, md).",
)
@click.option(
    "--target",
    "-t",
    "target_name",
    default=None,
    help="Render the view of a single target (name or alias) instead of the help view.",
)
@click.option(
    "--base-path",
    "base_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Show absolute source paths relative to this directory.",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
def render_command(
    *,
    model_path: Path,
    format_name: str | None,
    target_name: str | None,
    base_path: Path | None,
    output_path: Path | None,
) -> None:
    """Render a documentation model.

    Args:
        model_path (Path): JSON documentation model.
        format_name (str | None): Output format; falls back to the config file,
            then to ``text``.
        target_name (str | None): Target to render; the help view when None.
        base_path (Path | None): Base directory for source paths.
        output_path (Path | None): Output file; stdout when None.

    Raises:
        MakehelpFileNotFoundError: If the model file does not exist.
        MakehelpUsageError: If the format or target is unknown.
        MakehelpIOError: If the output cannot be written.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    file_config: FileConfig = ctx.obj["file_config"]
    color_mode: ColorMode | None = ctx.obj["color_mode"]

    if not model_path.exists():
        raise MakehelpFileNotFoundError(f"model file not found: {model_path}")

    try:
        fmt: OutputFormat = (
            resolve_format(format_name)
            if format_name is not None
            else (file_config.format or OutputFormat.TEXT)
        )
        model: DocumentationModel = load_model(model_path)
    except MakehelpError as e:
        raise from_library_error(e) from e

    target: Target | None = None
    if target_name is not None:
        target = model.find_target(target_name)
        if target is None:
            raise MakehelpUsageError(f"unknown target: {target_name}")

    use_color: bool = resolve_color_mode(
        color_mode_override=color_mode,
        output_format=fmt.value,
        config_color=file_config.color,
        stdout_isatty=False if output_path is not None else None,
    )
    logger.debug("render: format=%s color=%s output=%s", fmt.value, use_color, output_path)

    try:
        renderer: Renderer = create_renderer(fmt, file_config.renderer_config(use_color, base_path))
        if output_path is None:
            _write_view(renderer, model, target, click.get_text_stream("stdout"))
            return
        try:
            with output_path.open("w", encoding="utf-8", newline="") as out:
                _write_view(renderer, model, target, out)
        except OSError as e:
            raise MakehelpIOError(f"cannot write {output_path}: {e}") from e
    except MakehelpError as e:
        raise from_library_error(e) from e
    logger.info("Wrote %s output to %s", fmt.value, output_path)
