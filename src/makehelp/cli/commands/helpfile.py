# topmark:header:start
#
#   project      : MakeHelp
#   file         : helpfile.py
#   file_relpath : src/makehelp/cli/commands/helpfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp `helpfile` command.

Generates an includable makefile with a ``help`` target, one ``help-<target>``
target per documented target, and an ``update-help`` target that reruns this
command.

Examples:
    $ makehelp helpfile help.json --output help.mk --makefile Makefile
    $ echo 'include help.mk' >> Makefile
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from makehelp.cli.color import ColorMode, resolve_color_mode
from makehelp.cli.errors import MakehelpFileNotFoundError, MakehelpIOError, from_library_error
from makehelp.config.logging import get_logger
from makehelp.errors import MakehelpError
from makehelp.helpfile import (
    DEFAULT_HELP_CATEGORY,
    DEFAULT_HELP_FILENAME,
    HelpFileOptions,
    generate_help_file,
)
from makehelp.model.io import load_model

if TYPE_CHECKING:
    from makehelp.cli.console import ClickConsole
    from makehelp.config.io import FileConfig
    from makehelp.config.logging import MakehelpLogger

logger: MakehelpLogger = get_logger(__name__)


def _model_relative_to(model_path: Path, directory: Path) -> str:
    """Return ``model_path`` relative to ``directory`` in makefile (forward-slash) form."""
    try:
        rel: str = os.path.relpath(model_path, directory)
    except ValueError:
        rel = str(model_path)
    return rel.replace(os.sep, "/")


@click.command(
    name="helpfile",
    help="Generate an includable help makefile from a documentation model.",
)
@click.argument(
    "model_path",
    metavar="MODEL",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_HELP_FILENAME,
    show_default=True,
    help="Help makefile to write.",
)
@click.option(
    "--makefile",
    "makefiles",
    multiple=True,
    help="Documented makefile; 'make help' warns when it is newer than the help file. "
    "Repeatable.",
)
@click.option(
    "--help-category",
    "help_category",
    default=DEFAULT_HELP_CATEGORY,
    show_default=True,
    help="Category of the generated help targets (used when the model is categorized).",
)
def helpfile_command(
    *,
    model_path: Path,
    output_path: Path,
    makefiles: tuple[str, ...],
    help_category: str,
) -> None:
    """Generate an includable help makefile.

    Args:
        model_path (Path): JSON documentation model.
        output_path (Path): Help makefile to write.
        makefiles (tuple[str, ...]): Makefiles checked for staleness.
        help_category (str): Category of the generated targets.

    Raises:
        MakehelpFileNotFoundError: If the model file does not exist.
        MakehelpIOError: If the help file cannot be written.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    file_config: FileConfig = ctx.obj["file_config"]
    color_mode: ColorMode | None = ctx.obj["color_mode"]

    if not model_path.exists():
        raise MakehelpFileNotFoundError(f"model file not found: {model_path}")
    if not makefiles:
        console.warn("no --makefile given; 'make help' cannot detect a stale help file")

    # The help file is printed to a terminal by make, never to our stdout
    use_color: bool = resolve_color_mode(
        color_mode_override=color_mode,
        output_format="make",
        config_color=file_config.color,
        stdout_isatty=False,
    )
    help_dir: Path = output_path.parent
    options = HelpFileOptions(
        makefiles=makefiles,
        makefile_dir=str(help_dir) if str(help_dir) != "." else "",
        help_filename=output_path.name,
        help_category=help_category,
        model_filename=_model_relative_to(model_path, help_dir),
        use_color=use_color,
    )

    try:
        text: str = generate_help_file(load_model(model_path), options)
    except MakehelpError as e:
        raise from_library_error(e) from e

    try:
        output_path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise MakehelpIOError(f"cannot write {output_path}: {e}") from e

    logger.info("Wrote help makefile %s", output_path)
    console.print(f"Wrote {console.styled(str(output_path), bold=True)}")
