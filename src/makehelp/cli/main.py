# topmark:header:start
#
#   project      : MakeHelp
#   file         : main.py
#   file_relpath : src/makehelp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MakeHelp command-line interface.

Group-level options (color, configuration file) are resolved once and placed
into ``ctx.obj``; subcommands read them from there:

- ``ctx.obj["console"]``: `ClickConsole` for user-facing messages;
- ``ctx.obj["color_mode"]``: `ColorMode` from ``--color``/``--no-color`` (or None);
- ``ctx.obj["file_config"]``: `FileConfig` loaded from ``--config`` or discovered.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from makehelp.cli.color import ColorMode, resolve_color_mode
from makehelp.cli.commands.formats import formats_command
from makehelp.cli.commands.helpfile import helpfile_command
from makehelp.cli.commands.render import render_command
from makehelp.cli.commands.version import version_command
from makehelp.cli.console import ClickConsole
from makehelp.cli.errors import MakehelpConfigError
from makehelp.config.io import FileConfig, find_config_file, load_config_file
from makehelp.config.logging import get_logger, resolve_env_log_level, setup_logging
from makehelp.errors import InvalidConfigError

if TYPE_CHECKING:
    from makehelp.config.logging import MakehelpLogger

logger: MakehelpLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (logging, console, color intent, config) on the context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        color_mode (str | None): Value of ``--color``, if given.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit configuration file, if given.

    Raises:
        MakehelpConfigError: If the configuration file is invalid.
    """
    ctx.ensure_object(dict)

    # Internal logging is configured via the environment only
    setup_logging(level=resolve_env_log_level())

    effective_mode: ColorMode | None = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    )
    ctx.obj["color_mode"] = effective_mode

    console_color: bool = resolve_color_mode(
        color_mode_override=effective_mode, output_format=None
    )
    ctx.obj["console"] = ClickConsole(enable_color=console_color)

    file_config = FileConfig()
    try:
        path: Path | None = config_path or find_config_file(Path.cwd())
        if path is not None:
            file_config = load_config_file(path)
            logger.info("Using configuration from %s", path)
    except InvalidConfigError as e:
        raise MakehelpConfigError(str(e)) from e
    ctx.obj["file_config"] = file_config


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render Makefile documentation as make recipes, text, HTML, Markdown or JSON.",
)
@click.option(
    "--color",
    "color_mode",
    type=click.Choice([m.value for m in ColorMode]),
    default=None,
    help="Color output: auto (default), always, or never.",
)
@click.option(
    "--no-color",
    "no_color",
    is_flag=True,
    help="Disable color output (equivalent to --color=never).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (makehelp.toml or pyproject.toml). Discovered if omitted.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the MakeHelp CLI."""
    init_common_state(ctx, color_mode=color_mode, no_color=no_color, config_path=config_path)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'makehelp render MODEL.json' to render help.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(formats_command)

cli.add_command(helpfile_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
