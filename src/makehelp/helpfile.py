# topmark:header:start
#
#   project      : MakeHelp
#   file         : helpfile.py
#   file_relpath : src/makehelp/helpfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generate an includable ``help.mk``.

The generated file contains:

- a generated-by header (command line and UTC timestamp);
- ``MAKE_HELP_DIR`` (directory of the included file) and
  ``MAKE_HELP_MAKEFILES`` (the documented makefiles);
- a ``help`` target that first warns when a documented makefile is newer than
  the help file, then prints the help view;
- one ``help-<target>`` target per documented target;
- an ``update-help`` target that regenerates the file.

All help text lines come from `MakeRenderer`, so they obey the same
one-``printf``-per-line escaping discipline as ``makehelp render --format make``.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Final

from makehelp.config.logging import get_logger
from makehelp.errors import NilModelError
from makehelp.rendering.config import RendererConfig
from makehelp.rendering.make import MakeRenderer, printf_line

if TYPE_CHECKING:
    from makehelp.config.logging import MakehelpLogger
    from makehelp.model.types import DocumentationModel

logger: MakehelpLogger = get_logger(__name__)

DEFAULT_HELP_FILENAME: Final[str] = "help.mk"
DEFAULT_HELP_CATEGORY: Final[str] = "Help"
DEFAULT_MODEL_FILENAME: Final[str] = "help.json"
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S UTC"

# ANSI yellow for the staleness warning, expanded by printf at run time
_WARN_ON: Final[str] = "\\033[0;33m"
_WARN_OFF: Final[str] = "\\033[0m"


@dataclass(frozen=True)
class HelpFileOptions:
    """Options for `generate_help_file`.

    Attributes:
        makefiles (tuple[str, ...]): Documented makefiles, checked for staleness.
        makefile_dir (str): Directory the help file lives in; makefile paths and
            source trailers are made relative to it.
        help_filename (str): Name of the generated file.
        help_category (str): Category of the generated ``help`` and
            ``update-help`` targets (only used when the model is categorized).
        model_filename (str): Model file passed to ``makehelp helpfile`` by
            ``update-help``, relative to ``makefile_dir``.
        use_color (bool): Emit ANSI color in the printed help.
        command_line (str): Command recorded in the header; derived from the
            other options when empty.
        generated_at (datetime | None): Timestamp recorded in the header; the
            current time when None.
    """

    makefiles: tuple[str, ...] = ()
    makefile_dir: str = ""
    help_filename: str = DEFAULT_HELP_FILENAME
    help_category: str = DEFAULT_HELP_CATEGORY
    model_filename: str = DEFAULT_MODEL_FILENAME
    use_color: bool = False
    command_line: str = ""
    generated_at: datetime | None = None


def _color_flag(options: HelpFileOptions) -> str:
    return " --color always" if options.use_color else " --color never"


def _category_flag(options: HelpFileOptions, *, in_recipe: bool = False) -> str:
    if options.help_category == DEFAULT_HELP_CATEGORY:
        return ""
    quoted: str = shlex.quote(options.help_category)
    # make expands "$" in recipes before the shell sees the line
    return f" --help-category {quoted.replace('$', '$$') if in_recipe else quoted}"


def _relative_makefiles(options: HelpFileOptions) -> list[str]:
    paths: list[str] = []
    for makefile in options.makefiles:
        path: str = os.path.normpath(makefile)
        if options.makefile_dir:
            try:
                path = os.path.relpath(path, os.path.normpath(options.makefile_dir))
            except ValueError:
                paths.append(path)
                continue
        paths.append("$(MAKE_HELP_DIR)" + path.replace(os.sep, "/"))
    return paths


def _header(options: HelpFileOptions) -> list[str]:
    command: str = options.command_line or (
        f"makehelp{_color_flag(options)} helpfile {options.model_filename}"
        f" --output {options.help_filename}{_category_flag(options)}"
    )
    when: datetime = options.generated_at or datetime.now(timezone.utc)
    return [
        "# generated-by: makehelp",
        f"# command: {command}",
        f"# date: {when.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)}",
        "# ---",
        "# DO NOT EDIT",
        "",
        "MAKE_HELP_DIR := $(dir $(lastword $(MAKEFILE_LIST)))",
    ]


def _help_target(options: HelpFileOptions, categorized: bool) -> list[str]:
    lines: list[str] = []
    if categorized:
        lines.append(f"## !category {options.help_category}")
    warning: str = (
        f"Warning: %s is newer than {options.help_filename}. Run make update-help to refresh."
    )
    if options.use_color:
        warning = f"{_WARN_ON}{warning}{_WARN_OFF}"
    lines.extend(
        [
            ".PHONY: help",
            "## Displays help for available targets.",
            "help:",
            "\t@for f in $(MAKE_HELP_MAKEFILES); do \\",
            f'\t  if [ "$$f" -nt "$(MAKE_HELP_DIR){options.help_filename}" ]; then \\',
            f"\t    printf '{warning}\\n' \"$$f\"; \\",
            "\t  fi; \\",
            "\tdone",
        ]
    )
    return lines


def _update_target(
    options: HelpFileOptions, categorized: bool, makefiles: list[str]
) -> list[str]:
    lines: list[str] = []
    makefile_flags: str = "".join(f" --makefile {path}" for path in makefiles)
    if categorized:
        lines.append(f"## !category {options.help_category}")
    lines.extend(
        [
            ".PHONY: update-help",
            f"## Regenerates {options.help_filename} from the documentation model.",
            "update-help:",
            f"\t@makehelp{_color_flag(options)} helpfile $(MAKE_HELP_DIR){options.model_filename}"
            f" --output $(MAKE_HELP_DIR){options.help_filename}"
            f"{makefile_flags}{_category_flag(options, in_recipe=True)}",
        ]
    )
    return lines


def generate_help_file(
    model: DocumentationModel | None, options: HelpFileOptions | None = None
) -> str:
    """Return the contents of an includable help makefile for ``model``.

    Args:
        model (DocumentationModel | None): The documentation model.
        options (HelpFileOptions | None): Generation options; defaults apply if None.

    Returns:
        str: The generated makefile text, ending with a newline.

    Raises:
        NilModelError: If ``model`` is None.
    """
    if model is None:
        raise NilModelError("make")
    opts: HelpFileOptions = options or HelpFileOptions()
    renderer = MakeRenderer(
        RendererConfig(
            use_color=opts.use_color,
            base_source_path=Path(opts.makefile_dir) if opts.makefile_dir else None,
        )
    )

    out: list[str] = [line + "\n" for line in _header(opts)]
    makefiles: list[str] = _relative_makefiles(opts)
    if makefiles:
        out.append(f"MAKE_HELP_MAKEFILES := {' '.join(makefiles)}\n")
    out.append("\n")

    out.extend(line + "\n" for line in _help_target(opts, model.has_categories))
    out.extend(printf_line(line) for line in renderer.help_lines(model))

    for category in model.categories:
        for target in category.targets:
            out.append("\n")
            out.append(f".PHONY: help-{target.name}\n")
            out.append(f"help-{target.name}:\n")
            out.extend(printf_line(line) for line in renderer.detailed_target_lines(target))

    out.append("\n")
    out.extend(line + "\n" for line in _update_target(opts, model.has_categories, makefiles))

    logger.info(
        "Generated %s with %d detailed target(s)", opts.help_filename, model.target_count()
    )
    return "".join(out)
